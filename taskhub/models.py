"""
Database models for the Task Hub application.

This module defines SQLAlchemy models for the two entity kinds the API
exposes. Identifiers are store-assigned hex strings (see
``taskhub.identifiers``); a task's owner is stored as a plain identifier
column so that references to users that do not exist are accepted.
"""

from datetime import datetime, timezone
from typing import Any

from taskhub import db
from taskhub.identifiers import IDENTIFIER_LENGTH, new_identifier

# Fields a client may change through a partial task update
TASK_MUTABLE_FIELDS: tuple[str, ...] = ("title", "completed")

TITLE_MAX_LENGTH = 200
NAME_MAX_LENGTH = 120
EMAIL_MAX_LENGTH = 255


class User(db.Model):
    """
    User model representing a person who can own tasks.

    Attributes:
        id: Store-assigned identifier.
        name: Display name.
        email: Contact address, unique across all users.
        created_at: Insertion time, used to order listings. Not exposed.
    """

    __tablename__ = "users"

    id: str = db.Column(db.String(IDENTIFIER_LENGTH), primary_key=True, default=new_identifier)
    name: str = db.Column(db.String(NAME_MAX_LENGTH), nullable=False)
    email: str = db.Column(db.String(EMAIL_MAX_LENGTH), nullable=False, unique=True)
    created_at: datetime = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        index=True,
        default=lambda: datetime.now(timezone.utc)
    )

    def to_dict(self) -> dict[str, Any]:
        """Return the public JSON representation of the user."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
        }

    def __repr__(self) -> str:
        return f"<User {self.id}: {self.email}>"


class Task(db.Model):
    """
    Task model representing a to-do item owned by a user.

    Attributes:
        id: Store-assigned identifier.
        title: Short title describing the task.
        completed: Whether the task is done.
        user_id: Identifier of the owning user. Existence is not enforced.
        created_at: Insertion time, used to order listings. Not exposed.
    """

    __tablename__ = "tasks"

    id: str = db.Column(db.String(IDENTIFIER_LENGTH), primary_key=True, default=new_identifier)
    title: str = db.Column(db.String(TITLE_MAX_LENGTH), nullable=False)
    completed: bool = db.Column(db.Boolean, nullable=False, default=False)
    user_id: str = db.Column(db.String(IDENTIFIER_LENGTH), nullable=False, index=True)
    created_at: datetime = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        index=True,
        default=lambda: datetime.now(timezone.utc)
    )

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the task to its public JSON representation.

        The owner is exposed as ``userId`` to match the API contract.
        """
        return {
            "id": self.id,
            "title": self.title,
            "completed": bool(self.completed),
            "userId": self.user_id,
        }

    def __repr__(self) -> str:
        return f"<Task {self.id}: {self.title}>"
