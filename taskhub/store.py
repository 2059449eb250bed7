"""
Entity store backed by SQLAlchemy.

The store is an explicitly constructed handle that the service layer
receives at construction time. It hides the ORM from the services: every
read and write returns plain dictionaries in the public JSON shape, so an
in-memory fake with the same methods can stand in for it in tests.

Store faults (connectivity, constraint violations, timeouts) are not
translated here. The session is rolled back and the original exception
propagates to the HTTP layer, which reports it as a generic 500.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from taskhub.models import Task, User

logger = logging.getLogger(__name__)


class SqlEntityStore:
    """
    Users and tasks persisted through a Flask-SQLAlchemy extension.

    Args:
        database: The ``SQLAlchemy`` extension bound to the running app.
            Sessions are resolved per call, so one store instance serves
            every request.
    """

    def __init__(self, database: SQLAlchemy) -> None:
        self._db = database

    @property
    def session(self):
        return self._db.session

    @contextmanager
    def _writing(self) -> Iterator[None]:
        """Commit on success, roll back and re-raise on any store error."""
        try:
            yield
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise

    # -- users ------------------------------------------------------------

    def list_users(self) -> list[dict[str, Any]]:
        users = self.session.scalars(select(User).order_by(User.created_at, User.id)).all()
        return [user.to_dict() for user in users]

    def get_user(self, user_id: str) -> dict[str, Any] | None:
        user = self.session.get(User, user_id)
        return user.to_dict() if user else None

    def add_user(self, name: str, email: str) -> dict[str, Any]:
        user = User(name=name, email=email)
        with self._writing():
            self.session.add(user)
        logger.info("Inserted user %s", user.id)
        return user.to_dict()

    # -- tasks ------------------------------------------------------------

    def list_tasks(self) -> list[dict[str, Any]]:
        tasks = self.session.scalars(select(Task).order_by(Task.created_at, Task.id)).all()
        return [task.to_dict() for task in tasks]

    def get_task(self, task_id: str) -> dict[str, Any] | None:
        task = self.session.get(Task, task_id)
        return task.to_dict() if task else None

    def add_task(self, title: str, user_id: str) -> dict[str, Any]:
        task = Task(title=title, completed=False, user_id=user_id)
        with self._writing():
            self.session.add(task)
        logger.info("Inserted task %s", task.id)
        return task.to_dict()

    def update_task(self, task_id: str, changes: Mapping[str, Any]) -> dict[str, Any] | None:
        """
        Apply *changes* to the stored task and return the updated record.

        Returns ``None`` if no task has this identifier.
        """
        task = self.session.get(Task, task_id)
        if task is None:
            return None
        with self._writing():
            for field, value in changes.items():
                setattr(task, field, value)
        return task.to_dict()

    def delete_task(self, task_id: str) -> bool:
        """Remove the task. Returns False if it did not exist."""
        task = self.session.get(Task, task_id)
        if task is None:
            return False
        with self._writing():
            self.session.delete(task)
        return True
