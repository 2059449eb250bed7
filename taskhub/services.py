"""
CRUD services for users and tasks.

Services combine the validation functions with an injected entity store.
Every operation that takes an identifier checks its format first and
raises ``ValidationError`` without querying the store; a well-formed
identifier with no matching record raises ``NotFoundError``. Store
exceptions are left to propagate.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

from taskhub.errors import NotFoundError, ValidationError
from taskhub.validation import (
    validate_identifier_format,
    validate_task_create,
    validate_task_update,
    validate_user_create,
)

logger = logging.getLogger(__name__)

TASK_DELETED_MESSAGE = "Task deleted successfully"


class EntityStore(Protocol):
    """Operations the services need from a store."""

    def list_users(self) -> list[dict[str, Any]]: ...

    def get_user(self, user_id: str) -> dict[str, Any] | None: ...

    def add_user(self, name: str, email: str) -> dict[str, Any]: ...

    def list_tasks(self) -> list[dict[str, Any]]: ...

    def get_task(self, task_id: str) -> dict[str, Any] | None: ...

    def add_task(self, title: str, user_id: str) -> dict[str, Any]: ...

    def update_task(self, task_id: str, changes: dict[str, Any]) -> dict[str, Any] | None: ...

    def delete_task(self, task_id: str) -> bool: ...


def _checked_id(value: str, entity: str) -> str:
    """Return the identifier normalised for lookup, or raise on bad syntax."""
    if not validate_identifier_format(value):
        logger.warning("Rejected malformed %s id %r", entity, value)
        raise ValidationError(f"Invalid {entity} ID format")
    return value.lower()


class UserService:
    """List, fetch and create users."""

    def __init__(self, store: EntityStore) -> None:
        self.store = store

    def list_users(self) -> list[dict[str, Any]]:
        return self.store.list_users()

    def get_user(self, user_id: str) -> dict[str, Any]:
        user = self.store.get_user(_checked_id(user_id, "user"))
        if user is None:
            logger.warning("User %s not found", user_id)
            raise NotFoundError("User not found")
        return user

    def create_user(self, payload: dict[str, Any]) -> dict[str, Any]:
        """
        Validate and insert a new user.

        A duplicate email is rejected by the store's unique constraint and
        surfaces as a store fault.
        """
        error = validate_user_create(payload)
        if error:
            logger.warning("User validation failed: %s", error)
            raise ValidationError(error)
        return self.store.add_user(payload["name"], payload["email"])


class TaskService:
    """List, fetch, create, update and delete tasks."""

    def __init__(self, store: EntityStore) -> None:
        self.store = store

    def list_tasks(self) -> list[dict[str, Any]]:
        return self.store.list_tasks()

    def get_task(self, task_id: str) -> dict[str, Any]:
        task = self.store.get_task(_checked_id(task_id, "task"))
        if task is None:
            logger.warning("Task %s not found", task_id)
            raise NotFoundError("Task not found")
        return task

    def create_task(self, payload: dict[str, Any]) -> dict[str, Any]:
        """
        Validate and insert a new task.

        ``completed`` always starts False, whatever the payload says. The
        owning user is only checked for identifier syntax.
        """
        error = validate_task_create(payload)
        if error:
            logger.warning("Task validation failed: %s", error)
            raise ValidationError(error)
        return self.store.add_task(payload["title"], payload["userId"].lower())

    def update_task(self, task_id: str, payload: Any) -> dict[str, Any]:
        """
        Merge a partial update into the stored task.

        Args:
            task_id: Identifier of the task to change.
            payload: Object holding any of ``title`` and ``completed``.

        Returns:
            The task as stored after the update.
        """
        self.get_task(task_id)

        error = validate_task_update(payload)
        if error:
            logger.warning("Task update validation failed: %s", error)
            raise ValidationError(error)

        task = self.store.update_task(task_id.lower(), dict(payload))
        if task is None:
            logger.warning("Task %s not found", task_id)
            raise NotFoundError("Task not found")
        return task

    def delete_task(self, task_id: str) -> dict[str, str]:
        if not self.store.delete_task(_checked_id(task_id, "task")):
            logger.warning("Task %s not found", task_id)
            raise NotFoundError("Task not found")
        return {"message": TASK_DELETED_MESSAGE}
