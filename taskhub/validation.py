"""
Request payload validation.

Pure functions with no I/O. Each ``validate_*`` function returns an
error message for the first rule the payload breaks, or ``None`` when the
payload is acceptable. Services call these before touching the store.
"""

from __future__ import annotations

from typing import Any

from taskhub.identifiers import is_valid_identifier
from taskhub.models import (
    EMAIL_MAX_LENGTH,
    NAME_MAX_LENGTH,
    TASK_MUTABLE_FIELDS,
    TITLE_MAX_LENGTH,
)

USER_FIELDS_REQUIRED = "Name and email are required"
TASK_FIELDS_REQUIRED = "Title and userId are required"
INVALID_USER_ID = "Invalid userId format"


def _has_text(value: Any) -> bool:
    """True for a string with non-whitespace content."""
    return isinstance(value, str) and bool(value.strip())


def validate_identifier_format(value: Any) -> bool:
    """Return True if *value* is syntactically a store identifier."""
    return is_valid_identifier(value)


def validate_user_create(payload: dict[str, Any]) -> str | None:
    """
    Validate a create-user payload.

    Args:
        payload: Deserialised JSON request body.

    Returns:
        Error message, or None when ``name`` and ``email`` are both present
        and fit their columns.
    """
    if not _has_text(payload.get("name")) or not _has_text(payload.get("email")):
        return USER_FIELDS_REQUIRED
    if len(payload["name"]) > NAME_MAX_LENGTH:
        return f"Name must be {NAME_MAX_LENGTH} characters or less"
    if len(payload["email"]) > EMAIL_MAX_LENGTH:
        return f"Email must be {EMAIL_MAX_LENGTH} characters or less"
    return None


def validate_task_create(payload: dict[str, Any]) -> str | None:
    """
    Validate a create-task payload.

    Missing fields are reported before the ``userId`` format check. The
    referenced user is not looked up.

    Args:
        payload: Deserialised JSON request body.

    Returns:
        Error message, or None when the payload is acceptable.
    """
    if not _has_text(payload.get("title")) or not payload.get("userId"):
        return TASK_FIELDS_REQUIRED
    if not validate_identifier_format(payload["userId"]):
        return INVALID_USER_ID
    if len(payload["title"]) > TITLE_MAX_LENGTH:
        return f"Title must be {TITLE_MAX_LENGTH} characters or less"
    return None


def validate_task_update(payload: Any) -> str | None:
    """
    Validate a partial task update.

    Only ``title`` and ``completed`` may be changed. Unknown keys are
    rejected rather than ignored so a typo never looks like a successful
    update. An empty object is accepted as a no-op.

    Args:
        payload: Deserialised JSON request body.

    Returns:
        Error message, or None when the payload is acceptable.
    """
    if not isinstance(payload, dict):
        return "Request body must be a JSON object"

    unknown = sorted(key for key in payload if key not in TASK_MUTABLE_FIELDS)
    if unknown:
        return f"Unknown field(s): {', '.join(unknown)}"

    if "title" in payload:
        if not _has_text(payload["title"]):
            return "Title must be a non-empty string"
        if len(payload["title"]) > TITLE_MAX_LENGTH:
            return f"Title must be {TITLE_MAX_LENGTH} characters or less"

    if "completed" in payload and not isinstance(payload["completed"], bool):
        return "Completed must be a boolean"

    return None
