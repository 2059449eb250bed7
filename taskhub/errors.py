"""
Exception types raised by the service layer.

Route handlers translate these into JSON error responses. Anything that
is not a ``TaskHubError`` is treated as a store fault and reported as a
generic 500 by the application-level error handler.
"""

from __future__ import annotations


class TaskHubError(Exception):
    """Base class for errors that map onto a client-facing HTTP status."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, str]:
        return {"error": self.message}


class ValidationError(TaskHubError):
    """Missing or malformed input, detected before the store is touched."""

    status_code = 400


class NotFoundError(TaskHubError):
    """A well-formed identifier that matches no record."""

    status_code = 404
