"""
HTTP client for the Task Hub API.

A thin wrapper over ``requests`` that mirrors the REST contract one method
per endpoint. Every call uses the configured timeout. Non-2xx responses
raise ``ApiError`` carrying the server's ``error`` message; transport
failures (``requests.ConnectionError``, ``requests.Timeout``) propagate
unchanged.
"""

from __future__ import annotations

import logging
import os
from typing import Any

import requests

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "http://localhost:5000/api"


class ApiError(Exception):
    """A non-success response from the API."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


def _response_error_message(response: requests.Response, default: str) -> str:
    """Return the ``error`` field of a JSON error body, or *default*."""
    try:
        payload = response.json()
    except ValueError:
        return default
    message = payload.get("error") if isinstance(payload, dict) else None
    if isinstance(message, str) and message.strip():
        return message
    return default


class TaskHubClient:
    """
    Client for the users and tasks endpoints.

    Args:
        base_url: API root, e.g. ``http://localhost:5000/api``. Defaults to
            the ``API_BASE_URL`` environment variable.
        timeout: Per-request timeout in seconds.
        session: Optional ``requests.Session`` to reuse connections or to
            substitute in tests.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 5.0,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = (base_url or os.environ.get("API_BASE_URL", DEFAULT_API_BASE_URL)).rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "Content-Type": "application/json",
            "Accept": "application/json",
        })

    def _request(self, method: str, path: str, **kwargs) -> Any:
        """
        Send a request and return the decoded JSON body.

        Raises:
            ApiError: If the response status is not 2xx.
            requests.RequestException: For network-level failures.
        """
        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, url)
        response = self.session.request(method=method, url=url, timeout=self.timeout, **kwargs)
        if not response.ok:
            message = _response_error_message(response, response.reason or "Request failed")
            raise ApiError(response.status_code, message)
        return response.json()

    def health_check(self) -> dict[str, str]:
        return self._request("GET", "/health")

    # -- users ------------------------------------------------------------

    def get_users(self) -> list[dict[str, Any]]:
        return self._request("GET", "/users")

    def get_user(self, user_id: str) -> dict[str, Any]:
        return self._request("GET", f"/users/{user_id}")

    def create_user(self, name: str, email: str) -> dict[str, Any]:
        return self._request("POST", "/users", json={"name": name, "email": email})

    # -- tasks ------------------------------------------------------------

    def get_tasks(self) -> list[dict[str, Any]]:
        return self._request("GET", "/tasks")

    def get_task(self, task_id: str) -> dict[str, Any]:
        return self._request("GET", f"/tasks/{task_id}")

    def create_task(self, title: str, user_id: str) -> dict[str, Any]:
        return self._request("POST", "/tasks", json={"title": title, "userId": user_id})

    def update_task(self, task_id: str, **changes: Any) -> dict[str, Any]:
        """Send a partial update, e.g. ``update_task(task_id, completed=True)``."""
        return self._request("PUT", f"/tasks/{task_id}", json=changes)

    def delete_task(self, task_id: str) -> dict[str, str]:
        return self._request("DELETE", f"/tasks/{task_id}")
