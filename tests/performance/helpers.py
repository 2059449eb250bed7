"""
Helper utilities for Locust performance scenarios.

Provides the building blocks that every Locust user class relies on:
owner creation and randomised payload factories. Keeping these in a
shared module avoids duplication across scenario files.

Key Concepts Demonstrated:
- Collision-free identity generation using timestamp + random suffix
- Reusable helpers that wrap Locust's ``catch_response`` protocol
- Randomised payloads to exercise varied code paths
"""

from __future__ import annotations

import random
import string
import time
from typing import Any

from locust.clients import HttpSession

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


def safe_json(response: Any) -> Any:
    """
    Return the parsed response JSON, or ``None`` if parsing fails.

    Locust responses may contain non-JSON bodies (e.g. on proxy errors
    or timeouts). Using this wrapper prevents ``ValueError`` from
    propagating into task methods where it would abort the virtual user.
    """
    try:
        return response.json()
    except ValueError:
        return None


def _random_suffix(length: int = 6) -> str:
    return "".join(random.choices(string.ascii_lowercase + string.digits, k=length))


def unique_user_identity() -> tuple[str, str]:
    """
    Generate a unique ``(name, email)`` pair.

    Combines a millisecond timestamp with a short random suffix so that
    parallel Locust workers never collide on the unique email column.
    """
    name = f"perf_{int(time.time() * 1000)}_{_random_suffix()}"
    return name, f"{name}@example.com"


def create_user(client: HttpSession, *, name: str, email: str) -> str | None:
    """
    Create a user through the real endpoint and return its identifier.

    Args:
        client: The Locust HTTP session.
        name: Display name for the new user.
        email: Unique email address.

    Returns:
        The new user's ``id``, or ``None`` if creation failed.
    """
    with client.post(
        "/api/users",
        json={"name": name, "email": email},
        headers=JSON_HEADERS,
        name="/api/users [POST]",
        catch_response=True,
    ) as response:
        if response.status_code != 201:
            response.failure(f"Expected 201, got {response.status_code}")
            return None

        body = safe_json(response)
        user_id = body.get("id") if isinstance(body, dict) else None
        if not isinstance(user_id, str) or not user_id:
            response.failure("User response missing id")
            return None

        response.success()
        return user_id


def random_task_payload(user_id: str) -> dict[str, Any]:
    """Build a valid task-create payload owned by *user_id*."""
    return {"title": f"Perf task {_random_suffix(5)}", "userId": user_id}


def random_task_update_payload() -> dict[str, Any]:
    """
    Build a valid partial update touching exactly one mutable field.

    Real updates usually change one thing at a time, so this mirrors
    that pattern to exercise the partial-update path on the server.
    """
    candidates: list[dict[str, Any]] = [
        {"title": f"Renamed {_random_suffix(5)}"},
        {"completed": random.choice([True, False])},
    ]
    return random.choice(candidates)
