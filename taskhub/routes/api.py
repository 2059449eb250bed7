"""
REST API endpoints for users and tasks.

Handlers parse the request, call the injected services and map
``TaskHubError`` outcomes onto status codes. Any other exception is a
store fault and is handled by the application-wide 500 handler.

Endpoints:
    GET    /api/health        - Health check
    GET    /api/users         - List all users
    GET    /api/users/<id>    - Get a single user by ID
    POST   /api/users         - Create a new user
    GET    /api/tasks         - List all tasks
    GET    /api/tasks/<id>    - Get a single task by ID
    POST   /api/tasks         - Create a new task
    PUT    /api/tasks/<id>    - Partially update a task
    DELETE /api/tasks/<id>    - Delete a task
"""

import logging
from typing import Any

from flask import Blueprint, Response, current_app, jsonify, request

from taskhub import SERVER_RUNNING, TASKS_EXTENSION, USERS_EXTENSION
from taskhub.errors import TaskHubError
from taskhub.services import TaskService, UserService

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


# -----------------------------------------------------------------------------
# Helper Functions
# -----------------------------------------------------------------------------

def _users() -> UserService:
    return current_app.extensions[USERS_EXTENSION]


def _tasks() -> TaskService:
    return current_app.extensions[TASKS_EXTENSION]


def _json_object() -> dict[str, Any]:
    """
    Return the request body if it is a JSON object, else an empty dict.

    A missing or malformed body then fails the required-field checks
    with the usual message instead of a parser error.
    """
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


# -----------------------------------------------------------------------------
# API Endpoints
# -----------------------------------------------------------------------------

@api_bp.route("/health", methods=["GET"])
def health_check() -> tuple[Response, int]:
    """Health check endpoint for deployment verification."""
    return jsonify(SERVER_RUNNING), 200


@api_bp.route("/users", methods=["GET"])
def get_users() -> tuple[Response, int]:
    """List every user in store order."""
    users = _users().list_users()
    logger.info("Found %d users", len(users))
    return jsonify(users), 200


@api_bp.route("/users/<user_id>", methods=["GET"])
def get_user(user_id: str) -> tuple[Response, int]:
    """
    Get a single user by ID.

    Returns:
        The user with 200, 400 for a malformed ID, or 404 if absent.
    """
    return jsonify(_users().get_user(user_id)), 200


@api_bp.route("/users", methods=["POST"])
def create_user() -> tuple[Response, int]:
    """
    Create a new user.

    Request Body (JSON):
        name: Display name (required)
        email: Email address, unique across users (required)

    Returns:
        The created user with 201, or 400 if a field is missing.
    """
    user = _users().create_user(_json_object())
    logger.info("Created user with ID: %s", user["id"])
    return jsonify(user), 201


@api_bp.route("/tasks", methods=["GET"])
def get_tasks() -> tuple[Response, int]:
    """List every task in store order."""
    tasks = _tasks().list_tasks()
    logger.info("Found %d tasks", len(tasks))
    return jsonify(tasks), 200


@api_bp.route("/tasks/<task_id>", methods=["GET"])
def get_task(task_id: str) -> tuple[Response, int]:
    """Get a single task by ID."""
    return jsonify(_tasks().get_task(task_id)), 200


@api_bp.route("/tasks", methods=["POST"])
def create_task() -> tuple[Response, int]:
    """
    Create a new task.

    Request Body (JSON):
        title: Task title (required)
        userId: Identifier of the owning user (required, format-checked only)

    Returns:
        The created task with 201 and ``completed`` false, or 400 if
        validation fails.
    """
    task = _tasks().create_task(_json_object())
    logger.info("Created task with ID: %s", task["id"])
    return jsonify(task), 201


@api_bp.route("/tasks/<task_id>", methods=["PUT"])
def update_task(task_id: str) -> tuple[Response, int]:
    """
    Update an existing task.

    Request Body (JSON):
        title: New task title (optional)
        completed: New completion flag (optional)

    Returns:
        The updated task with 200, or 400/404 if the ID or body is
        invalid or the task does not exist.
    """
    task = _tasks().update_task(task_id, request.get_json(silent=True))
    logger.info("Updated task %s", task_id)
    return jsonify(task), 200


@api_bp.route("/tasks/<task_id>", methods=["DELETE"])
def delete_task(task_id: str) -> tuple[Response, int]:
    """Delete a task."""
    result = _tasks().delete_task(task_id)
    logger.info("Deleted task %s", task_id)
    return jsonify(result), 200


# -----------------------------------------------------------------------------
# Error Handlers
# -----------------------------------------------------------------------------

@api_bp.errorhandler(TaskHubError)
def service_error(error: TaskHubError) -> tuple[Response, int]:
    """Translate validation and not-found errors into JSON responses."""
    return jsonify(error.to_dict()), error.status_code
