"""
Flask application factory module.

This module creates and configures the Flask application using
the factory pattern, allowing for different configurations
(development, testing, production) and for an alternative entity
store to be injected in place of the SQL one.
"""

import logging
import os
from typing import Any

from flask import Flask, Response, jsonify, request
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from config import engine_options, get_config

# Initialize SQLAlchemy without binding to app
db = SQLAlchemy()

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

STORE_EXTENSION = "taskhub.store"
USERS_EXTENSION = "taskhub.users"
TASKS_EXTENSION = "taskhub.tasks"

SERVER_RUNNING = {"status": "OK", "message": "Server is running"}


def create_app(config_name: str | None = None, store: Any = None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config_name: Configuration environment name.
                     If None, uses FLASK_ENV environment variable.
        store: Entity store to serve requests from. If None, a
               ``SqlEntityStore`` over the configured database is used.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__, instance_relative_config=True)

    # Load configuration
    config_class = get_config(config_name)
    app.config.from_object(config_class)
    app.config.setdefault(
        "SQLALCHEMY_ENGINE_OPTIONS",
        engine_options(app.config["SQLALCHEMY_DATABASE_URI"], app.config["STORE_TIMEOUT_SECONDS"]),
    )
    app.json.sort_keys = False

    logging.getLogger(__name__).setLevel(app.config["LOG_LEVEL"])
    logger.info("Creating app with config: %s", config_class.__name__)

    os.makedirs(app.instance_path, exist_ok=True)

    # Initialize extensions
    db.init_app(app)
    CORS(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})

    from taskhub.services import TaskService, UserService
    from taskhub.store import SqlEntityStore

    if store is None:
        store = SqlEntityStore(db)
        with app.app_context():
            db.create_all()
            logger.info("Database tables created")

    app.extensions[STORE_EXTENSION] = store
    app.extensions[USERS_EXTENSION] = UserService(store)
    app.extensions[TASKS_EXTENSION] = TaskService(store)

    # Register blueprints
    from taskhub.routes.api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")
    _register_app_handlers(app)

    return app


def _register_app_handlers(app: Flask) -> None:
    """Install request logging, the root route and application-wide error handlers."""

    @app.before_request
    def log_request() -> None:
        logger.info("%s %s", request.method, request.path)

    @app.route("/", methods=["GET"])
    def root() -> tuple[Response, int]:
        return jsonify(SERVER_RUNNING), 200

    @app.errorhandler(404)
    def route_not_found(error: Exception) -> tuple[Response, int]:
        """Handle requests that match no route."""
        logger.warning("No route for %s %s", request.method, request.path)
        return jsonify({"error": "Route not found"}), 404

    @app.errorhandler(405)
    def method_not_routed(error: Exception) -> tuple[Response, int]:
        """A known path with an unsupported verb is reported like any unmatched route."""
        logger.warning("No route for %s %s", request.method, request.path)
        return jsonify({"error": "Route not found"}), 404

    @app.errorhandler(HTTPException)
    def http_error(error: HTTPException) -> tuple[Response, int]:
        logger.warning("HTTP %s on %s: %s", error.code, request.path, error.description)
        return jsonify({"error": error.description}), error.code

    @app.errorhandler(Exception)
    def internal_error(error: Exception) -> tuple[Response, int]:
        """Report any unhandled fault as a generic 500, logging the cause."""
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        try:
            db.session.rollback()
        except SQLAlchemyError:
            logger.exception("Session rollback failed")
        return jsonify({"error": "Something went wrong!"}), 500
