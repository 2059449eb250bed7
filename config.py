"""
Application configuration module.

This module defines configuration classes for different environments
(development, testing, production). Configuration values are loaded
from environment variables with sensible defaults.
"""

import os
from pathlib import Path
from typing import Any

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent


def engine_options(database_uri: str, timeout: float) -> dict[str, Any]:
    """
    Build SQLAlchemy engine options that bound every store round-trip.

    SQLite has no connection pool worth bounding, so the limit is applied
    as the driver's busy timeout. Server databases get a pool checkout
    timeout and pre-ping so dead connections surface as errors instead
    of hanging the request. PostgreSQL also gets a server-side statement
    timeout, and MySQL drivers get socket read/write timeouts, so a slow
    query fails instead of holding the request open. Other backends are
    bounded only at connection checkout.

    Args:
        database_uri: SQLAlchemy database URL.
        timeout: Upper bound in seconds for one store round-trip.

    Returns:
        Dictionary suitable for ``SQLALCHEMY_ENGINE_OPTIONS``.
    """
    if database_uri.startswith("sqlite"):
        return {"connect_args": {"timeout": timeout}}

    options: dict[str, Any] = {"pool_pre_ping": True, "pool_timeout": timeout}
    if database_uri.startswith("postgresql"):
        options["connect_args"] = {"options": f"-c statement_timeout={int(timeout * 1000)}"}
    elif database_uri.startswith("mysql"):
        seconds = max(1, int(timeout))
        options["connect_args"] = {"read_timeout": seconds, "write_timeout": seconds}
    return options


class Config:
    """Base configuration with default settings."""

    SECRET_KEY: str = os.environ.get("SECRET_KEY", "dev-secret-key-change-in-production")
    SQLALCHEMY_TRACK_MODIFICATIONS: bool = False

    # Default database location
    SQLALCHEMY_DATABASE_URI: str = os.environ.get(
        "DATABASE_URL",
        f"sqlite:///{BASE_DIR / 'instance' / 'taskhub.db'}"
    )

    PORT: int = int(os.environ.get("PORT", "5000"))
    STORE_TIMEOUT_SECONDS: float = float(os.environ.get("STORE_TIMEOUT_SECONDS", "5"))
    CORS_ORIGINS: str = os.environ.get("CORS_ORIGINS", "*")
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG: bool = True
    TESTING: bool = False


class TestingConfig(Config):
    """Testing environment configuration."""

    DEBUG: bool = True
    TESTING: bool = True

    # In-memory SQLite; Flask-SQLAlchemy shares one connection across threads
    SQLALCHEMY_DATABASE_URI: str = os.environ.get("TEST_DATABASE_URL", "sqlite://")


class ProductionConfig(Config):
    """Production environment configuration."""

    DEBUG: bool = False
    TESTING: bool = False


# Configuration mapping for easy access
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (development, testing, production).
             If None, uses FLASK_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("FLASK_ENV", "development")
    return config.get(env, config["default"])
