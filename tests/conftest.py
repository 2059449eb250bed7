"""
Shared pytest fixtures for the Task Hub test suite.

This module contains fixtures that are shared across all test modules.
Fixtures follow the Arrange-Act-Assert (AAA) pattern and ensure
test isolation by providing fresh data for each test.

Key Concepts Demonstrated:
- Fixture scopes (function, session)
- Fixture dependencies
- Test data factories
- Database setup/teardown
- Injecting an in-memory store in place of the database
"""

import os
import pytest
from faker import Faker

# Set testing environment before importing app
os.environ["FLASK_ENV"] = "testing"

from taskhub import create_app, db
from taskhub.models import Task, User
from tests.fakes import InMemoryEntityStore


# Initialize Faker for generating test data
fake = Faker()


# -----------------------------------------------------------------------------
# Application Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def app():
    """
    Create application instance for the test session.

    The same app (backed by an in-memory SQLite database) is reused for
    all tests; ``db_session`` resets its tables around each test.

    Yields:
        Flask application instance configured for testing.
    """
    application = create_app("testing")
    yield application


@pytest.fixture(scope="function")
def db_session(app):
    """
    Create a fresh database for each test.

    Creates all tables before the test, then rolls back and drops them
    afterwards so every test starts from an empty store.

    Args:
        app: Flask application fixture.

    Yields:
        SQLAlchemy extension bound to the test app.
    """
    with app.app_context():
        db.create_all()
        yield db
        db.session.rollback()
        db.drop_all()


@pytest.fixture(scope="function")
def client(app, db_session):
    """
    Create a test client for making HTTP requests.

    Depends on ``db_session`` so the tables exist for every request.

    Yields:
        Flask test client for making HTTP requests.
    """
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def memory_store() -> InMemoryEntityStore:
    """Provide an empty in-memory entity store."""
    return InMemoryEntityStore()


@pytest.fixture
def memory_client(memory_store):
    """
    Create a test client for an app that serves from ``memory_store``.

    No database is touched, which lets tests inspect exactly which store
    calls a request made.
    """
    application = create_app("testing", store=memory_store)
    with application.test_client() as test_client:
        yield test_client


# -----------------------------------------------------------------------------
# Test Data Factory Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def user_factory(db_session):
    """
    Factory fixture for creating User rows directly in the database.

    Example:
        def test_something(user_factory):
            user = user_factory(name="Ada")
            assert user.id is not None
    """

    def _create_user(name: str | None = None, email: str | None = None) -> User:
        user = User(name=name or fake.name(), email=email or fake.unique.email())
        db_session.session.add(user)
        db_session.session.commit()
        return user

    return _create_user


@pytest.fixture
def task_factory(db_session, user_factory):
    """
    Factory fixture for creating Task rows directly in the database.

    A fresh owner is created unless ``user_id`` is supplied.
    """

    def _create_task(
        title: str | None = None,
        completed: bool = False,
        user_id: str | None = None,
    ) -> Task:
        task = Task(
            title=title or fake.sentence(nb_words=4),
            completed=completed,
            user_id=user_id or user_factory().id,
        )
        db_session.session.add(task)
        db_session.session.commit()
        return task

    return _create_task


@pytest.fixture
def sample_user(user_factory) -> User:
    """A single user for tests that need an owner."""
    return user_factory(name="Sample User", email="sample@example.com")


@pytest.fixture
def sample_task(task_factory, sample_user) -> Task:
    """A single open task owned by ``sample_user``."""
    return task_factory(title="Sample Task", user_id=sample_user.id)


# -----------------------------------------------------------------------------
# Test Data Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def valid_user_data() -> dict[str, str]:
    """Provide valid user data for POST requests."""
    return {"name": fake.name(), "email": fake.unique.email()}


@pytest.fixture
def missing_id() -> str:
    """A well-formed identifier that no record uses."""
    return "0123456789abcdef01234567"


@pytest.fixture
def api_headers() -> dict[str, str]:
    """
    Provide common headers for API requests.

    Returns:
        Dictionary of HTTP headers.
    """
    return {
        "Content-Type": "application/json",
        "Accept": "application/json"
    }
