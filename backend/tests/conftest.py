"""Pytest fixtures for the signup service.

Each test gets its own Flask application (and therefore its own in-memory
storage and in-memory SQLite engine) so registrations never leak between
cases.
"""

from __future__ import annotations

from collections.abc import Generator
from typing import Any

import pytest
from flask import Flask

from signup.core.config import TestingConfig
from signup.core.extensions import db as _db
from signup.factory import create_app


class SQLAlchemyStorageConfig(TestingConfig):
    """Testing configuration using the ``sqlalchemy`` storage backend."""

    STORAGE_BACKEND = "sqlalchemy"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"


@pytest.fixture()
def app() -> Generator[Flask, None, None]:
    """Create a Flask application configured for testing.

    Yields
    ------
    flask.Flask
        Application using :class:`TestingConfig` (in-memory storage).
    """
    application = create_app(TestingConfig, instance_relative_config=False)
    with application.app_context():
        yield application


@pytest.fixture()
def client(app: Flask) -> Any:
    """Return a Flask test client."""
    return app.test_client()


@pytest.fixture()
def make_app():
    """Factory building an app from a config subclass with overrides.

    Examples
    --------
    >>> def test_reject_policy(make_app):
    ...     app = make_app(UNKNOWN_FIELD_POLICY="reject")
    """

    def _factory(base: type = TestingConfig, **overrides: Any) -> Flask:
        config = type("OverrideConfig", (base,), overrides)
        return create_app(config, instance_relative_config=False)

    return _factory


@pytest.fixture()
def db_app() -> Generator[Flask, None, None]:
    """Application backed by SQLAlchemy storage with tables created."""
    application = create_app(SQLAlchemyStorageConfig, instance_relative_config=False)
    with application.app_context():
        _db.create_all()
        yield application
        _db.session.remove()
        _db.drop_all()


@pytest.fixture()
def session(db_app: Flask) -> Generator[Any, None, None]:
    """Provide the Flask-scoped SQLAlchemy session and wire Factory Boy to it."""
    from tests.factories import SQLAlchemySession

    SQLAlchemySession.set(_db.session)
    try:
        yield _db.session
    finally:
        SQLAlchemySession.set(None)


@pytest.fixture(scope="session")
def faker():
    """Provide a :class:`faker.Faker` instance seeded for deterministic tests."""
    from faker import Faker

    fk = Faker()
    Faker.seed(1337)
    return fk
