"""Global Flask extension instances and initialization helpers."""

from __future__ import annotations

from flask import Flask, current_app
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import MetaData

from signup.core.config import STORAGE_BACKENDS
from signup.security.hashing import HashingMode
from signup.services._shared.ports import InMemoryUserStorage, UserStorage
from signup.validation import UnknownFieldPolicy

# Global naming convention for all constraints
convention = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "pk": "pk_%(table_name)s",
}

metadata = MetaData(naming_convention=convention)

# Global singletons (import-safe)
db: SQLAlchemy = SQLAlchemy(session_options={"autoflush": False}, metadata=metadata)

STORAGE_EXTENSION_KEY = "user_storage"


def build_storage(backend: str) -> UserStorage:
    """Instantiate the storage adapter named by ``backend``.

    Parameters
    ----------
    backend: str
        One of ``"memory"`` or ``"sqlalchemy"``.

    Raises
    ------
    RuntimeError
        If the backend name is unknown.
    """
    if backend == "memory":
        return InMemoryUserStorage()
    if backend == "sqlalchemy":
        from signup.infra.sqlalchemy.user_storage import SQLAlchemyUserStorage

        return SQLAlchemyUserStorage()
    raise RuntimeError(
        f"Unknown STORAGE_BACKEND {backend!r}; expected one of {sorted(STORAGE_BACKENDS)}"
    )


def _check_pipeline_config(app: Flask) -> None:
    """Fail at startup on unknown ``HASHING_MODE`` or ``UNKNOWN_FIELD_POLICY``."""
    try:
        HashingMode.parse(app.config.get("HASHING_MODE"))
        UnknownFieldPolicy.parse(app.config.get("UNKNOWN_FIELD_POLICY"))
    except ValueError as exc:
        raise RuntimeError(f"Invalid registration pipeline setting: {exc}") from exc


def init_app(app: Flask) -> None:
    """Initialize SQLAlchemy and the configured user storage.

    Parameters
    ----------
    app: flask.Flask
        Application used to bind extension instances. The storage adapter is
        kept in ``app.extensions["user_storage"]`` for the lifetime of the app.
    """
    db.init_app(app)

    # Ensure models are imported so metadata is complete for create_all()
    from signup import models as _models  # noqa: F401

    _check_pipeline_config(app)

    backend = str(app.config.get("STORAGE_BACKEND", "memory")).strip().lower()
    app.extensions[STORAGE_EXTENSION_KEY] = build_storage(backend)


def get_storage() -> UserStorage:
    """Return the storage adapter bound to the current application."""
    storage = current_app.extensions.get(STORAGE_EXTENSION_KEY)
    if storage is None:
        raise RuntimeError("User storage is not initialized. Call init_app() first.")
    return storage
