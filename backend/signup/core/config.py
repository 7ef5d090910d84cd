"""Application settings with environment-based simple classes."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Final

from dotenv import load_dotenv

# Public selector env var
ENV_VAR: Final[str] = "APP_ENV"  # 'development' | 'testing' | 'production'

STORAGE_BACKENDS: Final[frozenset[str]] = frozenset({"memory", "sqlalchemy"})

# Load .env in development (no-op when absent)
load_dotenv()


def env_bool(name: str, default: bool = False) -> bool:
    """Parse a boolean flag from an environment variable.

    Parameters
    ----------
    name: str
        Environment variable to inspect.
    default: bool, optional
        Value returned when the variable is unset. Defaults to ``False``.

    Returns
    -------
    bool
        ``True`` if the value resembles ``{"1", "true", "yes", "y", "on"}``
        ignoring case; otherwise ``False`` or ``default`` when missing.
    """
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "y", "on"}


def env_int(name: str, default: int) -> int:
    """Parse an integer environment variable, falling back to ``default``."""
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    return int(val)


def hashing_mode_from_env(default: str = "blocking") -> str:
    """Resolve the hashing strategy name.

    Notes
    -----
    ``HASHING_MODE`` wins when set. Otherwise the legacy ``USE_ASYNC`` flag
    selects ``"suspending"`` when truthy. The value is read once, at import,
    and injected into services; services never read the environment.
    """
    explicit = os.getenv("HASHING_MODE")
    if explicit:
        return explicit.strip().lower()
    return "suspending" if env_bool("USE_ASYNC", False) else default


class BaseConfig:
    """Base configuration shared across environments.

    Attributes
    ----------
    API_BASE_PREFIX: str
        Root path for registering API blueprints.
    SECRET_KEY: str
        Flask secret. Should be overridden in production.
    SQLALCHEMY_DATABASE_URI: str
        Database used by the ``sqlalchemy`` storage backend.
    STORAGE_BACKEND: str
        ``"memory"`` (append-only list) or ``"sqlalchemy"``.
    HASHING_MODE: str
        ``"blocking"`` or ``"suspending"`` salt/hash execution.
    SALT_ROUNDS: int
        Cost label embedded in generated salts.
    UNKNOWN_FIELD_POLICY: str
        ``"allow"`` keeps unknown additional fields unvalidated; ``"reject"``
        refuses them.
    ENABLE_USER_LISTING: bool
        Exposes ``GET /users`` (stored records, hashes included).
    LOG_LEVEL: str
        Root logging verbosity (``INFO`` by default).
    CORS_ORIGINS: str
        Comma-separated list of allowed origins for the API.
    """

    API_BASE_PREFIX = "/api"

    SECRET_KEY = os.getenv("SECRET_KEY", "CHANGE_ME")

    # Storage
    STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "memory").strip().lower()
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///./signup.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ECHO = env_bool("SQLALCHEMY_ECHO", False)

    # Registration pipeline
    HASHING_MODE = hashing_mode_from_env()
    SALT_ROUNDS = env_int("SALT_ROUNDS", 10)
    UNKNOWN_FIELD_POLICY = os.getenv("UNKNOWN_FIELD_POLICY", "allow").strip().lower()
    ENABLE_USER_LISTING = env_bool("ENABLE_USER_LISTING", False)

    # Flask & JSON
    JSON_SORT_KEYS = False
    PROPAGATE_EXCEPTIONS = False

    # Logging & CORS
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173")

    DEBUG = False
    TESTING = False


class DevelopmentConfig(BaseConfig):
    """Configuration tailored for local development.

    Notes
    -----
    Enables debug mode. The inspection listing stays off unless
    ``ENABLE_USER_LISTING`` is set.
    """

    DEBUG = env_bool("FLASK_DEBUG", True)
    CORS_MAX_AGE = 600  # 10 minutes


class TestingConfig(BaseConfig):
    """Configuration for automated test runs.

    Notes
    -----
    - Forces ``TESTING`` mode and the in-memory storage backend.
    - Uses an in-memory SQLite database unless ``TEST_DATABASE_URL`` is set.
    """

    TESTING = True
    DEBUG = False
    STORAGE_BACKEND = "memory"
    SQLALCHEMY_DATABASE_URI = os.getenv("TEST_DATABASE_URL", "sqlite:///:memory:")
    ENABLE_USER_LISTING = True
    LOG_LEVEL = "WARNING"


class ProductionConfig(BaseConfig):
    """Configuration defaults for production deployments.

    Notes
    -----
    The listing endpoint stays off unless explicitly enabled.
    """

    DEBUG = False
    SQLALCHEMY_ECHO = False
    PROPAGATE_EXCEPTIONS = False


CONFIG_MAP: Mapping[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config() -> type[BaseConfig]:
    """Return the configuration class inferred from ``APP_ENV``.

    Returns
    -------
    type[BaseConfig]
        Class to pass to :meth:`flask.Config.from_object`.

    Notes
    -----
    Falls back to :class:`DevelopmentConfig` when ``APP_ENV`` is unset or
    unknown.
    """
    name = os.getenv(ENV_VAR, "development").strip().lower()
    return CONFIG_MAP.get(name, DevelopmentConfig)
