"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and never import Flask or
SQLAlchemy. The translation to HTTP responses is handled by
``signup/core/errors.py`` via ``BaseService.translate_exceptions()``.
"""

from __future__ import annotations

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - The API layer translates them to ``APIError`` through ``BaseService``.
    """

    pass


# --------------------------------------------------------------------------- #
# Client errors
# --------------------------------------------------------------------------- #


class MissingFieldError(ServiceError):
    """Raised when ``username``, ``email`` or ``password`` is absent."""

    def __init__(
        self,
        fields: tuple[str, ...] = (),
        message: str = "Username, email, and password are required fields.",
    ) -> None:
        super().__init__(message)
        self.fields = fields
        self.message = message


class InvalidFieldError(ServiceError):
    """
    Raised when a field fails its validator.

    :param field: Offending field name.
    :type field: str
    :param reason: Client-safe explanation.
    :type reason: str
    """

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(reason)
        self.field = field
        self.reason = reason


# --------------------------------------------------------------------------- #
# Server errors (never expose details to clients)
# --------------------------------------------------------------------------- #


class StorageError(ServiceError):
    """Raised when the storage collaborator fails to save a record."""

    def __init__(self, message: str = INTERNAL_ERROR_MESSAGE) -> None:
        super().__init__(message)


class UnexpectedError(ServiceError):
    """Raised for any uncaught fault during hashing or orchestration."""

    def __init__(self, message: str = INTERNAL_ERROR_MESSAGE) -> None:
        super().__init__(message)
