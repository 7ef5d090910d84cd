"""Service layer public API.

This package exposes the building blocks of the service layer so that callers
can import from :mod:`signup.services` without knowing internal structure.

Re-exports
----------
- Base primitives (from ``signup.services._shared.base``)
    * :class:`BaseService`
    * :class:`ServiceContext`

- Errors (from ``signup.services._shared.errors``)
    * :class:`ServiceError`, :class:`MissingFieldError`,
      :class:`InvalidFieldError`, :class:`StorageError`,
      :class:`UnexpectedError`

- Registration service (from ``signup.services.registration``)
    * :class:`RegistrationService`
    * DTOs: :class:`RegistrationIn`, :class:`UserRecord`, :class:`RegistrationOut`
"""

from __future__ import annotations

from ._shared.base import BaseService, ServiceContext
from ._shared.errors import (
    InvalidFieldError,
    MissingFieldError,
    ServiceError,
    StorageError,
    UnexpectedError,
)
from .registration.dto import RegistrationIn, RegistrationOut, UserRecord
from .registration.service import RegistrationService

__all__ = [
    "BaseService",
    "ServiceContext",
    "ServiceError",
    "MissingFieldError",
    "InvalidFieldError",
    "StorageError",
    "UnexpectedError",
    "RegistrationService",
    "RegistrationIn",
    "RegistrationOut",
    "UserRecord",
]
