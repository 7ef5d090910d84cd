# signup/services/_shared/base.py
from __future__ import annotations

from dataclasses import dataclass

from signup.core import errors as api_errors
from signup.services._shared.errors import (
    InvalidFieldError,
    MissingFieldError,
    ServiceError,
    StorageError,
    UnexpectedError,
)


@dataclass(slots=True)
class ServiceContext:
    """
    Carry cross-cutting request-scoped data.

    :param request_id: Correlation id for logging/tracing.
    :param remote_addr: Client address as seen by the API layer.
    """

    request_id: str | None = None
    remote_addr: str | None = None


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Hold the request-scoped :class:`ServiceContext`.
    * Centralize translation of service errors to API errors.
    * Keep services thin, orchestration-only, no web/ORM leakage.
    """

    def __init__(self, *, ctx: ServiceContext | None = None) -> None:
        """
        Initialize the base service.

        :param ctx: Optional request-scoped context.
        :type ctx: ServiceContext | None
        """
        self.ctx = ctx or ServiceContext()

    # -------------------------- Error handling ------------------------------

    def translate_exceptions(self, exc: Exception) -> Exception:
        """
        Map service-level errors to API-level (HTTP) errors.

        :param exc: Exception raised within the service.
        :type exc: Exception
        :returns: Translated exception ready to be re-raised.
        :rtype: Exception
        """
        if isinstance(exc, MissingFieldError):
            # → 400, lists the missing keys
            return api_errors.BadRequest(
                exc.message,
                code="missing_field",
                details={"fields": list(exc.fields)},
            )

        if isinstance(exc, InvalidFieldError):
            # → 400, names the offending field
            return api_errors.BadRequest(
                exc.reason,
                code="invalid_field",
                details={"field": exc.field},
            )

        if isinstance(exc, (StorageError, UnexpectedError)):
            # → 500, generic message only
            return api_errors.InternalError()

        # Any other ServiceError subclass → 400 Bad Request
        if isinstance(exc, ServiceError):
            return api_errors.BadRequest(str(exc))

        # Fallback: return untouched (will bubble up to Flask handler)
        return exc
