"""Shared API helpers for request parsing and cross-cutting concerns."""

from __future__ import annotations

import functools
import inspect
import time
from collections.abc import Callable
from typing import Any, TypeVar

from flask import Response, current_app, jsonify, request

from signup.core.errors import BadRequest
from signup.core.extensions import get_storage
from signup.core.logger import ensure_request_id
from signup.security.hashing import PasswordHasher
from signup.services._shared.base import ServiceContext
from signup.services.registration.dto import RegistrationIn
from signup.services.registration.service import RegistrationService
from signup.validation import RegistrationValidator

F = TypeVar("F", bound=Callable[..., Any])


def read_registration_body() -> RegistrationIn:
    """Parse a JSON or form-encoded body into :class:`RegistrationIn`.

    JSON bodies must be objects. Form bodies keep the first value of each
    key. Submission order is preserved in both cases.

    Raises
    ------
    BadRequest
        If a JSON body is present but is not an object.
    """
    if request.is_json:
        payload = request.get_json(silent=True)
        if payload is None:
            payload = {}
        if not isinstance(payload, dict):
            raise BadRequest("Request body must be a JSON object.", code="malformed_body")
        return RegistrationIn.from_mapping(payload)
    return RegistrationIn.from_mapping(request.form.to_dict(flat=True))


def build_registration_service() -> RegistrationService:
    """Wire a :class:`RegistrationService` from the current app config.

    The hashing strategy and unknown-field policy are resolved from config
    here and injected; the service never inspects the environment.
    """
    cfg = current_app.config
    return RegistrationService(
        storage=get_storage(),
        hasher=PasswordHasher(
            cfg.get("HASHING_MODE", "blocking"),
            rounds=int(cfg.get("SALT_ROUNDS", 10)),
        ),
        validator=RegistrationValidator(
            unknown_fields=cfg.get("UNKNOWN_FIELD_POLICY", "allow"),
        ),
        ctx=ServiceContext(request_id=ensure_request_id(), remote_addr=request.remote_addr),
    )


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def _log_elapsed(start: float) -> None:
    elapsed_ms = (time.perf_counter() - start) * 1000
    current_app.logger.debug(
        "request.elapsed",
        extra={"endpoint": getattr(request, "endpoint", None), "elapsed_ms": round(elapsed_ms, 2)},
    )


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds.

    Works for both plain and ``async`` view functions.
    """

    if inspect.iscoroutinefunction(func):

        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any):
            start = time.perf_counter()
            try:
                return await func(*args, **kwargs)
            finally:
                _log_elapsed(start)

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            _log_elapsed(start)

    return wrapper  # type: ignore[return-value]
