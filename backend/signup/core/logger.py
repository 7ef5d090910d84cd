"""JSON logging for the signup API.

Every record carries the request correlation id. Registration events attach
context through ``extra=`` (``field``, ``username``, ``storage``...); keys that
could hold credentials are never rendered, whatever the caller passes.
"""

from __future__ import annotations

import json
import logging
import sys
import time
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from flask import Flask, Response, g, has_request_context, request

REQUEST_ID_HEADER = "X-Request-ID"
CORRELATION_HEADERS = ("X-Request-ID", "X-Correlation-ID")
MAX_REQUEST_ID_LENGTH = 128

# ``extra=`` keys copied into the JSON payload when present
EXTRA_KEYS = (
    "endpoint",
    "elapsed_ms",
    "method",
    "path",
    "status",
    "field",
    "username",
    "storage",
    "hashing_mode",
    "remote_addr",
)
REDACTED_KEYS = frozenset({"password", "password_salt", "password_hash"})

access_log = logging.getLogger("signup.access")


class JSONFormatter(logging.Formatter):
    """Render log records as one JSON object per line.

    Parameters
    ----------
    extra_keys: Iterable[str], optional
        Record attributes copied into the payload. Names listed in
        ``REDACTED_KEYS`` are skipped even if requested.
    """

    def __init__(self, extra_keys: Iterable[str] = EXTRA_KEYS) -> None:
        super().__init__()
        self.extra_keys = tuple(k for k in extra_keys if k not in REDACTED_KEYS)

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "time": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", None),
        }
        for key in self.extra_keys:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class RequestIdFilter(logging.Filter):
    """Stamp ``request_id`` on every record (``None`` outside a request)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = ensure_request_id() if has_request_context() else None
        return True


def _clean_header(value: str | None) -> str | None:
    if not value:
        return None
    value = value.strip()
    if not value or len(value) > MAX_REQUEST_ID_LENGTH or not value.isprintable():
        return None
    return value


def ensure_request_id() -> str:
    """Return the request id, adopting a sane inbound header or minting a UUID4."""

    if not has_request_context():
        return str(uuid4())
    current = g.get("request_id")
    if current:
        return current
    for header in CORRELATION_HEADERS:
        value = _clean_header(request.headers.get(header))
        if value:
            break
    else:
        value = str(uuid4())
    g.request_id = value
    return value


def configure_logging(level: str | int = "INFO", *, quiet: Iterable[str] = ("werkzeug",)) -> None:
    """Route the root logger to stdout as JSON.

    Parameters
    ----------
    level: str | int
        Root verbosity, e.g. ``"INFO"`` or ``logging.DEBUG``.
    quiet: Iterable[str]
        Loggers raised to ``WARNING`` to keep request noise out of the stream.
    """

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())
    handler.addFilter(RequestIdFilter())
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        level = resolved if isinstance(resolved, int) else logging.INFO
    root.setLevel(level)
    for name in quiet:
        logging.getLogger(name).setLevel(logging.WARNING)


def init_app(app: Flask) -> None:
    """Seed the request id, echo it back and emit one access line per request."""

    app.logger.addFilter(RequestIdFilter())

    @app.before_request
    def _start_request() -> None:
        ensure_request_id()
        g.request_started = time.perf_counter()

    @app.after_request
    def _finish_request(response: Response) -> Response:
        response.headers.setdefault(REQUEST_ID_HEADER, ensure_request_id())
        started = g.get("request_started")
        access_log.info(
            "request.completed",
            extra={
                "method": request.method,
                "path": request.path,
                "status": response.status_code,
                "elapsed_ms": round((time.perf_counter() - started) * 1000, 2)
                if started is not None
                else None,
            },
        )
        return response


__all__ = ["JSONFormatter", "RequestIdFilter", "configure_logging", "ensure_request_id", "init_app"]
