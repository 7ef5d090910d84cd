"""CORS configuration for browser-based registration forms."""

from __future__ import annotations

from flask import Flask
from flask_cors import CORS


def parse_origins(raw: str | None) -> list[str] | str:
    """Split ``CORS_ORIGINS``; blank or ``"*"`` means any origin."""
    origins = [o.strip() for o in (raw or "").split(",") if o.strip()]
    return "*" if not origins or origins == ["*"] else origins


def init_app(app: Flask) -> None:
    """Enable CORS on the versioned API routes.

    Parameters
    ----------
    app: flask.Flask
        Application whose ``CORS_ORIGINS`` and ``CORS_MAX_AGE`` settings are
        consulted. Wildcard origins disable credential support.
    """
    origins = parse_origins(app.config.get("CORS_ORIGINS"))
    prefix = app.config.get("API_BASE_PREFIX", "/api").rstrip("/")
    CORS(
        app,
        resources={rf"{prefix}/*": {"origins": origins}},
        methods=["GET", "POST", "OPTIONS"],
        supports_credentials=origins != "*",
        expose_headers=["X-Request-ID"],
        max_age=app.config.get("CORS_MAX_AGE", 600),
    )
