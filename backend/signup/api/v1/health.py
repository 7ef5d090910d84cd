"""Health check endpoint."""

from __future__ import annotations

from flask import Blueprint, current_app

from signup.api.deps import json_response, timing
from signup.core.extensions import get_storage

bp = Blueprint("health", __name__)


@bp.get("/health")
@timing
def healthcheck():
    """Return application status and the active storage/hashing setup."""

    storage = get_storage()
    payload = {
        "status": "ok",
        "storage": getattr(storage, "name", type(storage).__name__),
        "hashing_mode": current_app.config.get("HASHING_MODE", "blocking"),
        "version": current_app.config.get("APP_VERSION", "dev"),
    }
    return json_response(payload)
