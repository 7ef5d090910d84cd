"""Application factory wiring Flask extensions and blueprints."""

from __future__ import annotations

import logging

from flask import Flask

from signup.core.config import BaseConfig, get_config
from signup.core.logger import configure_logging, init_app as init_logging

log = logging.getLogger(__name__)


def create_app(
    config: str | type[BaseConfig] | object | None = None,
    *,
    instance_relative_config: bool = True,
    instance_config_filename: str = "config.py",
) -> Flask:
    """Build and configure the Flask application."""

    app = Flask(__name__, instance_relative_config=instance_relative_config)

    app.config.from_object(get_config() if config is None else config)
    if instance_relative_config and instance_config_filename:
        app.config.from_pyfile(instance_config_filename, silent=True)
    # Keep stored field order in responses
    app.json.sort_keys = bool(app.config.get("JSON_SORT_KEYS", False))

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    from signup.core import extensions

    extensions.init_app(app)

    init_logging(app)

    from signup.core import cors

    cors.init_app(app)

    from signup.api import init_app as init_api

    init_api(app)

    from signup.core import errors

    errors.init_app(app)

    from signup import cli as app_cli

    app_cli.init_app(app)

    log.info(
        "app.ready",
        extra={
            "storage": app.config.get("STORAGE_BACKEND"),
            "hashing_mode": app.config.get("HASHING_MODE"),
        },
    )
    return app
