"""Flask CLI commands for inspecting registered users."""

from __future__ import annotations

import logging

import click
from flask import current_app
from flask.cli import with_appcontext

from signup.core.extensions import db, get_storage

LOGGER = logging.getLogger(__name__)


@click.group("users")
def users_cli() -> None:
    """Registered-user maintenance commands."""


@users_cli.command("init-db")
@with_appcontext
def init_db_command() -> None:
    """Create the tables used by the ``sqlalchemy`` storage backend."""
    backend = current_app.config.get("STORAGE_BACKEND", "memory")
    if backend != "sqlalchemy":
        click.echo(f"STORAGE_BACKEND={backend}; nothing to create.")
        return
    LOGGER.info("Creating database schema...")
    db.create_all()
    click.echo("Database schema ready.")


@users_cli.command("list")
@click.option("--limit", type=click.IntRange(min=1), default=None, help="Show at most N users.")
@with_appcontext
def list_command(limit: int | None) -> None:
    """Print stored usernames and emails (never hashes)."""
    try:
        records = get_storage().list_all()
    except Exception as exc:  # pragma: no cover - CLI safeguard
        raise click.ClickException(f"Listing failed: {exc}") from exc
    if limit is not None:
        records = records[:limit]
    if not records:
        click.echo("(no users)")
        return
    width = max(len(r.username) for r in records)
    for record in records:
        click.echo(f"  {record.username.ljust(width)}  {record.email}")
