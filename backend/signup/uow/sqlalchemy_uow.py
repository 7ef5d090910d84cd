"""
SQLAlchemy implementation of UnitOfWork for Flask.
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from signup.core.extensions import db
from signup.repositories import RegisteredUserRepository
from signup.uow.base import UnitOfWork


class SQLAlchemyUnitOfWork(UnitOfWork):
    """
    SQLAlchemy-backed UoW using the Flask-scoped session by default.

    Every repository shares the same session so a ``with`` block is one
    transaction: commit on clean exit, rollback when the block raises.
    """

    def __init__(self, session: Session | None = None) -> None:
        self.session = session if session is not None else db.session
        self.registered_users = RegisteredUserRepository(session=self.session)

    def __enter__(self) -> SQLAlchemyUnitOfWork:
        # No-op: the session is lazily started on the first write.
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            try:
                self.commit()
            except Exception:
                self.rollback()
                raise
        else:
            self.rollback()

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()
