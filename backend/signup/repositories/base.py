"""Generic repository base for SQLAlchemy 2.x.

Persistence-only concerns shared by repositories:
- Session binding (explicit session or the Flask-scoped ``db.session``).
- Add / flush helpers.
- Deterministic listing ordered by primary key.
- No business logic, no commit/rollback; the Unit of Work owns transactions.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from signup.core.extensions import db

E = TypeVar("E")  # SQLAlchemy mapped entity type


class BaseRepository(Generic[E]):
    """Persistence-only repository for a single mapped class.

    Subclasses MUST define ``model``.
    """

    model: type[E]

    def __init__(self, session: Session | None = None) -> None:
        """
        :param session: Explicit session; defaults to the Flask-scoped one.
        :type session: Session | None
        """
        self._session = session

    @property
    def session(self) -> Session:
        return self._session if self._session is not None else db.session

    # ------------------------------- Writes -------------------------------

    def add(self, entity: E) -> E:
        """Stage ``entity`` for insertion and return it."""
        self.session.add(entity)
        return entity

    def flush(self) -> None:
        self.session.flush()

    # ------------------------------- Reads --------------------------------

    def count(self) -> int:
        stmt = select(func.count()).select_from(self.model)
        return int(self.session.execute(stmt).scalar_one())

    def list(self, *, offset: int = 0, limit: int | None = None) -> Sequence[E]:
        """List rows in insertion (primary-key) order.

        :param offset: Rows to skip (clamped to ``>= 0``).
        :type offset: int
        :param limit: Maximum rows to return; ``None`` for all.
        :type limit: int | None
        :returns: Entities in ascending id order.
        :rtype: Sequence[E]
        """
        pk: Any = self.model.id  # type: ignore[attr-defined]
        stmt = select(self.model).order_by(pk.asc()).offset(max(int(offset), 0))
        if limit is not None:
            stmt = stmt.limit(max(int(limit), 1))
        return list(self.session.execute(stmt).scalars().all())
