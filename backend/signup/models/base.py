"""Column mixins shared by ORM models (SQLAlchemy 2.0 typed mappings)."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Integer, func
from sqlalchemy.orm import Mapped, mapped_column


class PKMixin:
    """Integer surrogate key ``id``; also the insertion order of append-only rows."""

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)


class CreatedAtMixin:
    """Add a ``created_at`` column filled by the database on insert.

    Rows written by the registration flow are never updated, so there is no
    ``updated_at`` counterpart.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )


class ReprMixin:
    """``<ClassName id=... username=...>`` for debugging; never shows credentials."""

    __repr_attrs__ = ("id",)

    def __repr__(self) -> str:
        parts = " ".join(f"{name}={getattr(self, name, None)!r}" for name in self.__repr_attrs__)
        return f"<{self.__class__.__name__} {parts}>"
