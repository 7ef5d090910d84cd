"""Registered user model backing the SQLAlchemy storage adapter."""

from __future__ import annotations

from typing import Any

from sqlalchemy import JSON, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from signup.core.extensions import db
from signup.services.registration.dto import UserRecord

from .base import CreatedAtMixin, PKMixin, ReprMixin


class RegisteredUser(PKMixin, ReprMixin, CreatedAtMixin, db.Model):
    """
    Append-only row for one successful registration.

    Fields
    ------
    username : str
        Validated username (no uniqueness constraint; storage is append-only).
    email : str
        Validated email, stored as submitted.
    password_hash : str
        128-char hex PBKDF2 digest.
    password_salt : str
        Salt envelope ``$2b$<rounds>$<hex>`` the digest was derived with.
    extra : dict
        Additional fields in submission order.
    """

    __tablename__ = "registered_users"
    __repr_attrs__ = ("id", "username")

    username: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(128), nullable=False)
    password_salt: Mapped[str] = mapped_column(String(64), nullable=False)
    extra: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)

    __table_args__ = (Index("ix_registered_users_username", "username"),)

    # -------------------- Mapping --------------------
    @classmethod
    def from_record(cls, record: UserRecord) -> RegisteredUser:
        """
        Build a row from a :class:`UserRecord`.

        :param record: Immutable record produced by the service.
        :type record: UserRecord
        :returns: Transient ORM instance.
        :rtype: RegisteredUser
        """
        return cls(
            username=record.username,
            email=record.email,
            password_hash=record.password,
            password_salt=record.password_salt,
            extra=dict(record.extra),
        )

    def to_record(self) -> UserRecord:
        """Rebuild the immutable record this row was created from."""
        return UserRecord(
            username=self.username,
            email=self.email,
            password=self.password_hash,
            password_salt=self.password_salt,
            extra=dict(self.extra or {}),
        )
