"""Repository package exposing persistence-layer access."""

from __future__ import annotations

from signup.repositories.base import BaseRepository
from signup.repositories.registered_user import RegisteredUserRepository

__all__ = [
    "BaseRepository",
    "RegisteredUserRepository",
]
