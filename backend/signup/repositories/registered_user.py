"""Repository for :class:`signup.models.RegisteredUser` rows."""

from __future__ import annotations

from signup.models.registered_user import RegisteredUser
from signup.repositories.base import BaseRepository


class RegisteredUserRepository(BaseRepository[RegisteredUser]):
    """Append-only access to registered users."""

    model = RegisteredUser
