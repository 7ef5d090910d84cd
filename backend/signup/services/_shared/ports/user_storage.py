from __future__ import annotations

from threading import Lock
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from signup.services.registration.dto import UserRecord


class UserStorage(Protocol):
    """
    Abstraction for the user record store.

    ``save`` either persists the record or raises; each call is independent
    and atomic from the caller's point of view. ``list_all`` is meant for
    inspection and tests.
    """

    name: str

    def save(self, record: UserRecord) -> None: ...
    def list_all(self) -> list[UserRecord]: ...


class InMemoryUserStorage(UserStorage):
    """Append-only, process-local list of user records."""

    name = "memory"

    def __init__(self) -> None:
        self._records: list[UserRecord] = []
        self._lock = Lock()

    def save(self, record: UserRecord) -> None:
        with self._lock:
            self._records.append(record)

    def list_all(self) -> list[UserRecord]:
        with self._lock:
            return list(self._records)

    def __len__(self) -> int:
        return len(self._records)
