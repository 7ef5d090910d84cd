"""Unit tests for the process-local storage adapter."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from signup.services._shared.ports import InMemoryUserStorage
from signup.services.registration.dto import UserRecord


def _record(n: int) -> UserRecord:
    return UserRecord(
        username=f"member{n:04d}",
        email=f"member{n:04d}@example.com",
        password="0" * 128,
        password_salt="$2b$10$" + "a" * 32,
    )


def test_save_appends_in_order():
    storage = InMemoryUserStorage()
    storage.save(_record(1))
    storage.save(_record(2))
    assert [r.username for r in storage.list_all()] == ["member0001", "member0002"]


def test_duplicates_are_kept():
    storage = InMemoryUserStorage()
    storage.save(_record(1))
    storage.save(_record(1))
    assert len(storage) == 2


def test_list_all_returns_a_copy():
    storage = InMemoryUserStorage()
    storage.save(_record(1))
    snapshot = storage.list_all()
    snapshot.clear()
    assert len(storage.list_all()) == 1


def test_concurrent_saves_are_all_kept():
    storage = InMemoryUserStorage()
    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda n: storage.save(_record(n)), range(200)))
    assert len(storage) == 200
