"""
signup.services._shared.ports
=============================

*Ports* (hexagonal interfaces) that decouple the registration service from
concrete infrastructure.

Modules
-------
- :mod:`user_storage`:
    Defines :class:`~.UserStorage` (append-only store for user records) and
    the :class:`~.InMemoryUserStorage` adapter.

Concrete adapters backed by real infrastructure live under ``signup.infra``.
"""

from __future__ import annotations

from .user_storage import InMemoryUserStorage, UserStorage

__all__ = [
    "UserStorage",
    "InMemoryUserStorage",
]
