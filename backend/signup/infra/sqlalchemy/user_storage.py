"""SQLAlchemy-backed :class:`~signup.services._shared.ports.UserStorage`."""

from __future__ import annotations

from collections.abc import Callable

from signup.models.registered_user import RegisteredUser
from signup.services.registration.dto import UserRecord
from signup.uow import SQLAlchemyUnitOfWork


class SQLAlchemyUserStorage:
    """
    Persist user records to the ``registered_users`` table.

    Each ``save`` runs in its own unit of work, so a failed insert is rolled
    back and re-raised to the caller.
    """

    name = "sqlalchemy"

    def __init__(self, uow_factory: Callable[[], SQLAlchemyUnitOfWork] = SQLAlchemyUnitOfWork):
        self._uow_factory = uow_factory

    def save(self, record: UserRecord) -> None:
        with self._uow_factory() as uow:
            uow.registered_users.add(RegisteredUser.from_record(record))

    def list_all(self) -> list[UserRecord]:
        with self._uow_factory() as uow:
            return [row.to_record() for row in uow.registered_users.list()]
