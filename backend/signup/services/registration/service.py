"""
RegistrationService
===================

Process-level service that registers a new user:

- Rejects payloads missing ``username``, ``email`` or ``password``.
- Validates required then additional fields (fail-fast).
- Derives a salt and PBKDF2 hash through the injected hashing strategy.
- Hands an immutable :class:`UserRecord` to the storage collaborator.

Nothing reaches hashing or storage unless every field passed validation.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from signup.security.hashing import PasswordHasher
from signup.services._shared.base import BaseService, ServiceContext
from signup.services._shared.errors import (
    InvalidFieldError,
    MissingFieldError,
    StorageError,
    UnexpectedError,
)
from signup.services._shared.ports import UserStorage
from signup.services.registration.dto import RegistrationIn, RegistrationOut, UserRecord
from signup.validation import RegistrationValidator, ValidationOutcome

log = logging.getLogger(__name__)


class RegistrationService(BaseService):
    """
    Orchestrates validation → hashing → ``storage.save()``.
    """

    def __init__(
        self,
        *,
        storage: UserStorage,
        hasher: PasswordHasher | None = None,
        validator: RegistrationValidator | None = None,
        ctx: ServiceContext | None = None,
    ) -> None:
        """
        Initialize the service with its collaborators.

        :param storage: Append-only user store.
        :param hasher: Hashing strategy (blocking by default).
        :param validator: Field validator (permissive unknown-field policy by default).
        :param ctx: Optional request-scoped context.
        """
        super().__init__(ctx=ctx)
        self.storage = storage
        self.hasher = hasher or PasswordHasher()
        self.validator = validator or RegistrationValidator()

    # ------------------------------------------------------------------ #
    # Register
    # ------------------------------------------------------------------ #

    async def register(self, dto: RegistrationIn | Mapping[str, Any]) -> RegistrationOut:
        """
        Register a user from a raw payload.

        :param dto: Registration input.
        :type dto: :class:`RegistrationIn` | Mapping[str, Any]
        :returns: Confirmation message and the stored record.
        :rtype: :class:`RegistrationOut`
        :raises MissingFieldError: When a required field is absent or empty.
        :raises InvalidFieldError: When a field fails its validator.
        :raises UnexpectedError: When salt/hash derivation fails.
        :raises StorageError: When the storage collaborator fails.
        """
        if not isinstance(dto, RegistrationIn):
            dto = RegistrationIn.from_mapping(dto)

        missing = dto.missing()
        if missing:
            log.warning(
                "registration.rejected",
                extra={"field": ",".join(missing), "remote_addr": self.ctx.remote_addr},
            )
            raise MissingFieldError(missing)

        self._raise_if_invalid(self.validator.validate_required(dto))
        self._raise_if_invalid(self.validator.validate_additional(dto.additional))

        try:
            credential = await self.hasher.derive(dto.password)
        except Exception as exc:
            log.error(
                "registration.hashing_failed",
                extra={"hashing_mode": self.hasher.mode.value},
                exc_info=True,
            )
            raise UnexpectedError() from exc

        record = UserRecord(
            username=dto.username,
            email=dto.email,
            password=credential.hashed,
            password_salt=credential.salt,
            extra=dto.additional,
        )

        try:
            self.storage.save(record)
        except Exception as exc:
            log.error(
                "registration.storage_failed",
                extra={"storage": getattr(self.storage, "name", type(self.storage).__name__)},
                exc_info=True,
            )
            raise StorageError() from exc

        log.info(
            "registration.saved",
            extra={"username": record.username, "remote_addr": self.ctx.remote_addr},
        )
        return RegistrationOut(user=record)

    # ------------------------------------------------------------------ #
    # Verification primitive
    # ------------------------------------------------------------------ #

    async def verify_credentials(self, password: str, record: UserRecord) -> bool:
        """
        Compare ``password`` with a stored record.

        :param password: Candidate password.
        :type password: str
        :param record: Record previously produced by :meth:`register`.
        :type record: :class:`UserRecord`
        :returns: ``True`` when the password matches.
        :rtype: bool
        """
        return await self.hasher.verify(password, record.password_salt, record.password)

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    def _raise_if_invalid(self, outcome: ValidationOutcome) -> None:
        if outcome.valid:
            return
        log.warning(
            "registration.rejected",
            extra={"field": outcome.field, "remote_addr": self.ctx.remote_addr},
        )
        raise InvalidFieldError(field=outcome.field or "", reason=outcome.reason or "Invalid field.")
