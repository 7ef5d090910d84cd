"""
DTOs for RegistrationService.

Contracts for the self-registration flow: the raw payload coming in, the
immutable user record handed to storage, and the success payload going out.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

REQUIRED_KEYS = ("username", "email", "password")
SALT_KEY = "password_salt"


def _freeze(data: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(data))


# --------------------------------------------------------------------------- #
# Input
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class RegistrationIn(Mapping[str, Any]):
    """
    Immutable registration payload.

    Behaves as a read-only mapping over the submitted fields and keeps their
    insertion order, which drives the order additional fields are validated in.

    :param fields: Field name → raw value (``str`` / ``int`` / ``float``).
    :type fields: Mapping[str, Any]
    """

    fields: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", _freeze(self.fields))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None = None, **extra: Any) -> RegistrationIn:
        merged = dict(data or {})
        merged.update(extra)
        return cls(fields=merged)

    def __getitem__(self, key: str) -> Any:
        return self.fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    @property
    def username(self) -> Any:
        return self.fields.get("username")

    @property
    def email(self) -> Any:
        return self.fields.get("email")

    @property
    def password(self) -> Any:
        return self.fields.get("password")

    @property
    def additional(self) -> Mapping[str, Any]:
        """Non-required fields in submission order."""
        return {k: v for k, v in self.fields.items() if k not in REQUIRED_KEYS}

    def missing(self) -> tuple[str, ...]:
        """Required keys that are absent, ``None`` or empty strings."""
        return tuple(k for k in REQUIRED_KEYS if self.fields.get(k) in (None, ""))


# --------------------------------------------------------------------------- #
# Record
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class UserRecord:
    """
    Immutable user snapshot handed to storage.

    :param username: Validated username.
    :type username: str
    :param email: Validated email.
    :type email: str
    :param password: Hex PBKDF2 digest; never the plain text.
    :type password: str
    :param password_salt: Salt envelope the digest was derived with.
    :type password_salt: str
    :param extra: Additional fields in submission order.
    :type extra: Mapping[str, Any]
    """

    username: str
    email: str
    password: str
    password_salt: str
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "extra", _freeze(self.extra))

    def to_dict(self) -> dict[str, Any]:
        """Flatten to ``{username, email, password, password_salt, ...extra}``."""
        data: dict[str, Any] = {
            "username": self.username,
            "email": self.email,
            "password": self.password,
            SALT_KEY: self.password_salt,
        }
        for key, value in self.extra.items():
            data.setdefault(key, value)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> UserRecord:
        known = {*REQUIRED_KEYS, SALT_KEY}
        return cls(
            username=data["username"],
            email=data["email"],
            password=data["password"],
            password_salt=data[SALT_KEY],
            extra={k: v for k, v in data.items() if k not in known},
        )


# --------------------------------------------------------------------------- #
# Output
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class RegistrationOut:
    """
    Success payload for the registration process.

    .. warning::
       ``user`` carries the hashed password and salt. Do not forward it to
       untrusted clients without stripping those fields.

    :param message: Human-readable confirmation.
    :type message: str
    :param user: Stored record.
    :type user: :class:`UserRecord`
    """

    user: UserRecord
    message: str = "Registration successful"

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "user": self.user.to_dict()}
