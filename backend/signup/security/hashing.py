"""
Salt generation and PBKDF2 password hashing.

Salts use a bcrypt-looking envelope ``$2b$<rounds>$<hex>`` where ``<hex>`` is
16 bytes from the OS CSPRNG. The envelope is *only* a label: the digest is a
PBKDF2-HMAC-SHA512 key derived over the full salt string.

Every primitive comes in a blocking and a suspending flavour. The suspending
variants offload the work to a thread with :func:`asyncio.to_thread` and are
bit-identical to their blocking counterparts.

Combined layout
---------------
``compare_password`` works on ``<salt>$<hash>``, e.g.::

    $2b$10$5f0c...e1$9a3b...77
            ^ random   ^ hash (last segment)

The random salt component is the second-to-last ``$`` segment and the salt is
every segment before the hash.
"""

from __future__ import annotations

import asyncio
import hashlib
import hmac
import secrets
from dataclasses import dataclass
from enum import Enum
from typing import Final

SALT_VERSION: Final[str] = "2b"
DEFAULT_ROUNDS: Final[int] = 10
SALT_RANDOM_BYTES: Final[int] = 16
PBKDF2_ITERATIONS: Final[int] = 10_000
PBKDF2_KEY_LENGTH: Final[int] = 64
PBKDF2_DIGEST: Final[str] = "sha512"
SEPARATOR: Final[str] = "$"


# --------------------------------------------------------------------------- #
# Salt
# --------------------------------------------------------------------------- #


def _format_salt(rounds: int, random_hex: str) -> str:
    return f"{SEPARATOR}{SALT_VERSION}{SEPARATOR}{int(rounds)}{SEPARATOR}{random_hex}"


def generate_salt(rounds: int = DEFAULT_ROUNDS) -> str:
    """
    Generate a fresh salt.

    :param rounds: Cost label embedded in the salt envelope.
    :type rounds: int
    :returns: ``$2b$<rounds>$<32 hex chars>``.
    :rtype: str
    """
    return _format_salt(rounds, secrets.token_bytes(SALT_RANDOM_BYTES).hex())


async def generate_salt_async(rounds: int = DEFAULT_ROUNDS) -> str:
    """Suspending variant of :func:`generate_salt`."""
    raw = await asyncio.to_thread(secrets.token_bytes, SALT_RANDOM_BYTES)
    return _format_salt(rounds, raw.hex())


# --------------------------------------------------------------------------- #
# Hash
# --------------------------------------------------------------------------- #


def hash_password(password: str, salt: str) -> str:
    """
    Derive the hex digest for ``password`` under ``salt``.

    :param password: Plain text password.
    :type password: str
    :param salt: Salt produced by :func:`generate_salt`.
    :type salt: str
    :returns: 128 lowercase hex characters.
    :rtype: str
    """
    key = hashlib.pbkdf2_hmac(
        PBKDF2_DIGEST,
        password.encode("utf-8"),
        salt.encode("utf-8"),
        PBKDF2_ITERATIONS,
        dklen=PBKDF2_KEY_LENGTH,
    )
    return key.hex()


async def hash_password_async(password: str, salt: str) -> str:
    """Suspending variant of :func:`hash_password`."""
    return await asyncio.to_thread(hash_password, password, salt)


# --------------------------------------------------------------------------- #
# Combined layout & comparison
# --------------------------------------------------------------------------- #


def combine(salt: str, hashed: str) -> str:
    """Join ``salt`` and ``hashed`` into the ``<salt>$<hash>`` layout."""
    return f"{salt}{SEPARATOR}{hashed}"


def split_combined(combined: str) -> tuple[str, str] | None:
    """
    Split a ``<salt>$<hash>`` string back into its parts.

    :param combined: Value built by :func:`combine`.
    :type combined: str
    :returns: ``(salt, hash)`` or ``None`` when the layout is not recognised.
    :rtype: tuple[str, str] | None
    """
    if not isinstance(combined, str):
        return None
    segments = combined.split(SEPARATOR)
    # ['', version, rounds, random, hash]
    if len(segments) < 5 or not segments[-1] or not segments[-2]:
        return None
    return SEPARATOR.join(segments[:-1]), segments[-1]


def compare_password(password: str, combined: str) -> bool:
    """
    Check ``password`` against a ``<salt>$<hash>`` string.

    :param password: Candidate password.
    :type password: str
    :param combined: Stored value in the combined layout.
    :type combined: str
    :returns: ``True`` on match; ``False`` on mismatch or malformed input.
    :rtype: bool
    """
    parts = split_combined(combined)
    if parts is None:
        return False
    salt, expected = parts
    return hmac.compare_digest(hash_password(password, salt), expected)


async def compare_password_async(password: str, combined: str) -> bool:
    """Suspending variant of :func:`compare_password`."""
    parts = split_combined(combined)
    if parts is None:
        return False
    salt, expected = parts
    candidate = await hash_password_async(password, salt)
    return hmac.compare_digest(candidate, expected)


# --------------------------------------------------------------------------- #
# Strategy
# --------------------------------------------------------------------------- #


class HashingMode(str, Enum):
    """Execution strategy for salt/hash derivation."""

    BLOCKING = "blocking"
    SUSPENDING = "suspending"

    @classmethod
    def parse(cls, value: str | HashingMode | None) -> HashingMode:
        """Resolve a config value, defaulting to :attr:`BLOCKING`."""
        if isinstance(value, HashingMode):
            return value
        if not value:
            return cls.BLOCKING
        return cls(str(value).strip().lower())


@dataclass(frozen=True, slots=True)
class Credential:
    """
    Salt and digest pair derived for one password.

    :param salt: Salt envelope.
    :type salt: str
    :param hashed: Hex digest.
    :type hashed: str
    """

    salt: str
    hashed: str

    @property
    def combined(self) -> str:
        return combine(self.salt, self.hashed)


class PasswordHasher:
    """
    Injected hashing strategy.

    Both modes produce the same values; they only differ in whether the
    calling coroutine blocks while the KDF runs.
    """

    def __init__(
        self,
        mode: HashingMode | str = HashingMode.BLOCKING,
        *,
        rounds: int = DEFAULT_ROUNDS,
    ) -> None:
        self.mode = HashingMode.parse(mode)
        self.rounds = int(rounds)

    @property
    def suspending(self) -> bool:
        return self.mode is HashingMode.SUSPENDING

    async def derive(self, password: str) -> Credential:
        """
        Generate a fresh salt and hash ``password`` with it.

        :param password: Plain text password.
        :type password: str
        :returns: New credential.
        :rtype: Credential
        """
        if self.suspending:
            salt = await generate_salt_async(self.rounds)
            return Credential(salt=salt, hashed=await hash_password_async(password, salt))
        salt = generate_salt(self.rounds)
        return Credential(salt=salt, hashed=hash_password(password, salt))

    async def verify(self, password: str, salt: str, hashed: str) -> bool:
        """Compare ``password`` against a stored salt/hash pair."""
        combined = combine(salt, hashed)
        if self.suspending:
            return await compare_password_async(password, combined)
        return compare_password(password, combined)

    def __repr__(self) -> str:
        return f"<PasswordHasher mode={self.mode.value} rounds={self.rounds}>"


__all__ = [
    "Credential",
    "HashingMode",
    "PasswordHasher",
    "combine",
    "compare_password",
    "compare_password_async",
    "generate_salt",
    "generate_salt_async",
    "hash_password",
    "hash_password_async",
    "split_combined",
]
