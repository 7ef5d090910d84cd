"""Credential hashing primitives."""

from .hashing import (
    Credential,
    HashingMode,
    PasswordHasher,
    combine,
    compare_password,
    compare_password_async,
    generate_salt,
    generate_salt_async,
    hash_password,
    hash_password_async,
    split_combined,
)

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
