"""Unit tests for salt generation, hashing and comparison."""

from __future__ import annotations

import re

import pytest

from signup.security.hashing import (
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

SALT_RE = re.compile(r"\$2b\$(\d+)\$([0-9a-f]{32})")
HEX128_RE = re.compile(r"[0-9a-f]{128}")


class TestSalt:
    def test_default_format(self):
        assert SALT_RE.fullmatch(generate_salt())
        assert generate_salt().startswith("$2b$10$")

    def test_rounds_are_embedded(self):
        match = SALT_RE.fullmatch(generate_salt(12))
        assert match is not None
        assert match.group(1) == "12"

    def test_salts_are_distinct(self):
        salts = {generate_salt() for _ in range(200)}
        assert len(salts) == 200

    @pytest.mark.asyncio
    async def test_async_salt_has_same_format(self):
        salt = await generate_salt_async(11)
        match = SALT_RE.fullmatch(salt)
        assert match is not None
        assert match.group(1) == "11"


class TestHash:
    def test_hash_is_128_hex_chars(self):
        assert HEX128_RE.fullmatch(hash_password("Abcdef1!", generate_salt()))

    def test_hash_is_deterministic(self):
        salt = generate_salt()
        assert hash_password("Abcdef1!", salt) == hash_password("Abcdef1!", salt)

    def test_different_salts_give_different_hashes(self):
        assert hash_password("Abcdef1!", generate_salt()) != hash_password(
            "Abcdef1!", generate_salt()
        )

    def test_known_vector(self):
        # PBKDF2-HMAC-SHA512, 10k iterations, 64-byte key, salt used verbatim
        import hashlib

        salt = "$2b$10$00112233445566778899aabbccddeeff"
        expected = hashlib.pbkdf2_hmac("sha512", b"Abcdef1!", salt.encode(), 10_000, 64).hex()
        assert hash_password("Abcdef1!", salt) == expected

    @pytest.mark.asyncio
    async def test_async_hash_is_bit_identical(self):
        salt = generate_salt()
        assert await hash_password_async("Abcdef1!", salt) == hash_password("Abcdef1!", salt)


class TestCompare:
    def test_round_trip_matches(self):
        salt = generate_salt()
        combined = combine(salt, hash_password("Abcdef1!", salt))
        assert compare_password("Abcdef1!", combined) is True

    def test_other_password_does_not_match(self):
        salt = generate_salt()
        combined = combine(salt, hash_password("Abcdef1!", salt))
        assert compare_password("Abcdef1?", combined) is False

    def test_random_component_is_second_to_last_segment(self):
        salt = generate_salt()
        hashed = hash_password("Abcdef1!", salt)
        segments = combine(salt, hashed).split("$")
        assert segments[-2] == salt.split("$")[-1]
        assert segments[-1] == hashed

    def test_bare_hash_is_rejected(self):
        # A stored hash without its salt cannot be verified
        salt = generate_salt()
        assert compare_password("Abcdef1!", hash_password("Abcdef1!", salt)) is False

    @pytest.mark.parametrize("value", ["", "$", "$2b$10$abc", "$2b$10$abc$", None])
    def test_malformed_values_are_rejected(self, value):
        assert split_combined(value) is None
        assert compare_password("Abcdef1!", value) is False

    def test_split_combined_returns_parts(self):
        salt = generate_salt()
        assert split_combined(combine(salt, "ff")) == (salt, "ff")

    @pytest.mark.asyncio
    async def test_async_round_trip(self):
        salt = generate_salt()
        combined = combine(salt, hash_password("Abcdef1!", salt))
        assert await compare_password_async("Abcdef1!", combined) is True
        assert await compare_password_async("nope", combined) is False


class TestPasswordHasher:
    def test_mode_parsing(self):
        assert HashingMode.parse(None) is HashingMode.BLOCKING
        assert HashingMode.parse(" Suspending ") is HashingMode.SUSPENDING
        with pytest.raises(ValueError):
            HashingMode.parse("threaded")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("mode", list(HashingMode))
    async def test_derive_and_verify(self, mode):
        hasher = PasswordHasher(mode, rounds=10)
        cred = await hasher.derive("Abcdef1!")
        assert isinstance(cred, Credential)
        assert SALT_RE.fullmatch(cred.salt)
        assert cred.hashed == hash_password("Abcdef1!", cred.salt)
        assert compare_password("Abcdef1!", cred.combined)
        assert await hasher.verify("Abcdef1!", cred.salt, cred.hashed) is True
        assert await hasher.verify("Abcdef1?", cred.salt, cred.hashed) is False

    @pytest.mark.asyncio
    async def test_modes_are_interchangeable(self):
        blocking = PasswordHasher(HashingMode.BLOCKING)
        suspending = PasswordHasher(HashingMode.SUSPENDING)
        cred = await blocking.derive("Abcdef1!")
        assert await suspending.verify("Abcdef1!", cred.salt, cred.hashed) is True
