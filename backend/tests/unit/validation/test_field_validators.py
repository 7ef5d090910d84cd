"""Unit tests for the per-field predicates."""

from __future__ import annotations

import pytest

from signup.validation import fields as v


class TestUsername:
    @pytest.mark.parametrize("value", ["alice1234", "alice123", "ABCDEFGH", "12345678", "a" * 64])
    def test_accepts(self, value):
        assert v.validate_username(value)

    @pytest.mark.parametrize(
        "value",
        ["short", "alice12", "alice_1234", "alice 1234", "älice1234", "alice1234\n", 12345678, None],
    )
    def test_rejects(self, value):
        assert not v.validate_username(value)


class TestEmail:
    def test_accepts_faker_addresses(self, faker):
        for _ in range(20):
            assert v.validate_email(faker.email())

    @pytest.mark.parametrize("value", ["a@b.com", "first.last@sub.example.org"])
    def test_accepts(self, value):
        assert v.validate_email(value)

    @pytest.mark.parametrize(
        "value", ["a@b", "ab.com", "a b@c.com", "a@@b.com", "@b.com", "a@b.", "", None]
    )
    def test_rejects(self, value):
        assert not v.validate_email(value)


class TestPassword:
    @pytest.mark.parametrize("value", ["Abcdef1!", "Zz9@Zz9@", "LongerPassw0rd&"])
    def test_accepts(self, value):
        assert v.validate_password(value)

    @pytest.mark.parametrize(
        "value",
        [
            "alllowercase1!",  # no uppercase
            "ALLUPPER1!",  # no lowercase
            "NoDigits!!",  # no digit
            "NoSymbol12",  # no symbol
            "Abc1!",  # too short
            "Abcdef1!#",  # '#' outside the alphabet
            "Abcdef1! ",  # whitespace outside the alphabet
            "Abcdéf1!",  # non-ASCII letter
            None,
        ],
    )
    def test_rejects(self, value):
        assert not v.validate_password(value)


class TestLength:
    def test_inclusive_bounds(self):
        assert v.validate_length("a", min=1, max=3)
        assert v.validate_length("abc", min=1, max=3)
        assert not v.validate_length("", min=1, max=3)
        assert not v.validate_length("abcd", min=1, max=3)

    def test_non_strings_rejected(self):
        assert not v.validate_length(123, min=1, max=8)

    def test_names(self):
        assert v.validate_firstname("Ada")
        assert not v.validate_firstname("Alexandra")  # 9 chars
        assert v.validate_lastname("Lovelace")
        assert not v.validate_lastname("")


class TestPhoneNumber:
    @pytest.mark.parametrize("value", ["5551234567", 5551234567])
    def test_accepts(self, value):
        assert v.validate_phone_number(value)

    @pytest.mark.parametrize("value", ["555123456", "55512345678", "555-123-4567", "５５５１２３４５６７", True])
    def test_rejects(self, value):
        assert not v.validate_phone_number(value)


class TestGender:
    @pytest.mark.parametrize("value", ["male", "Female", "OTHER"])
    def test_accepts(self, value):
        assert v.validate_gender(value)

    @pytest.mark.parametrize("value", ["unknown", "", 1, None])
    def test_rejects(self, value):
        assert not v.validate_gender(value)


class TestAge:
    @pytest.mark.parametrize("value", ["25", 25, 18, 100, " 42 ", "+30", 30.0])
    def test_accepts(self, value):
        assert v.validate_age(value)

    @pytest.mark.parametrize("value", ["17", 17, 101, "abc", "25.5", 25.5, "", True, None])
    def test_rejects(self, value):
        assert not v.validate_age(value)

    @pytest.mark.parametrize("value", ["25abc", "25.5", 25.5, "2 5", "0x19"])
    def test_rejects_partially_numeric_values(self, value):
        # No prefix parsing: the whole value must be an integer
        assert v.parse_age(value) is None
        assert not v.validate_age(value)

    def test_parse_age(self):
        assert v.parse_age(" 42 ") == 42
        assert v.parse_age("-3") == -3
        assert v.parse_age("4 2") is None
