"""Unit tests for :class:`RegistrationValidator`."""

from __future__ import annotations

import pytest

from signup.validation import (
    VALID,
    RegistrationValidator,
    UnknownFieldPolicy,
    ValidationOutcome,
    resolve_validator,
)
from signup.validation import fields as v

GOOD = {"username": "alice1234", "email": "a@b.com", "password": "Abcdef1!"}


@pytest.fixture()
def validator() -> RegistrationValidator:
    return RegistrationValidator()


class TestRequired:
    def test_valid_payload(self, validator):
        outcome = validator.validate_required(GOOD)
        assert outcome is VALID
        assert outcome.valid and bool(outcome)

    def test_short_username(self, validator):
        outcome = validator.validate_required({**GOOD, "username": "short"})
        assert outcome == ValidationOutcome("username", "Invalid username.")
        assert not outcome

    def test_password_without_uppercase(self, validator):
        outcome = validator.validate_required({**GOOD, "password": "alllowercase1!"})
        assert outcome.field == "password"
        assert outcome.reason == "Invalid password."

    def test_fixed_order_username_first(self, validator):
        outcome = validator.validate_required(
            {"password": "bad", "email": "bad", "username": "bad"}
        )
        assert outcome.field == "username"

    def test_email_checked_before_password(self, validator):
        outcome = validator.validate_required({**GOOD, "email": "nope", "password": "bad"})
        assert outcome.field == "email"


class TestAdditional:
    @pytest.mark.parametrize(
        ("fields", "expected"),
        [
            ({"age": "17"}, "age"),
            ({"age": "25"}, None),
            ({"firstname": "Alexandra"}, "firstname"),
            ({"lastname": "Smith"}, None),
            ({"address": "x" * 101}, "address"),
            ({"address": "1 Main St"}, None),
            ({"gender": "robot"}, "gender"),
            ({"number": "5551234567"}, None),
            ({"phoneNumber": "555"}, "phoneNumber"),
        ],
    )
    def test_known_fields(self, validator, fields, expected):
        assert validator.validate_additional(fields).field == expected

    def test_unknown_field_is_accepted_by_default(self, validator):
        assert validator.validate_additional({"unknownField": "anything"}).valid

    def test_unknown_field_rejected_under_reject_policy(self):
        strict = RegistrationValidator(unknown_fields=UnknownFieldPolicy.REJECT)
        outcome = strict.validate_additional({"age": "30", "unknownField": "anything"})
        assert outcome.field == "unknownField"
        assert outcome.reason == "Unknown field unknownField."

    def test_policy_parses_strings(self):
        assert RegistrationValidator(unknown_fields="REJECT").unknown_fields is UnknownFieldPolicy.REJECT
        with pytest.raises(ValueError):
            UnknownFieldPolicy.parse("ignore")

    def test_reserved_field_rejected(self, validator):
        outcome = validator.validate_additional({"password_salt": "$2b$10$00"})
        assert outcome.field == "password_salt"
        assert outcome.reason == "Reserved field password_salt."

    def test_insertion_order_decides_first_failure(self, validator):
        first = validator.validate_additional({"gender": "robot", "age": "5"})
        second = validator.validate_additional({"age": "5", "gender": "robot"})
        assert first.field == "gender"
        assert second.field == "age"

    def test_field_names_are_case_sensitive(self, validator):
        # "Age" is not a known field and so is not validated
        assert validator.validate_additional({"Age": "5"}).valid

    def test_validate_runs_required_then_additional(self, validator):
        assert validator.validate({**GOOD, "age": "5"}).field == "age"
        assert validator.validate({**GOOD, "username": "x", "age": "5"}).field == "username"
        assert validator.validate({**GOOD, "age": "40"}).valid


class TestResolution:
    def test_specific_validator_wins(self):
        assert resolve_validator("age") is v.validate_age
        assert resolve_validator("phoneNumber") is v.validate_phone_number
        assert resolve_validator("number") is v.validate_phone_number

    def test_parametrized_fallback(self):
        check = resolve_validator("address")
        assert check is not None
        assert check("x" * 100)
        assert not check("x" * 101)

    def test_required_fields_have_no_additional_validator(self):
        # Only the declared additional fields resolve; no name synthesis
        assert resolve_validator("length") is None
        assert resolve_validator("additionalFields") is None


def test_fallback_table_only_holds_fields_without_a_specific_validator():
    from signup.validation.registration import FIELD_VALIDATORS, PARAMETRIZED_VALIDATORS

    assert not set(FIELD_VALIDATORS) & set(PARAMETRIZED_VALIDATORS)
    for name in PARAMETRIZED_VALIDATORS:
        assert resolve_validator(name) is not None
