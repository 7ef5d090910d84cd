"""
Registration payload validation.

Validation is fail-fast: the first offending field ends the pass and is
reported through a :class:`ValidationOutcome`.

Additional fields resolve their validator through two explicit tables:

1. ``FIELD_VALIDATORS``: field-specific single-argument predicates.
2. ``PARAMETRIZED_VALIDATORS``: ``field -> (predicate, params)`` fallback for
   fields with no specific predicate. The two tables never share a key.

Fields found in neither table are handled by :class:`UnknownFieldPolicy`.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Final

from signup.validation import fields as v

REQUIRED_FIELDS: Final[tuple[str, ...]] = ("username", "email", "password")

# Keys written by the service itself; never accepted from clients.
RESERVED_FIELDS: Final[frozenset[str]] = frozenset({"password_salt"})

Predicate = Callable[[Any], bool]
ParametrizedPredicate = Callable[..., bool]

REQUIRED_VALIDATORS: Final[Mapping[str, Predicate]] = MappingProxyType(
    {
        "username": v.validate_username,
        "email": v.validate_email,
        "password": v.validate_password,
    }
)

FIELD_VALIDATORS: Final[Mapping[str, Predicate]] = MappingProxyType(
    {
        "firstname": v.validate_firstname,
        "lastname": v.validate_lastname,
        "phoneNumber": v.validate_phone_number,
        "number": v.validate_phone_number,
        "gender": v.validate_gender,
        "age": v.validate_age,
    }
)

PARAMETRIZED_VALIDATORS: Final[Mapping[str, tuple[ParametrizedPredicate, Mapping[str, Any]]]] = (
    MappingProxyType(
        {
            "address": (
                v.validate_length,
                {"min": v.ADDRESS_LENGTH[0], "max": v.ADDRESS_LENGTH[1]},
            ),
        }
    )
)


class UnknownFieldPolicy(str, Enum):
    """What to do with additional fields that have no validator."""

    ALLOW = "allow"
    REJECT = "reject"

    @classmethod
    def parse(cls, value: str | UnknownFieldPolicy | None) -> UnknownFieldPolicy:
        if isinstance(value, UnknownFieldPolicy):
            return value
        if not value:
            return cls.ALLOW
        return cls(str(value).strip().lower())


@dataclass(frozen=True, slots=True)
class ValidationOutcome:
    """
    Result of one validation pass.

    :param field: Offending field name (``None`` when valid).
    :type field: str | None
    :param reason: Human-readable reason (``None`` when valid).
    :type reason: str | None
    """

    field: str | None = None
    reason: str | None = None

    @property
    def valid(self) -> bool:
        return self.field is None

    def __bool__(self) -> bool:
        return self.valid

    @classmethod
    def ok(cls) -> ValidationOutcome:
        return VALID

    @classmethod
    def invalid(cls, field: str, reason: str | None = None) -> ValidationOutcome:
        return cls(field=field, reason=reason or f"Invalid {field}.")


VALID: Final[ValidationOutcome] = ValidationOutcome()


def resolve_validator(field_name: str) -> Predicate | None:
    """
    Return the predicate applied to ``field_name``.

    Field-specific validators win over the parametrised table.

    :param field_name: Additional field name (case-sensitive).
    :type field_name: str
    :returns: Single-argument predicate or ``None`` for unknown fields.
    :rtype: Callable[[Any], bool] | None
    """
    specific = FIELD_VALIDATORS.get(field_name)
    if specific is not None:
        return specific
    entry = PARAMETRIZED_VALIDATORS.get(field_name)
    if entry is None:
        return None
    predicate, params = entry
    return lambda value: predicate(value, **params)


class RegistrationValidator:
    """Orchestrate required and additional field validation."""

    def __init__(self, *, unknown_fields: UnknownFieldPolicy | str = UnknownFieldPolicy.ALLOW):
        self.unknown_fields = UnknownFieldPolicy.parse(unknown_fields)

    def validate_required(self, data: Mapping[str, Any]) -> ValidationOutcome:
        """
        Check ``username``, ``email`` and ``password`` in that order.

        :param data: Registration payload (extra keys are ignored).
        :type data: Mapping[str, Any]
        :returns: First failure or :data:`VALID`.
        :rtype: ValidationOutcome
        """
        for name in REQUIRED_FIELDS:
            if not REQUIRED_VALIDATORS[name](data.get(name)):
                return ValidationOutcome.invalid(name)
        return VALID

    def validate_additional(self, additional: Mapping[str, Any]) -> ValidationOutcome:
        """
        Check additional fields in insertion order.

        :param additional: Non-required fields of the payload.
        :type additional: Mapping[str, Any]
        :returns: First failure or :data:`VALID`.
        :rtype: ValidationOutcome
        """
        for name, value in additional.items():
            if name in RESERVED_FIELDS:
                return ValidationOutcome.invalid(name, f"Reserved field {name}.")
            predicate = resolve_validator(name)
            if predicate is None:
                if self.unknown_fields is UnknownFieldPolicy.REJECT:
                    return ValidationOutcome.invalid(name, f"Unknown field {name}.")
                continue
            if not predicate(value):
                return ValidationOutcome.invalid(name)
        return VALID

    def validate(self, data: Mapping[str, Any]) -> ValidationOutcome:
        """Run :meth:`validate_required` then :meth:`validate_additional`."""
        outcome = self.validate_required(data)
        if not outcome.valid:
            return outcome
        return self.validate_additional(
            {k: val for k, val in data.items() if k not in REQUIRED_FIELDS}
        )
