"""Per-field predicates for registration payloads.

Every function here is pure: it takes a raw value (as decoded from JSON or a
form) and returns ``True`` when the value is acceptable. Patterns are matched
against the whole value and restricted to ASCII.
"""

from __future__ import annotations

import re
from typing import Any, Final

USERNAME_RE: Final = re.compile(r"[A-Za-z0-9]{8,}")
EMAIL_RE: Final = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_RE: Final = re.compile(r"[0-9]{10}")
AGE_RE: Final = re.compile(r"\s*[+-]?[0-9]+\s*")

PASSWORD_MIN_LENGTH: Final[int] = 8
PASSWORD_SYMBOLS: Final[str] = "@$!%*?&"
PASSWORD_ALLOWED_RE: Final = re.compile(r"[A-Za-z0-9@$!%*?&]*")

GENDERS: Final[frozenset[str]] = frozenset({"male", "female", "other"})
AGE_MIN: Final[int] = 18
AGE_MAX: Final[int] = 100

NAME_LENGTH: Final[tuple[int, int]] = (1, 8)
ADDRESS_LENGTH: Final[tuple[int, int]] = (1, 100)


def _is_number(value: Any) -> bool:
    # bool is an int subclass; never treat it as numeric input
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# --------------------------------------------------------------------------- #
# Required fields
# --------------------------------------------------------------------------- #


def validate_username(value: Any) -> bool:
    """Alphanumeric, at least 8 characters."""
    return isinstance(value, str) and USERNAME_RE.fullmatch(value) is not None


def validate_email(value: Any) -> bool:
    """Loose ``local@domain.tld`` shape without whitespace."""
    return isinstance(value, str) and EMAIL_RE.fullmatch(value) is not None


def validate_password(value: Any) -> bool:
    """
    Check password strength.

    :param value: Candidate password.
    :returns: ``True`` when the password has at least 8 characters, one
        lowercase letter, one uppercase letter, one digit, one symbol from
        ``@$!%*?&`` and nothing outside that alphabet.
    :rtype: bool
    """
    if not isinstance(value, str) or len(value) < PASSWORD_MIN_LENGTH:
        return False
    if PASSWORD_ALLOWED_RE.fullmatch(value) is None:
        return False
    return (
        any("a" <= ch <= "z" for ch in value)
        and any("A" <= ch <= "Z" for ch in value)
        and any("0" <= ch <= "9" for ch in value)
        and any(ch in PASSWORD_SYMBOLS for ch in value)
    )


# --------------------------------------------------------------------------- #
# Additional fields
# --------------------------------------------------------------------------- #


def validate_length(value: Any, *, min: int, max: int) -> bool:  # noqa: A002
    """Return ``True`` for strings whose length lies in ``[min, max]``."""
    return isinstance(value, str) and min <= len(value) <= max


def validate_phone_number(value: Any) -> bool:
    """Exactly ten decimal digits; integers are checked on their decimal text."""
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    return isinstance(value, str) and PHONE_RE.fullmatch(value) is not None


def validate_gender(value: Any) -> bool:
    return isinstance(value, str) and value.lower() in GENDERS


def parse_age(value: Any) -> int | None:
    """
    Coerce an age value to ``int``.

    :param value: ``int``, integral ``float`` or a (signed) digit string.
    :returns: Parsed integer or ``None`` when the value is not integer-like.
    :rtype: int | None
    """
    if _is_number(value):
        if isinstance(value, float):
            return int(value) if value.is_integer() else None
        return int(value)
    if isinstance(value, str) and AGE_RE.fullmatch(value):
        return int(value.strip())
    return None


def validate_age(value: Any) -> bool:
    age = parse_age(value)
    return age is not None and AGE_MIN <= age <= AGE_MAX


def validate_firstname(value: Any) -> bool:
    return validate_length(value, min=NAME_LENGTH[0], max=NAME_LENGTH[1])


def validate_lastname(value: Any) -> bool:
    return validate_length(value, min=NAME_LENGTH[0], max=NAME_LENGTH[1])


__all__ = [
    "parse_age",
    "validate_age",
    "validate_email",
    "validate_firstname",
    "validate_gender",
    "validate_lastname",
    "validate_length",
    "validate_password",
    "validate_phone_number",
    "validate_username",
]
