"""Field predicates and the registration validator."""

from .registration import (
    VALID,
    RegistrationValidator,
    UnknownFieldPolicy,
    ValidationOutcome,
    resolve_validator,
)

__all__ = [
    "VALID",
    "RegistrationValidator",
    "UnknownFieldPolicy",
    "ValidationOutcome",
    "resolve_validator",
]
