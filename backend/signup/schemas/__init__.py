"""Convenience exports for application schemas."""

from __future__ import annotations

from .registration import RegistrationResponseSchema, UserListQuerySchema, UserListSchema

__all__ = [
    "RegistrationResponseSchema",
    "UserListQuerySchema",
    "UserListSchema",
]
