"""Factories for registration payloads and stored users."""

from __future__ import annotations

import factory

from signup.models.registered_user import RegisteredUser
from signup.security.hashing import generate_salt, hash_password
from tests.factories import BaseFactory

VALID_PASSWORD = "Abcdef1!"


class RegistrationPayloadFactory(factory.DictFactory):
    """Build a valid ``{username, email, password}`` payload.

    Additional fields are passed as keyword arguments, e.g.
    ``RegistrationPayloadFactory(age="25")``.
    """

    username = factory.Sequence(lambda n: f"member{n:04d}")
    email = factory.Sequence(lambda n: f"member{n:04d}@example.com")
    password = VALID_PASSWORD


class RegisteredUserFactory(BaseFactory):
    """Build persisted :class:`RegisteredUser` rows with a real salt/hash."""

    class Meta:
        model = RegisteredUser

    id = None  # let autoincrement handle it
    username = factory.Sequence(lambda n: f"stored{n:04d}")
    email = factory.LazyAttribute(lambda o: f"{o.username}@example.com")
    password_salt = factory.LazyFunction(generate_salt)
    password_hash = factory.LazyAttribute(lambda o: hash_password(VALID_PASSWORD, o.password_salt))
    extra = factory.LazyFunction(dict)
