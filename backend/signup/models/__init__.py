from signup.models.registered_user import RegisteredUser

__all__ = [
    "RegisteredUser",
]
