"""Registration-related Marshmallow schemas.

Request bodies are *not* loaded through a schema: they carry arbitrary
additional keys whose submission order matters, and are validated by
:mod:`signup.validation`. Schemas here shape responses and query strings.
"""

from __future__ import annotations

from typing import Any

from marshmallow import Schema, fields, post_load, validate


class RegistrationResponseSchema(Schema):
    """Success payload: confirmation message and the stored record."""

    message = fields.String(required=True)
    user = fields.Dict(keys=fields.String(), required=True)


class UserListQuerySchema(Schema):
    """Validate ``offset``/``limit`` for the inspection listing."""

    def __init__(self, *, default_limit: int = 50, max_limit: int = 500, **kwargs: Any) -> None:
        self._default_limit = default_limit
        self._max_limit = max_limit
        super().__init__(**kwargs)

    offset = fields.Integer(load_default=0, validate=validate.Range(min=0))
    limit = fields.Integer(validate=validate.Range(min=1))

    @post_load
    def apply_defaults(self, data: dict[str, Any], **_: Any) -> dict[str, Any]:
        limit = data.get("limit", self._default_limit)
        data["limit"] = min(max(limit, 1), self._max_limit)
        data.setdefault("offset", 0)
        return data


class UserListSchema(Schema):
    """Envelope for the inspection listing."""

    items = fields.List(fields.Dict(keys=fields.String()), required=True)
    total = fields.Integer(required=True)
    offset = fields.Integer(required=True)
    limit = fields.Integer(required=True)
