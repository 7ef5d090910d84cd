"""Registration endpoints using the service layer."""

from __future__ import annotations

from flask import Blueprint, current_app, request

from signup.api.deps import (
    build_registration_service,
    json_response,
    read_registration_body,
    timing,
)
from signup.core.errors import NotFound
from signup.core.extensions import get_storage
from signup.schemas import RegistrationResponseSchema, UserListQuerySchema, UserListSchema
from signup.services._shared.errors import ServiceError

bp = Blueprint("registration", __name__)

response_schema = RegistrationResponseSchema()
user_list_schema = UserListSchema()


@bp.post("/register")
@timing
async def register():
    """Validate, hash and store a new user; return the stored representation."""

    dto = read_registration_body()
    service = build_registration_service()
    try:
        out = await service.register(dto)
    except ServiceError as exc:
        raise service.translate_exceptions(exc) from exc
    # NOTE: the body includes the password hash and salt.
    return json_response(response_schema.dump(out.to_dict()), status=201)


@bp.get("/users")
@timing
def list_users():
    """Inspection listing of stored records (disabled unless configured)."""

    if not current_app.config.get("ENABLE_USER_LISTING", False):
        raise NotFound(f"Route '{request.path}' not found")
    query = UserListQuerySchema().load(request.args)
    records = get_storage().list_all()
    offset, limit = query["offset"], query["limit"]
    body = {
        "items": [r.to_dict() for r in records[offset : offset + limit]],
        "total": len(records),
        "offset": offset,
        "limit": limit,
    }
    return json_response(user_list_schema.dump(body))
