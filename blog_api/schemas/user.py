"""User Schemas: the full user record as returned by lookups."""

from blog_api.schemas.base import CamelModel, SuccessEnvelope


class UserRead(CamelModel):
    """Full user record."""
    model_config = {
        "json_schema_extra": {
            "example": {"id": 1, "name": "User Name", "email": "user.name@email.com"},
        },
    }

    id: int
    name: str
    email: str


class UserResponse(SuccessEnvelope, UserRead):
    """GET /users body."""
