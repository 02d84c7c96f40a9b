"""Users Route: GET /users?email= looks a user up by email.

Invariants:
    - Allow-list: GET only
    - Absent or empty email -> 400 "email parameter missing", before any query runs
    - No matching user -> 404; data-access failure -> 500
"""

import logging

from fastapi import APIRouter, Depends, Query
from pydantic import ValidationError

from blog_api.core.errors import (
    DatabaseError, DataAccessFailure, MissingParameterError,
    ResourceNotFoundError,
)
from blog_api.core.repository_protocols import UserRepository
from blog_api.infrastructure.repositories import get_user_repository
from blog_api.schemas.user import UserResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["Users"])


@router.get(
    "",
    response_model=UserResponse,
    summary="Get user by email",
    response_description="returns the user identified by the email.",
    responses={
        400: {"description": "email parameter missing"},
        404: {"description": "No user with the given email"},
    },
)
async def get_user_by_email(
    email: str | None = Query(None, description="User email"),
    users: UserRepository = Depends(get_user_repository),
):
    if not email:
        raise MissingParameterError("email")
    try:
        user = await users.get_user_by_email(email)
        if user is None:
            raise ResourceNotFoundError(
                "Could not find user with specified email", entity="user",
            )
        return UserResponse.model_validate(user)
    except (DatabaseError, ValidationError) as e:
        logger.error(
            f"Failed to look up user by email: {e}",
            extra={"entity": "user", "operation": "find_one"},
        )
        raise DataAccessFailure("retrieving", "user") from e
