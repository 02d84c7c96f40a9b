"""Comments Route: POST /comments creates a comment on a post.

Invariants:
    - Allow-list: POST only (anything else -> 405 via the router)
    - 201 body is exactly {id, title, content, success}
    - Any data-access failure -> 500 "Error creating the comment", cause logged only
"""

import logging

from fastapi import APIRouter, Depends, status
from pydantic import ValidationError

from blog_api.core.errors import DatabaseError, DataAccessFailure
from blog_api.core.repository_protocols import CommentRepository
from blog_api.infrastructure.repositories import get_comment_repository
from blog_api.schemas.comment import CommentCreate, CommentCreated

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/comments", tags=["Comments"])


@router.post(
    "",
    response_model=CommentCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new comment",
    response_description="Comment successfully created.",
)
async def create_comment(
    body: CommentCreate,
    comments: CommentRepository = Depends(get_comment_repository),
):
    """Create a comment authored by `userId` on post `postId`."""
    try:
        comment = await comments.create_comment(
            title=body.title,
            content=body.content,
            author_id=body.user_id,
            post_id=body.post_id,
        )
        return CommentCreated.model_validate(comment)
    except (DatabaseError, ValidationError) as e:
        logger.error(
            f"Failed to create comment: {e}",
            extra={"entity": "comment", "operation": "create"},
        )
        raise DataAccessFailure("creating", "comment") from e
