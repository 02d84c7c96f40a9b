"""Posts Routes: list, create and fetch posts with authors and comments.

Invariants:
    - /posts allow-list: GET, POST; /posts/{post_id} allow-list: GET
    - creationDate is assigned by the repository at creation, never read from the body
    - Single post responses carry success=True; the list is a bare array, newest first
    - Unknown post id -> 404; data-access failure -> 500 with a fixed message
"""

import logging

from fastapi import APIRouter, Depends, Path, status
from pydantic import ValidationError

from blog_api.core.errors import (
    DatabaseError, DataAccessFailure, ResourceNotFoundError,
)
from blog_api.core.repository_protocols import PostRepository
from blog_api.infrastructure.repositories import get_post_repository
from blog_api.schemas.post import PostCreate, PostRead, PostResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/posts", tags=["Posts"])


@router.get(
    "",
    response_model=list[PostRead],
    summary="Get all posts",
    response_description="returns all posts.",
)
async def list_posts(posts: PostRepository = Depends(get_post_repository)):
    """All posts, newest first, each with its author and comments."""
    try:
        found = await posts.list_posts()
        return [PostRead.model_validate(post) for post in found]
    except (DatabaseError, ValidationError) as e:
        logger.error(
            f"Failed to list posts: {e}",
            extra={"entity": "post", "operation": "find_many"},
        )
        raise DataAccessFailure("retrieving", "posts") from e


@router.post(
    "",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new post",
    response_description="Post successfully created.",
)
async def create_post(
    body: PostCreate, posts: PostRepository = Depends(get_post_repository),
):
    try:
        post = await posts.create_post(
            title=body.title,
            teaser=body.teaser,
            content=body.content,
            author_id=body.user_id,
        )
        return PostResponse.model_validate(post)
    except (DatabaseError, ValidationError) as e:
        logger.error(
            f"Failed to create post: {e}",
            extra={"entity": "post", "operation": "create"},
        )
        raise DataAccessFailure("creating", "post") from e


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    summary="Get full post information",
    response_description="returns the full post data",
    responses={404: {"description": "No post with the given id"}},
)
async def get_post(
    post_id: int = Path(description="the ID of the post"),
    posts: PostRepository = Depends(get_post_repository),
):
    try:
        post = await posts.get_post(post_id)
        if post is None:
            raise ResourceNotFoundError(
                "Could not find post with specified id", entity="post",
            )
        return PostResponse.model_validate(post)
    except (DatabaseError, ValidationError) as e:
        logger.error(
            f"Failed to load post {post_id}: {e}",
            extra={"entity": "post", "operation": "find_one"},
        )
        raise DataAccessFailure("retrieving", "post") from e
