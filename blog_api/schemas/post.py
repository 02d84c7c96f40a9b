"""Post Schemas: create request and the full nested post projection.

Invariants:
    - PostCreate requires title, teaser, content, userId; creationDate is never accepted
    - PostRead nests the author and every comment with its author
"""

from pydantic import Field

from blog_api.schemas.base import CamelModel, SuccessEnvelope
from blog_api.schemas.comment import CommentWithAuthor
from blog_api.schemas.user import UserRead

_AUTHOR_EXAMPLE = {"id": 1, "name": "User Name", "email": "user.name@email.com"}

POST_EXAMPLE = {
    "id": 1,
    "title": "Post title",
    "teaser": "Post teaser ...",
    "content": "Post content",
    "creationDate": "2022-08-08T19:48:07.653Z",
    "comments": [
        {
            "id": 1,
            "title": "Comment title",
            "content": "Comment content",
            "author": _AUTHOR_EXAMPLE,
        },
    ],
    "author": _AUTHOR_EXAMPLE,
}


class PostCreate(CamelModel):
    """POST /posts body."""
    model_config = {
        "json_schema_extra": {
            "example": {
                "title": "Post title",
                "teaser": "Post teaser ...",
                "content": "Post content",
                "userId": 1,
            },
        },
    }

    title: str
    teaser: str
    content: str = Field(json_schema_extra={"format": "rich-text"})
    user_id: int


class PostRead(CamelModel):
    """Full post with author and comments."""
    model_config = {"json_schema_extra": {"example": POST_EXAMPLE}}

    id: int
    title: str
    teaser: str
    content: str = Field(json_schema_extra={"format": "rich-text"})
    creation_date: str = Field(json_schema_extra={"format": "date-time"})
    author: UserRead
    comments: list[CommentWithAuthor] = []


class PostResponse(SuccessEnvelope, PostRead):
    """Single-post body (GET /posts/{id}, POST /posts)."""
    model_config = {"json_schema_extra": {"example": {**POST_EXAMPLE, "success": True}}}
