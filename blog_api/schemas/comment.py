"""Comment Schemas: create request and the {id, title, content} projection.

Invariants:
    - CommentCreate requires title, content, userId, postId
    - CommentRead exposes exactly id, title, content (no author, no post)
"""

from pydantic import Field

from blog_api.schemas.base import CamelModel, SuccessEnvelope
from blog_api.schemas.user import UserRead


class CommentCreate(CamelModel):
    """POST /comments body."""
    model_config = {
        "json_schema_extra": {
            "example": {
                "title": "Comment title",
                "content": "Comment content",
                "userId": 1,
                "postId": 1,
            },
        },
    }

    title: str
    content: str = Field(json_schema_extra={"format": "rich-text"})
    user_id: int
    post_id: int


class CommentRead(CamelModel):
    """Comment projection returned on creation."""
    id: int
    title: str
    content: str = Field(json_schema_extra={"format": "rich-text"})


class CommentCreated(SuccessEnvelope, CommentRead):
    """POST /comments 201 body."""
    model_config = {
        "json_schema_extra": {
            "example": {
                "id": 1,
                "title": "Comment title",
                "content": "Comment content",
                "success": True,
            },
        },
    }


class CommentWithAuthor(CommentRead):
    """Comment as embedded in a post."""
    author: UserRead
