"""Boundary Protocols: contracts between the route handlers and the data-access layer.

Invariants:
    - Routes depend on these Protocols, never on a concrete SQLAlchemy class
    - "No matching record" is a successful None / [] result, never an exception
    - Every failure of the store surfaces as DatabaseError (core/errors.py)

Design Decisions:
    - Protocol over ABC: structural subtyping, so test doubles need no inheritance
    - Returned objects are read through attribute access (the ORM models satisfy
      the *Like protocols; pydantic schemas read them with from_attributes)
"""

from typing import Protocol


class UserLike(Protocol):
    """Structural contract for a user record."""
    id: int
    name: str
    email: str


class CommentLike(Protocol):
    """Structural contract for a comment record."""
    id: int
    title: str
    content: str


class PostLike(Protocol):
    """Structural contract for a post record with its relations loaded."""
    id: int
    title: str
    teaser: str
    content: str
    creation_date: str
    author: UserLike
    comments: list


class CommentRepository(Protocol):
    """Contract for comment persistence."""
    async def create_comment(
        self, *, title: str, content: str, author_id: int, post_id: int,
    ) -> CommentLike: ...


class PostRepository(Protocol):
    """Contract for post persistence."""
    async def get_post(self, post_id: int) -> PostLike | None: ...
    async def list_posts(self) -> list[PostLike]: ...
    async def create_post(
        self, *, title: str, teaser: str, content: str, author_id: int,
    ) -> PostLike: ...


class UserRepository(Protocol):
    """Contract for user lookups."""
    async def get_user_by_email(self, email: str) -> UserLike | None: ...
