"""SQLAlchemy Repositories: the data-access capability behind every route.

Invariants:
    - One repository per request, bound to that request's AsyncSession
    - find_one / find_many return None / [] for "no match"; only store failures raise
    - Every SQLAlchemyError surfaces as DatabaseError (via raise_database_error)
    - Each entity method states its projection explicitly (load_only + selectinload)

Design Decisions:
    - Generic Repository[ModelT] holds the three operations; per-entity subclasses
      only bind filters and projections
    - create() commits, then re-reads the row with the projection options so
      relationships are loaded before the session is closed (async: no lazy loads)
"""

import logging
from typing import Any, Generic, Sequence, TypeVar

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import load_only, selectinload

from blog_api.core.timestamps import new_creation_date
from blog_api.db.base import Base
from blog_api.infrastructure.database import get_db, raise_database_error
from blog_api.models.comment import Comment
from blog_api.models.post import Post
from blog_api.models.user import User

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """findOne / findMany / create over a single ORM entity."""

    model: type[ModelT]

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_one(
        self, *filters: Any, options: Sequence[Any] = (),
    ) -> ModelT | None:
        stmt = select(self.model).where(*filters).options(*options).limit(1)
        try:
            result = await self.db.execute(stmt)
            return result.scalars().first()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise_database_error(e)

    async def find_many(
        self,
        *filters: Any,
        options: Sequence[Any] = (),
        order_by: Sequence[Any] = (),
    ) -> list[ModelT]:
        stmt = select(self.model).where(*filters).options(*options)
        if order_by:
            stmt = stmt.order_by(*order_by)
        try:
            result = await self.db.execute(stmt)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise_database_error(e)

    async def create(
        self, fields: dict[str, Any], options: Sequence[Any] = (),
    ) -> ModelT:
        instance = self.model(**fields)
        try:
            self.db.add(instance)
            await self.db.commit()
            if not options:
                return instance
            stmt = (
                select(self.model)
                .where(self.model.id == instance.id)
                .options(*options)
                .execution_options(populate_existing=True)
            )
            result = await self.db.execute(stmt)
            return result.scalars().one()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise_database_error(e)


# ─── Projections ────────────────────────────────────────────────

def _full_post_projection() -> list:
    """id, title, teaser, content, creationDate, author{all},
    comments{id, title, content, author{all}}."""
    # FK columns stay loaded: the many-to-one selectin loads key off them
    return [
        load_only(
            Post.id, Post.title, Post.teaser, Post.content,
            Post.creation_date, Post.author_id,
        ),
        selectinload(Post.author),
        selectinload(Post.comments).load_only(
            Comment.id, Comment.title, Comment.content, Comment.author_id,
        ),
        selectinload(Post.comments).selectinload(Comment.author),
    ]


class CommentRepository(Repository[Comment]):
    model = Comment

    async def create_comment(
        self, *, title: str, content: str, author_id: int, post_id: int,
    ) -> Comment:
        comment = await self.create({
            "title": title,
            "content": content,
            "author_id": author_id,
            "post_id": post_id,
        })
        logger.info(
            f"Created comment {comment.id} on post {post_id}",
            extra={"entity": "comment", "operation": "create"},
        )
        return comment


class PostRepository(Repository[Post]):
    model = Post

    async def get_post(self, post_id: int) -> Post | None:
        return await self.find_one(
            Post.id == post_id, options=_full_post_projection(),
        )

    async def list_posts(self) -> list[Post]:
        return await self.find_many(
            options=_full_post_projection(),
            order_by=[Post.creation_date.desc(), Post.id.desc()],
        )

    async def create_post(
        self, *, title: str, teaser: str, content: str, author_id: int,
    ) -> Post:
        post = await self.create(
            {
                "title": title,
                "teaser": teaser,
                "content": content,
                "author_id": author_id,
                "creation_date": new_creation_date(),
            },
            options=_full_post_projection(),
        )
        logger.info(
            f"Created post {post.id}",
            extra={"entity": "post", "operation": "create"},
        )
        return post


class UserRepository(Repository[User]):
    model = User

    async def get_user_by_email(self, email: str) -> User | None:
        return await self.find_one(User.email == email)


# ─── FastAPI dependencies ───────────────────────────────────────

def get_comment_repository(
    db: AsyncSession = Depends(get_db),
) -> CommentRepository:
    return CommentRepository(db)


def get_post_repository(db: AsyncSession = Depends(get_db)) -> PostRepository:
    return PostRepository(db)


def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    return UserRepository(db)
