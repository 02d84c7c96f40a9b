"""Post ORM: a blog article written by exactly one User.

Invariants:
    - author_id is non-nullable (FK users.id)
    - creation_date is an ISO-8601 string set once by the create handler
    - comments is a back-reference only; posts never mutate it

Design Decisions:
    - creation_date stored as text in the exact format returned to clients,
      so ordering by the column is chronological (core/timestamps.py)
"""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blog_api.db.base import Base


class Post(Base):
    """Post entity."""
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    teaser: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    creation_date: Mapped[str] = mapped_column(String(32), nullable=False)
    author_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False,
    )

    author: Mapped["User"] = relationship("User", back_populates="posts")
    comments: Mapped[list["Comment"]] = relationship(
        "Comment", back_populates="post", order_by="Comment.id",
    )
