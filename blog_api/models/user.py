"""User ORM: authors of posts and comments.

Invariants:
    - id is an integer primary key assigned by the store
    - email is the external lookup key (uniqueness assumed, not enforced)
    - Users are read-only from the API's point of view
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blog_api.db.base import Base


class User(Base):
    """User entity."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    posts: Mapped[list["Post"]] = relationship("Post", back_populates="author")
    comments: Mapped[list["Comment"]] = relationship(
        "Comment", back_populates="author",
    )
