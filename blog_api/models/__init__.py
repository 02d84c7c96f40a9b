"""ORM Models: SQLAlchemy declarative models for users, posts and comments.

Invariants:
    - All models inherit from Base (db/base.py)
    - Identifiers are integers assigned by the store, never by clients

Design Decisions:
    - One file per entity
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from blog_api.models.user import User  # noqa: F401
from blog_api.models.post import Post  # noqa: F401
from blog_api.models.comment import Comment  # noqa: F401
