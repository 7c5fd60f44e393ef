"""ORM Models - SQLAlchemy declarative models for topics, users, articles, comments.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so Base.metadata knows every table (and every
      string ForeignKey target) before create_all or a migration runs
"""

from ncnews.models.topic import Topic  # noqa: F401
from ncnews.models.user import User  # noqa: F401
from ncnews.models.article import Article  # noqa: F401
from ncnews.models.comment import Comment  # noqa: F401
