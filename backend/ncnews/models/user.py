"""User ORM - authors of articles and comments.

Invariants:
    - username is the primary key and the FK target for Article.author / Comment.author
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from ncnews.db.base import Base


class User(Base):
    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(100), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    avatar_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
