"""Comment ORM - replies attached to an article.

Invariants:
    - Always belongs to an Article (article_id FK, cascade on delete)
    - author references users.username; unknown authors are rejected by the store
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ncnews.db.base import Base


class Comment(Base):
    __tablename__ = "comments"

    comment_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    article_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("articles.article_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    author: Mapped[str] = mapped_column(
        String(100), ForeignKey("users.username"), nullable=False,
    )
    body: Mapped[str] = mapped_column(Text, nullable=False)
    votes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
