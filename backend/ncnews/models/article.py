"""Article ORM - votable content items tagged with a topic.

Invariants:
    - topic references topics.slug, author references users.username
    - votes changes by relative delta only and may go negative
    - votes stays within the 32-bit column range
    - comments go with their article (comments.article_id ON DELETE CASCADE)
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ncnews.db.base import Base

DEFAULT_ARTICLE_IMG_URL = (
    "https://images.pexels.com/photos/97050/pexels-photo-97050.jpeg"
    "?w=700&h=700"
)


class Article(Base):
    """Article entity - authored by a user, tagged with a topic."""
    __tablename__ = "articles"

    article_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    topic: Mapped[str] = mapped_column(
        String(100), ForeignKey("topics.slug"), nullable=False,
    )
    author: Mapped[str] = mapped_column(
        String(100), ForeignKey("users.username"), nullable=False,
    )
    body: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    votes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    article_img_url: Mapped[str] = mapped_column(
        String(1000), nullable=False, default=DEFAULT_ARTICLE_IMG_URL,
    )
