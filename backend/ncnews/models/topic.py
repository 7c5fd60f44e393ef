"""Topic ORM - named categories that articles belong to. Seed data, read-only over HTTP."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from ncnews.db.base import Base


class Topic(Base):
    __tablename__ = "topics"

    slug: Mapped[str] = mapped_column(String(100), primary_key=True)
    description: Mapped[str] = mapped_column(String(500), nullable=False)
