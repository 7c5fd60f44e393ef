"""Initial schema - topics, users, articles, comments.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "topics",
        sa.Column("slug", sa.String(100), primary_key=True),
        sa.Column("description", sa.String(500), nullable=False),
    )

    op.create_table(
        "users",
        sa.Column("username", sa.String(100), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("avatar_url", sa.String(1000), nullable=True),
    )

    op.create_table(
        "articles",
        sa.Column("article_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("topic", sa.String(100), sa.ForeignKey("topics.slug"), nullable=False),
        sa.Column("author", sa.String(100), sa.ForeignKey("users.username"), nullable=False),
        sa.Column("body", sa.Text, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("votes", sa.Integer, nullable=False, server_default="0"),
        sa.Column("article_img_url", sa.String(1000), nullable=False),
    )

    op.create_table(
        "comments",
        sa.Column("comment_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "article_id", sa.Integer,
            sa.ForeignKey("articles.article_id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("author", sa.String(100), sa.ForeignKey("users.username"), nullable=False),
        sa.Column("body", sa.Text, nullable=False),
        sa.Column("votes", sa.Integer, nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_comments_article_id", "comments", ["article_id"])


def downgrade() -> None:
    op.drop_index("ix_comments_article_id", table_name="comments")
    op.drop_table("comments")
    op.drop_table("articles")
    op.drop_table("users")
    op.drop_table("topics")
