"""SQL Content Store - parameterized queries over topics, articles and comments.

Invariants:
    - Implements core.repository_protocols.ContentStore; returns rows as plain dicts
    - Zero rows is returned as None / [] and never raised
    - DBAPI failures are classified by driver error code (PostgreSQL SQLSTATE or the
      SQLite extended error name), never by message text, and re-raised as StoreRejection
    - OperationalError (lost connection) is not classified here: it propagates to the
      session manager, which maps it to DatabaseError
    - Vote changes are one UPDATE ... SET votes = votes + :delta statement; atomicity of
      the read-modify-write is delegated to the backend
    - The UPDATE only matches while the new total stays in [MIN_VOTES, MAX_VOTES]
"""

import logging

from sqlalchemy import BigInteger, cast, func, insert, select, update
from sqlalchemy.exc import DBAPIError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from ncnews.core.domain_types import (
    MAX_VOTES, MIN_VOTES, ArticleId, StoreFailure, Username,
)
from ncnews.core.errors import StoreRejection
from ncnews.models.article import Article
from ncnews.models.comment import Comment
from ncnews.models.topic import Topic

logger = logging.getLogger(__name__)

FAILURE_CODES: dict[str, StoreFailure] = {
    # PostgreSQL SQLSTATE
    "23503": StoreFailure.FOREIGN_KEY_VIOLATION,
    "23502": StoreFailure.NOT_NULL_VIOLATION,
    "42703": StoreFailure.UNDEFINED_COLUMN,
    "22P02": StoreFailure.INVALID_TEXT_REPRESENTATION,
    "22003": StoreFailure.NUMERIC_OUT_OF_RANGE,
    # SQLite extended result codes
    "SQLITE_CONSTRAINT_FOREIGNKEY": StoreFailure.FOREIGN_KEY_VIOLATION,
    "SQLITE_CONSTRAINT_NOTNULL": StoreFailure.NOT_NULL_VIOLATION,
}

# Listing omits the article body
ARTICLE_SUMMARY_COLUMNS = (
    Article.article_id,
    Article.title,
    Article.topic,
    Article.author,
    Article.created_at,
    Article.votes,
    Article.article_img_url,
)


def classify_db_error(exc: DBAPIError) -> StoreFailure:
    """Map a driver exception to a StoreFailure via its error code."""
    candidates = (exc.orig, getattr(exc.orig, "__cause__", None))
    for error in candidates:
        if error is None:
            continue
        for attr in ("sqlstate", "pgcode", "sqlite_errorname"):
            code = getattr(error, attr, None)
            if isinstance(code, str) and code in FAILURE_CODES:
                return FAILURE_CODES[code]
    return StoreFailure.UNKNOWN


class SqlContentStore:
    """ContentStore backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def fetch_topics(self) -> list[dict]:
        result = await self._execute(
            select(Topic.slug, Topic.description).order_by(Topic.slug),
            "fetch_topics",
        )
        return [dict(row) for row in result.mappings().all()]

    async def fetch_article_by_id(self, article_id: ArticleId) -> dict | None:
        result = await self._execute(
            select(Article.__table__).where(Article.article_id == article_id),
            "fetch_article_by_id",
        )
        row = result.mappings().one_or_none()
        return dict(row) if row is not None else None

    async def fetch_all_articles(self) -> list[dict]:
        """All articles newest first, each with comment_count from an outer join."""
        query = (
            select(
                *ARTICLE_SUMMARY_COLUMNS,
                func.count(Comment.comment_id).label("comment_count"),
            )
            .outerjoin(Comment, Comment.article_id == Article.article_id)
            .group_by(Article.article_id)
            .order_by(Article.created_at.desc())
        )
        result = await self._execute(query, "fetch_all_articles")
        return [dict(row) for row in result.mappings().all()]

    async def article_exists(self, article_id: ArticleId) -> bool:
        result = await self._execute(
            select(Article.article_id).where(Article.article_id == article_id),
            "article_exists",
        )
        return result.scalar_one_or_none() is not None

    async def fetch_comments_by_article(
        self, article_id: ArticleId,
    ) -> list[dict]:
        result = await self._execute(
            select(Comment.__table__)
            .where(Comment.article_id == article_id)
            .order_by(Comment.created_at.desc()),
            "fetch_comments_by_article",
        )
        return [dict(row) for row in result.mappings().all()]

    async def insert_comment(
        self, article_id: ArticleId, author: Username, body: str,
    ) -> dict:
        statement = (
            insert(Comment.__table__)
            .values(article_id=article_id, author=author, body=body)
            .returning(*Comment.__table__.c)
        )
        row = await self._execute(statement, "insert_comment", commit=True)
        return dict(row)

    async def adjust_article_votes(
        self, article_id: ArticleId, delta: int,
    ) -> dict | None:
        votes = Article.__table__.c.votes
        statement = (
            update(Article.__table__)
            .where(Article.__table__.c.article_id == article_id)
            # widened so the guard itself cannot overflow int4
            .where((cast(votes, BigInteger) + delta).between(MIN_VOTES, MAX_VOTES))
            .values(votes=votes + delta)
            .returning(*Article.__table__.c)
        )
        row = await self._execute(statement, "adjust_article_votes", commit=True)
        return dict(row) if row is not None else None

    async def _execute(self, statement, operation: str, commit: bool = False):
        """Run one statement. Writes return the single RETURNING row (or None)."""
        try:
            result = await self.db.execute(statement)
            if not commit:
                return result
            row = result.mappings().one_or_none()
            await self.db.commit()
            return row
        except OperationalError:
            raise
        except DBAPIError as e:
            await self.db.rollback()
            failure = classify_db_error(e)
            logger.warning(
                f"Store rejected {operation}: {failure.value}",
                extra={"store_failure": failure.value},
            )
            raise StoreRejection(failure, operation) from e
