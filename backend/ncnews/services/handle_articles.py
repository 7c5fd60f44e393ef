"""Article Handlers - get_article, list_articles, patch_article_votes.

Invariants:
    - A non-numeric article_id is rejected before the store is touched
    - A well-formed article_id with no row is ResourceNotFoundError (404), never 400
    - The vote body contract is checked before the existence of the article
    - A vote change the store refuses on an existing article is 400 "Invalid column value"
"""

import logging

from ncnews.core.domain_types import ErrorReason
from ncnews.core.errors import BadRequestError, ErrorContext, ResourceNotFoundError
from ncnews.core.repository_protocols import ContentStore
from ncnews.core.validate_request import parse_resource_id, parse_vote_change
from ncnews.schemas.article import (
    ArticleEnvelope, ArticleList, ArticleResponse, ArticleSummary,
)
from ncnews.services.store_boundary import call_store

logger = logging.getLogger(__name__)


class ArticleHandlers:
    """Read and vote-patch articles."""

    def __init__(self, store: ContentStore):
        self.store = store

    async def get_article(self, raw_article_id: str) -> ArticleResponse:
        article_id = parse_resource_id(raw_article_id)
        row = await call_store(self.store.fetch_article_by_id(article_id))
        if row is None:
            raise ResourceNotFoundError("Article", article_id)
        return ArticleResponse(**row)

    async def list_articles(self) -> ArticleList:
        rows = await call_store(self.store.fetch_all_articles())
        return ArticleList(articles=[ArticleSummary(**row) for row in rows])

    async def patch_article_votes(
        self, raw_article_id: str, payload: object,
    ) -> ArticleEnvelope:
        """Apply inc_votes as a relative delta. Not idempotent: every call reapplies it."""
        article_id = parse_resource_id(raw_article_id)
        change = parse_vote_change(payload)
        row = await call_store(
            self.store.adjust_article_votes(article_id, change.inc_votes),
        )
        if row is None:
            # no row: either no such article or the total left the column range
            if await call_store(self.store.article_exists(article_id)):
                raise BadRequestError(
                    ErrorReason.INVALID_COLUMN, ErrorContext(field_name="inc_votes"),
                )
            raise ResourceNotFoundError("Article", article_id)
        logger.info(
            f"Article votes changed by {change.inc_votes} to {row['votes']}",
            extra={"article_id": article_id},
        )
        return ArticleEnvelope(article=ArticleResponse(**row))
