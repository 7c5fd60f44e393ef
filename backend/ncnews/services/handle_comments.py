"""Comment Handlers - list_comments, post_comment.

Invariants:
    - An empty comment list is only trusted after the article is known to exist
    - Unknown field names are rejected before the insert ("Invalid column value");
      unknown authors are rejected by the store FK ("Invalid key value insert")
"""

import logging

from ncnews.core.domain_types import ArticleId
from ncnews.core.errors import ResourceNotFoundError
from ncnews.core.repository_protocols import ContentStore
from ncnews.core.validate_request import parse_new_comment, parse_resource_id
from ncnews.schemas.comment import CommentEnvelope, CommentList, CommentResponse
from ncnews.services.store_boundary import call_store

logger = logging.getLogger(__name__)


class CommentHandlers:
    """Read and create comments under an article."""

    def __init__(self, store: ContentStore):
        self.store = store

    async def list_comments(self, raw_article_id: str) -> CommentList:
        article_id = parse_resource_id(raw_article_id)
        await self._require_article(article_id)
        rows = await call_store(self.store.fetch_comments_by_article(article_id))
        return CommentList(comments=[CommentResponse(**row) for row in rows])

    async def post_comment(
        self, raw_article_id: str, payload: object,
    ) -> CommentEnvelope:
        article_id = parse_resource_id(raw_article_id)
        new_comment = parse_new_comment(payload)
        await self._require_article(article_id)
        row = await call_store(self.store.insert_comment(
            article_id, new_comment.author, new_comment.body,
        ))
        logger.info(
            f"Comment {row['comment_id']} posted by {new_comment.author}",
            extra={"article_id": article_id},
        )
        return CommentEnvelope(comment=CommentResponse(**row))

    async def _require_article(self, article_id: ArticleId) -> None:
        if not await call_store(self.store.article_exists(article_id)):
            raise ResourceNotFoundError("Article", article_id)
