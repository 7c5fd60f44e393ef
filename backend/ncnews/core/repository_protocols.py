"""Boundary Protocols - contract between the handlers and the query layer.

Invariants:
    - Core NEVER imports from infrastructure: dependency arrows point inward only
    - Rows cross the boundary as plain dicts keyed by column name
    - Zero rows is a normal result (None / empty list), never an exception
    - adjust_article_votes returns None when the article is missing or when the new
      total would leave the votes column range; nothing is written in either case
    - Backend rejections surface as StoreRejection carrying a StoreFailure

Design Decisions:
    - Protocol over ABC: structural subtyping, tests pass an in-memory fake
    - Async in Protocol: implementations do IO, the pure validation around them does not
"""

from typing import Protocol

from ncnews.core.domain_types import ArticleId, Username


class ContentStore(Protocol):
    """Query layer over topics, users, articles and comments."""
    async def fetch_topics(self) -> list[dict]: ...
    async def fetch_article_by_id(self, article_id: ArticleId) -> dict | None: ...
    async def fetch_all_articles(self) -> list[dict]: ...
    async def article_exists(self, article_id: ArticleId) -> bool: ...
    async def fetch_comments_by_article(
        self, article_id: ArticleId,
    ) -> list[dict]: ...
    async def insert_comment(
        self, article_id: ArticleId, author: Username, body: str,
    ) -> dict: ...
    async def adjust_article_votes(
        self, article_id: ArticleId, delta: int,
    ) -> dict | None: ...
