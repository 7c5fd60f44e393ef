"""Article Schemas - single article, list entry with comment_count, and envelopes.

Invariants:
    - ArticleSummary carries comment_count and omits body
    - created_at serializes as an ISO-8601 string
"""

from datetime import datetime

from pydantic import BaseModel, Field


class ArticleResponse(BaseModel):
    """Full article as served by GET /api/articles/{article_id}."""
    article_id: int
    title: str
    topic: str
    author: str
    body: str
    created_at: datetime
    votes: int
    article_img_url: str


class ArticleSummary(BaseModel):
    """List entry as served by GET /api/articles."""
    article_id: int
    title: str
    topic: str
    author: str
    created_at: datetime
    votes: int
    article_img_url: str
    comment_count: int = Field(ge=0)


class ArticleList(BaseModel):
    articles: list[ArticleSummary]


class ArticleEnvelope(BaseModel):
    article: ArticleResponse
