"""Article Routes - list, fetch and vote on articles.

Invariants:
    - article_id arrives as raw text; the service decides 400 vs 404
    - PATCH body is read as raw JSON so the service owns the field contract
"""

from typing import Any

from fastapi import APIRouter, Body, Depends

from ncnews.api.dependencies import get_content_store
from ncnews.core.repository_protocols import ContentStore
from ncnews.schemas.article import ArticleEnvelope, ArticleList, ArticleResponse
from ncnews.services.handle_articles import ArticleHandlers

router = APIRouter(prefix="/api/articles", tags=["articles"])


@router.get("", response_model=ArticleList)
async def get_articles(store: ContentStore = Depends(get_content_store)):
    """List all articles, newest first, with comment counts."""
    return await ArticleHandlers(store).list_articles()


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: str, store: ContentStore = Depends(get_content_store),
):
    return await ArticleHandlers(store).get_article(article_id)


@router.patch("/{article_id}", response_model=ArticleEnvelope)
async def patch_article(
    article_id: str,
    payload: Any = Body(None),
    store: ContentStore = Depends(get_content_store),
):
    """Apply {"inc_votes": n} to the article's votes."""
    return await ArticleHandlers(store).patch_article_votes(article_id, payload)
