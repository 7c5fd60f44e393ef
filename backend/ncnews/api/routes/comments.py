"""Comment Routes - comments nested under an article."""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from ncnews.api.dependencies import get_content_store
from ncnews.core.repository_protocols import ContentStore
from ncnews.schemas.comment import CommentEnvelope, CommentList
from ncnews.services.handle_comments import CommentHandlers

router = APIRouter(prefix="/api/articles", tags=["comments"])


@router.get("/{article_id}/comments", response_model=CommentList)
async def get_comments(
    article_id: str, store: ContentStore = Depends(get_content_store),
):
    """List an article's comments, newest first."""
    return await CommentHandlers(store).list_comments(article_id)


@router.post(
    "/{article_id}/comments", response_model=CommentEnvelope,
    status_code=status.HTTP_201_CREATED,
)
async def post_comment(
    article_id: str,
    payload: Any = Body(None),
    store: ContentStore = Depends(get_content_store),
):
    """Create a comment from {"author", "body"}."""
    return await CommentHandlers(store).post_comment(article_id, payload)
