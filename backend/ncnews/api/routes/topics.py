"""Topic Routes - GET /api/topics."""

from fastapi import APIRouter, Depends

from ncnews.api.dependencies import get_content_store
from ncnews.core.repository_protocols import ContentStore
from ncnews.schemas.topic import TopicResponse
from ncnews.services.handle_topics import TopicHandlers

router = APIRouter(prefix="/api/topics", tags=["topics"])


@router.get("", response_model=list[TopicResponse])
async def get_topics(store: ContentStore = Depends(get_content_store)):
    """List every topic."""
    return await TopicHandlers(store).list_topics()
