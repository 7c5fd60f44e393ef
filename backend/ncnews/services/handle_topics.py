"""Topic Handlers - list_topics."""

from ncnews.core.repository_protocols import ContentStore
from ncnews.schemas.topic import TopicResponse
from ncnews.services.store_boundary import call_store


class TopicHandlers:

    def __init__(self, store: ContentStore):
        self.store = store

    async def list_topics(self) -> list[TopicResponse]:
        rows = await call_store(self.store.fetch_topics())
        return [TopicResponse(**row) for row in rows]
