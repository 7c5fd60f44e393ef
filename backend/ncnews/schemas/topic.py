"""Topic Schemas."""

from pydantic import BaseModel


class TopicResponse(BaseModel):
    slug: str
    description: str
