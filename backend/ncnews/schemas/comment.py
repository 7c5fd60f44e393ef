"""Comment Schemas."""

from datetime import datetime

from pydantic import BaseModel


class CommentResponse(BaseModel):
    comment_id: int
    article_id: int
    author: str
    body: str
    votes: int
    created_at: datetime


class CommentList(BaseModel):
    comments: list[CommentResponse]


class CommentEnvelope(BaseModel):
    comment: CommentResponse
