"""Route Dependencies - builds the store handle each request is served with."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ncnews.infrastructure.content_store import SqlContentStore
from ncnews.infrastructure.database import get_db


def get_content_store(db: AsyncSession = Depends(get_db)) -> SqlContentStore:
    """Wrap the request's session in the query layer."""
    return SqlContentStore(db)
