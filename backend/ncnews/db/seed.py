"""Seeding - loads a topics/users/articles/comments dataset into an empty schema.

Invariants:
    - Insert order follows the foreign keys: topics, users, articles, comments
    - Dataset is a dict of lists of column dicts; missing optional columns take model defaults
"""

import logging

from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncSession

from ncnews.models.article import Article
from ncnews.models.comment import Comment
from ncnews.models.topic import Topic
from ncnews.models.user import User

logger = logging.getLogger(__name__)

SEED_ORDER = (
    ("topics", Topic),
    ("users", User),
    ("articles", Article),
    ("comments", Comment),
)


async def seed_database(db: AsyncSession, data: dict[str, list[dict]]) -> None:
    """Insert every table of the dataset and commit once."""
    for key, model in SEED_ORDER:
        rows = data.get(key, [])
        if rows:
            await db.execute(insert(model.__table__), rows)
        logger.info(f"Seeded {len(rows)} {key}")
    await db.commit()
