"""Root conftest - shared test configuration and seeded database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys enforced
    - The database is seeded with tests/seed_data.py before the test runs
"""

import os

# Ensure tests never reach a real database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

import ncnews.models  # noqa: E402,F401
from ncnews.db.base import Base  # noqa: E402
from ncnews.db.seed import seed_database  # noqa: E402
from ncnews.infrastructure.database import enable_sqlite_foreign_keys  # noqa: E402
from tests.seed_data import TEST_DATA  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )
    async with factory() as session:
        await seed_database(session, TEST_DATA)
    return factory


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session
