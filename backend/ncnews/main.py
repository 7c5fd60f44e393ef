"""NC News API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map NcNewsError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database engine opened once on startup and disposed once on shutdown (lifespan)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ncnews.api.error_handlers import register_error_handlers
from ncnews.api.routes import articles, comments, endpoints, health, topics
from ncnews.config import get_settings
from ncnews.infrastructure.database import close_db, init_db
from ncnews.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("NC News API started")
    yield
    await close_db()
    logger.info("NC News API shut down")


app = FastAPI(
    title="NC News API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(endpoints.router)
app.include_router(health.router)
app.include_router(topics.router)
app.include_router(articles.router)
app.include_router(comments.router)

register_error_handlers(app)
