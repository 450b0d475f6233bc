"""WASAPhoto API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map WasaPhotoError → {"message": ...} responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - SQLite URLs get their schema created on startup; PostgreSQL is migrated by Alembic
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wasaphoto.api.error_handlers import register_error_handlers
from wasaphoto.api.routes import (
    comments, health, photos, profile, session, social_actions,
)
from wasaphoto.config import get_settings
from wasaphoto.db.session import create_schema
from wasaphoto.infrastructure.database import init_db
from wasaphoto.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_url.startswith("sqlite"):
        await create_schema(manager.engine)
    logger.info("WASAPhoto API started")
    yield
    logger.info("WASAPhoto API shutting down")
    await manager.dispose()


app = FastAPI(
    title="WASAPhoto API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(session.router)
app.include_router(profile.router)
app.include_router(social_actions.router)
app.include_router(photos.router)
app.include_router(comments.router)

register_error_handlers(app)
