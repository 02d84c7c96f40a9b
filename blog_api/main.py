"""Blog API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure onto the {error, success: false} envelope
    - CORS applied to every request by middleware, configured from settings
    - Database handle initialized once on startup via lifespan, disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event
    - OpenAPI generated by FastAPI (/openapi.json, /docs) from route and schema metadata
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blog_api.api.error_handlers import register_error_handlers
from blog_api.api.routes import comments, health, posts, users
from blog_api.config import get_settings
from blog_api.infrastructure.database import close_db, init_db
from blog_api.infrastructure.observability import setup_logging

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
    if settings.database_create_tables:
        await manager.create_tables()
    logger.info("Blog API started")
    yield
    await close_db()
    logger.info("Blog API shutting down")


settings = get_settings()

app = FastAPI(
    title=settings.api_title, version=settings.api_version, lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=settings.cors_allow_methods,
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(comments.router)
app.include_router(posts.router)
app.include_router(users.router)

register_error_handlers(app)
