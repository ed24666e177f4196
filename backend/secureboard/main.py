"""SecureBoard API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map SecureBoardError → structured JSON responses
    - CORS allows exactly the configured origins (one by default)
    - The database manager is owned by the lifespan and stored on app.state;
      no module holds a global store handle

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Tables created on startup when database_auto_create is set; alembic for
      managed deployments
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from secureboard.api.error_handlers import register_error_handlers
from secureboard.api.routes import comments, health, users
from secureboard.config import get_settings
from secureboard.infrastructure.database import DatabaseSessionManager
from secureboard.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_auto_create:
        await db_manager.create_schema()
    app.state.db_manager = db_manager
    logger.info("SecureBoard API started")
    yield
    logger.info("SecureBoard API shutting down")
    await db_manager.dispose()
    app.state.db_manager = None


app = FastAPI(
    title="SecureBoard API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)

app.include_router(health.router)
app.include_router(users.router)
app.include_router(comments.router)

register_error_handlers(app)
