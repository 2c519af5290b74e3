"""Application lifespan event handlers.

Startup configures logging, opens the database pool and installs the
session provider. Shutdown releases them in reverse order.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from recipebox.auth.providers import (
    initialize_session_provider,
    shutdown_session_provider,
)
from recipebox.core.config import Settings, get_settings
from recipebox.database.connection import close_database_pool, init_database_pool
from recipebox.observability.logging import get_logger, setup_logging


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI

logger = get_logger(__name__)


async def _startup(app: FastAPI, settings: Settings) -> None:
    setup_logging(
        log_level=settings.logging.level,
        log_format=settings.logging.format,
        is_development=settings.is_development,
    )
    logger.info(
        "Starting application",
        app_name=settings.app.name,
        environment=settings.APP_ENV,
        debug=settings.app.debug,
    )

    await _init_database()
    await _init_auth(settings)

    app.state.settings = settings
    logger.info("Application startup complete")


async def _init_database() -> None:
    """Open the pool. Requests that need the database fail until it is up."""
    try:
        await init_database_pool()
    except Exception:
        logger.exception("Failed to initialize database pool - continuing without it")


async def _init_auth(settings: Settings) -> None:
    """Install the session provider (critical service)."""
    try:
        await initialize_session_provider(settings)
        logger.info("Session provider initialized", mode=settings.auth.mode)
    except Exception:
        logger.exception("Failed to initialize session provider")
        raise


async def _shutdown() -> None:
    logger.info("Shutting down application")
    await shutdown_session_provider()
    await close_database_pool()
    logger.info("Application shutdown complete")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown.

    Settings stored on app.state by create_app() take precedence over the
    cached global settings.
    """
    settings = getattr(app.state, "settings", None) or get_settings()
    await _startup(app, settings)
    try:
        yield
    finally:
        await _shutdown()
