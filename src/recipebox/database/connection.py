"""PostgreSQL connection pool management.

The pool is created once during application startup and shared by every
repository. Repositories accept an explicit pool for tests and fall back
to the global one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import asyncpg

from recipebox.core.config import get_settings
from recipebox.observability.logging import get_logger


if TYPE_CHECKING:
    from asyncpg import Pool

logger = get_logger(__name__)

_pool: Pool | None = None


async def init_database_pool() -> None:
    """Create the asyncpg pool and verify connectivity."""
    global _pool  # noqa: PLW0603

    settings = get_settings()

    logger.info(
        "Initializing database connection pool",
        host=settings.database.host,
        port=settings.database.port,
        database=settings.database.name,
    )

    _pool = await asyncpg.create_pool(
        host=settings.database.host,
        port=settings.database.port,
        database=settings.database.name,
        user=settings.database.user,
        password=settings.DATABASE_PASSWORD or None,
        min_size=settings.database.min_pool_size,
        max_size=settings.database.max_pool_size,
        command_timeout=settings.database.command_timeout,
        ssl=True if settings.database.ssl else None,
        server_settings={"search_path": settings.database.db_schema},
    )

    try:
        async with _pool.acquire() as conn:
            await conn.fetchval("SELECT 1")
    except asyncpg.PostgresError:
        logger.exception("Failed to connect to database")
        raise
    logger.info("Database connection established")


async def close_database_pool() -> None:
    """Close the pool if it was opened."""
    global _pool  # noqa: PLW0603

    if _pool is not None:
        await _pool.close()
        _pool = None
        logger.info("Database connection pool closed")


def get_database_pool() -> Pool:
    """Return the shared pool.

    Raises:
        RuntimeError: If init_database_pool() has not run.
    """
    if _pool is None:
        msg = "Database pool not initialized. Call init_database_pool() first."
        raise RuntimeError(msg)
    return _pool


async def check_database_health() -> dict[str, str]:
    """Report database status for the readiness probe."""
    if _pool is None:
        return {"database": "not_initialized"}

    try:
        async with _pool.acquire() as conn:
            await conn.fetchval("SELECT 1")
    except (asyncpg.PostgresError, OSError):
        logger.warning("Database health check failed")
        return {"database": "unhealthy"}
    return {"database": "healthy"}
