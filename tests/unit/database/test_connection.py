"""Unit tests for database connection management.

Tests cover:
- Pool initialization and connectivity check
- Pool access before initialization
- Health check states
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import asyncpg
import pytest

import recipebox.database.connection as db_module
from recipebox.database.connection import (
    check_database_health,
    close_database_pool,
    get_database_pool,
    init_database_pool,
)


pytestmark = pytest.mark.unit


class TestInitDatabasePool:
    """Tests for init_database_pool."""

    @pytest.mark.asyncio
    async def test_creates_pool_with_settings(self, mock_pool: MagicMock) -> None:
        """Should pass database settings to asyncpg and verify the connection."""
        with patch(
            "recipebox.database.connection.asyncpg.create_pool",
            new=AsyncMock(return_value=mock_pool),
        ) as create_pool:
            await init_database_pool()

        kwargs = create_pool.call_args.kwargs
        assert kwargs["host"] == "localhost"
        assert kwargs["server_settings"] == {"search_path": "public"}
        assert db_module._pool is mock_pool

    @pytest.mark.asyncio
    async def test_raises_when_check_fails(
        self,
        mock_pool: MagicMock,
        mock_conn: AsyncMock,
    ) -> None:
        """Should propagate connectivity failures."""
        mock_conn.fetchval.side_effect = asyncpg.PostgresError("down")

        with (
            patch(
                "recipebox.database.connection.asyncpg.create_pool",
                new=AsyncMock(return_value=mock_pool),
            ),
            pytest.raises(asyncpg.PostgresError),
        ):
            await init_database_pool()


class TestGetDatabasePool:
    """Tests for get_database_pool."""

    def test_raises_when_not_initialized(self) -> None:
        """Should raise RuntimeError before startup."""
        with pytest.raises(RuntimeError, match="not initialized"):
            get_database_pool()

    def test_returns_pool(self, mock_pool: MagicMock) -> None:
        """Should return the shared pool."""
        db_module._pool = mock_pool
        assert get_database_pool() is mock_pool


class TestCloseDatabasePool:
    """Tests for close_database_pool."""

    @pytest.mark.asyncio
    async def test_closes_and_clears(self, mock_pool: MagicMock) -> None:
        """Should close the pool and forget it."""
        db_module._pool = mock_pool
        await close_database_pool()
        mock_pool.close.assert_awaited_once()
        assert db_module._pool is None

    @pytest.mark.asyncio
    async def test_noop_without_pool(self) -> None:
        """Should do nothing when no pool exists."""
        await close_database_pool()


class TestCheckDatabaseHealth:
    """Tests for check_database_health."""

    @pytest.mark.asyncio
    async def test_not_initialized(self) -> None:
        """Should report not_initialized without a pool."""
        assert await check_database_health() == {"database": "not_initialized"}

    @pytest.mark.asyncio
    async def test_healthy(self, mock_pool: MagicMock) -> None:
        """Should report healthy when SELECT 1 succeeds."""
        db_module._pool = mock_pool
        assert await check_database_health() == {"database": "healthy"}

    @pytest.mark.asyncio
    async def test_unhealthy(self, mock_pool: MagicMock, mock_conn: AsyncMock) -> None:
        """Should report unhealthy when the query fails."""
        mock_conn.fetchval.side_effect = OSError("connection refused")
        db_module._pool = mock_pool
        assert await check_database_health() == {"database": "unhealthy"}
