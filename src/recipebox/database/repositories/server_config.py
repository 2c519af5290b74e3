"""Admin-managed server configuration repository.

Configuration documents are stored as JSON in
server_config(key, value jsonb, is_sensitive). Secrets inside a document
are only returned when explicitly requested.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

import orjson

from recipebox.database.connection import get_database_pool
from recipebox.observability.logging import get_logger


if TYPE_CHECKING:
    from asyncpg import Pool

logger = get_logger(__name__)

VIDEO_CONFIG_KEY: Final[str] = "video_config"
AI_CONFIG_KEY: Final[str] = "ai_config"

# Keys stripped from documents unless secrets are requested
SECRET_FIELDS: Final[frozenset[str]] = frozenset(
    {"apiKey", "transcriptionApiKey"}
)


class ServerConfigRepository:
    """Reads JSON configuration documents by key."""

    def __init__(self, pool: Pool | None = None) -> None:
        self._pool = pool

    @property
    def pool(self) -> Pool:
        """Get the database connection pool."""
        if self._pool is not None:
            return self._pool
        return get_database_pool()

    async def get_config(
        self,
        key: str,
        *,
        include_secrets: bool = False,
    ) -> dict[str, Any] | None:
        """Return the stored document for key, or None if nothing is stored."""
        async with self.pool.acquire() as conn:
            raw = await conn.fetchval(
                "SELECT value FROM server_config WHERE key = $1",
                key,
            )

        if raw is None:
            return None

        # asyncpg returns jsonb as text unless a codec is registered
        value: dict[str, Any] = (
            orjson.loads(raw) if isinstance(raw, (str, bytes)) else dict(raw)
        )
        if not include_secrets:
            value = {k: v for k, v in value.items() if k not in SECRET_FIELDS}
        return value
