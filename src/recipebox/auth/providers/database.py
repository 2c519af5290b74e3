"""Database-backed session provider.

Resolves API keys (sent in the x-api-key header) and browser session
cookies against PostgreSQL:

- api_keys(user_id, key_hash, enabled, expires_at): keys are stored as
  SHA-256 hex digests, never in plain text
- sessions(token, user_id, expires_at)
- users(id, name, email, is_server_admin)

When an API key is present it is authoritative: an unknown key does not
fall back to the cookie.
"""

from __future__ import annotations

import hashlib
from typing import TYPE_CHECKING

import asyncpg
from starlette.datastructures import Headers

from recipebox.auth.providers.exceptions import SessionLookupError
from recipebox.auth.providers.models import AuthSession, SessionUser
from recipebox.database.connection import get_database_pool
from recipebox.observability.logging import get_logger


if TYPE_CHECKING:
    from collections.abc import Mapping

    from asyncpg import Pool, Record

logger = get_logger(__name__)

_API_KEY_QUERY = """
    SELECT u.id::text AS id, u.name, u.email, u.is_server_admin
    FROM api_keys k
    JOIN users u ON u.id = k.user_id
    WHERE k.key_hash = $1
      AND k.enabled
      AND (k.expires_at IS NULL OR k.expires_at > now())
"""

_SESSION_QUERY = """
    SELECT u.id::text AS id, u.name, u.email, u.is_server_admin
    FROM sessions s
    JOIN users u ON u.id = s.user_id
    WHERE s.token = $1
      AND s.expires_at > now()
"""


def hash_api_key(api_key: str) -> str:
    """Return the stored form of an API key."""
    return hashlib.sha256(api_key.encode()).hexdigest()


class DatabaseSessionProvider:
    """Resolves API keys and session cookies against the database.

    Attributes:
        api_key_header: Header carrying the API key.
        session_cookie: Cookie carrying the session token.
    """

    def __init__(
        self,
        api_key_header: str = "x-api-key",
        session_cookie: str = "session_token",
        pool: Pool | None = None,
    ) -> None:
        self.api_key_header = api_key_header
        self.session_cookie = session_cookie
        self._pool = pool

    @property
    def provider_name(self) -> str:
        return "database"

    @property
    def pool(self) -> Pool:
        if self._pool is not None:
            return self._pool
        return get_database_pool()

    async def get_session(
        self,
        headers: Mapping[str, str],
        cookies: Mapping[str, str],
    ) -> AuthSession | None:
        api_key = Headers(headers=dict(headers)).get(self.api_key_header)
        if api_key:
            row = await self._fetch_user(_API_KEY_QUERY, hash_api_key(api_key))
            if row is None:
                logger.debug("API key did not match an active key")
                return None
            return AuthSession(user=self._row_to_user(row), source="api_key")

        token = cookies.get(self.session_cookie)
        if token:
            # Signed cookies carry "<token>.<signature>"
            row = await self._fetch_user(_SESSION_QUERY, token.split(".", 1)[0])
            if row is None:
                logger.debug("Session cookie did not match an active session")
                return None
            return AuthSession(user=self._row_to_user(row), source="cookie")

        return None

    async def _fetch_user(self, query: str, value: str) -> Record | None:
        try:
            async with self.pool.acquire() as conn:
                return await conn.fetchrow(query, value)
        except (asyncpg.PostgresError, OSError) as e:
            msg = f"Session lookup failed: {e}"
            raise SessionLookupError(msg) from e

    @staticmethod
    def _row_to_user(row: Record) -> SessionUser:
        return SessionUser(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            is_server_admin=bool(row["is_server_admin"]),
        )

    async def initialize(self) -> None:
        logger.info(
            "DatabaseSessionProvider initialized",
            api_key_header=self.api_key_header,
            session_cookie=self.session_cookie,
        )

    async def shutdown(self) -> None:
        logger.debug("DatabaseSessionProvider shutdown")
