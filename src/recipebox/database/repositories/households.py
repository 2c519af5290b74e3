"""Household data repository.

Tables used:
- households(id, name)
- household_users(household_id, user_id)
- users(id, name)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from recipebox.database.connection import get_database_pool
from recipebox.observability.logging import get_logger
from recipebox.schemas.household import Household, HouseholdUser


if TYPE_CHECKING:
    from asyncpg import Pool

logger = get_logger(__name__)


class HouseholdRepository:
    """Resolves which household a user belongs to."""

    def __init__(self, pool: Pool | None = None) -> None:
        self._pool = pool

    @property
    def pool(self) -> Pool:
        """Get the database connection pool."""
        if self._pool is not None:
            return self._pool
        return get_database_pool()

    async def get_household_for_user(self, user_id: str) -> Household | None:
        """Return the user's household with all of its members.

        A user belongs to at most one household.
        """
        async with self.pool.acquire() as conn:
            household = await conn.fetchrow(
                """
                SELECT h.id::text AS id, h.name
                FROM households h
                JOIN household_users hu ON hu.household_id = h.id
                WHERE hu.user_id::text = $1
                LIMIT 1
                """,
                user_id,
            )
            if household is None:
                return None

            members = await conn.fetch(
                """
                SELECT u.id::text AS id, u.name
                FROM household_users hu
                JOIN users u ON u.id = hu.user_id
                WHERE hu.household_id::text = $1
                ORDER BY u.name
                """,
                household["id"],
            )

        logger.debug(
            "Resolved household",
            user_id=user_id,
            household_id=household["id"],
            member_count=len(members),
        )
        return Household(
            id=household["id"],
            name=household["name"],
            users=[HouseholdUser(id=m["id"], name=m["name"]) for m in members],
        )
