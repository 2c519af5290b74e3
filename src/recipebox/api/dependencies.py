"""FastAPI dependencies for repository access.

Repositories are cheap wrappers around the shared asyncpg pool, so a new
instance is handed to each request. Tests replace these through
app.dependency_overrides.
"""

from __future__ import annotations

from recipebox.database.repositories import HouseholdRepository, RecipeRepository


async def get_recipe_repository() -> RecipeRepository:
    """Get a recipe repository bound to the shared pool."""
    return RecipeRepository()


async def get_household_repository() -> HouseholdRepository:
    """Get a household repository bound to the shared pool."""
    return HouseholdRepository()
