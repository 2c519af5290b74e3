"""Database repositories."""

from recipebox.database.repositories.households import HouseholdRepository
from recipebox.database.repositories.recipes import (
    RecipeListContext,
    RecipeRepository,
)
from recipebox.database.repositories.server_config import ServerConfigRepository


__all__ = [
    "HouseholdRepository",
    "RecipeListContext",
    "RecipeRepository",
    "ServerConfigRepository",
]
