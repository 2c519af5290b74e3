"""Pydantic schemas for API responses and stored records."""

from recipebox.schemas.enums import FilterMode, PermissionAction, SortOrder
from recipebox.schemas.household import Household, HouseholdUser
from recipebox.schemas.recipe import (
    FullRecipe,
    RecipeDashboard,
    RecipeIngredient,
    RecipeListResponse,
    RecipeListResult,
    RecipeStep,
    RecipeTag,
)
from recipebox.schemas.server_config import AIConfig, VideoConfig


__all__ = [
    "AIConfig",
    "FilterMode",
    "FullRecipe",
    "Household",
    "HouseholdUser",
    "PermissionAction",
    "RecipeDashboard",
    "RecipeIngredient",
    "RecipeListResponse",
    "RecipeListResult",
    "RecipeStep",
    "RecipeTag",
    "SortOrder",
    "VideoConfig",
]
