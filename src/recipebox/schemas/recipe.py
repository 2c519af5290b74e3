"""Recipe read models and list responses."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from recipebox.schemas.base import APIResponse, RecordModel


class RecipeTag(RecordModel):
    """A tag attached to a recipe."""

    name: str


class RecipeIngredient(RecordModel):
    """One ingredient line of a recipe."""

    id: str
    ingredient_name: str
    amount: float | None = None
    unit: str | None = None
    system_used: str = "metric"
    order: int = 0


class RecipeStep(RecordModel):
    """One preparation step of a recipe."""

    step: str
    system_used: str = "metric"
    order: int = 0


class _RecipeFields(RecordModel):
    id: str
    name: str
    description: str | None = None
    image: str | None = None
    url: str | None = None
    servings: int | None = None
    prep_minutes: int | None = None
    cook_minutes: int | None = None
    total_minutes: int | None = None
    user_id: str | None = Field(
        default=None,
        description="Owning user; null for orphaned recipes",
    )
    created_at: datetime
    updated_at: datetime


class RecipeDashboard(_RecipeFields):
    """Recipe summary as shown in lists."""

    tags: list[str] = Field(default_factory=list)


class FullRecipe(_RecipeFields):
    """Recipe with ingredients, steps and tags."""

    ingredients: list[RecipeIngredient] = Field(default_factory=list)
    steps: list[RecipeStep] = Field(default_factory=list)
    tags: list[RecipeTag] = Field(default_factory=list)


class RecipeListResult(RecordModel):
    """One page of recipes plus the total matching count."""

    recipes: list[RecipeDashboard]
    total: int


class RecipeListResponse(APIResponse):
    """Body of GET /api/recipes in list mode."""

    recipes: list[RecipeDashboard]
    total: int
    next_cursor: int | None = None
