"""Recipe access strategies selected by ownership.

Owned recipes are checked against the permission evaluator. Orphaned
recipes (no owner) are viewable by any authenticated caller and never
reach the evaluator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from recipebox.schemas.enums import PermissionAction


if TYPE_CHECKING:
    from recipebox.auth.permissions import PermissionEvaluator
    from recipebox.database.repositories.recipes import RecipeListContext


class RecipeAccessStrategy(Protocol):
    """Decides whether a viewer may see a recipe."""

    async def can_view(self, viewer: RecipeListContext) -> bool: ...


class OwnedRecipeAccess:
    """Recipes with an owner: defer to the permission evaluator."""

    def __init__(self, owner_id: str, evaluator: PermissionEvaluator) -> None:
        self.owner_id = owner_id
        self.evaluator = evaluator

    async def can_view(self, viewer: RecipeListContext) -> bool:
        return await self.evaluator.can_access_resource(
            PermissionAction.VIEW,
            viewer.user_id,
            self.owner_id,
            viewer.household_user_ids,
            viewer.is_server_admin,
        )


class UnownedRecipeAccess:
    """Orphaned recipes: visible to every authenticated caller."""

    async def can_view(self, viewer: RecipeListContext) -> bool:  # noqa: ARG002
        return True


def select_access_strategy(
    owner_id: str | None,
    evaluator: PermissionEvaluator,
) -> RecipeAccessStrategy:
    """Pick the strategy for a recipe's ownership state."""
    if owner_id is None:
        return UnownedRecipeAccess()
    return OwnedRecipeAccess(owner_id, evaluator)
