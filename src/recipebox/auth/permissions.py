"""Recipe permission policy evaluation.

Each recipe action (view, edit, delete) has an access level:

- everyone: any authenticated user
- household: the owner and members of the owner's household
- owner: only the owner

Server admins and owners are always allowed.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from recipebox.core.config import AccessLevel, RecipePermissionPolicy, get_settings
from recipebox.schemas.enums import PermissionAction


@runtime_checkable
class PermissionEvaluator(Protocol):
    """Decides whether an actor may perform an action on an owned resource."""

    async def can_access_resource(
        self,
        action: PermissionAction | str,
        actor_id: str,
        owner_id: str,
        household_user_ids: list[str] | None,
        is_admin: bool,
    ) -> bool:
        """Return True if the action is allowed."""
        ...


def can_access_resource(
    policy: RecipePermissionPolicy,
    action: PermissionAction | str,
    actor_id: str,
    owner_id: str,
    household_user_ids: list[str] | None,
    is_admin: bool,
) -> bool:
    """Evaluate the policy for one action.

    Args:
        policy: Access level per action.
        action: view, edit or delete.
        actor_id: User attempting the action.
        owner_id: User owning the resource.
        household_user_ids: Members of the actor's household, or None.
        is_admin: Whether the actor is a server admin.

    Raises:
        ValueError: If action is not a known PermissionAction.
    """
    level = AccessLevel(getattr(policy, PermissionAction(action).value))

    if is_admin or actor_id == owner_id:
        return True
    if level == AccessLevel.EVERYONE:
        return True
    if level == AccessLevel.HOUSEHOLD:
        return owner_id in (household_user_ids or ())
    return False


class PolicyPermissionEvaluator:
    """PermissionEvaluator backed by the configured recipe policy."""

    def __init__(self, policy: RecipePermissionPolicy | None = None) -> None:
        self._policy = policy

    @property
    def policy(self) -> RecipePermissionPolicy:
        if self._policy is not None:
            return self._policy
        return get_settings().permissions.recipes

    async def can_access_resource(
        self,
        action: PermissionAction | str,
        actor_id: str,
        owner_id: str,
        household_user_ids: list[str] | None,
        is_admin: bool,
    ) -> bool:
        return can_access_resource(
            self.policy, action, actor_id, owner_id, household_user_ids, is_admin
        )
