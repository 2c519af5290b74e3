"""Unit tests for recipe permission evaluation.

Tests cover:
- Admin and owner overrides
- everyone / household / owner access levels
- Per-action policy lookup
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from recipebox.auth.permissions import (
    PermissionEvaluator,
    PolicyPermissionEvaluator,
    can_access_resource,
)
from recipebox.core.config import AccessLevel, RecipePermissionPolicy, Settings
from recipebox.schemas.enums import PermissionAction


pytestmark = pytest.mark.unit

HOUSEHOLD = ["alice", "bob"]


def _policy(level: AccessLevel) -> RecipePermissionPolicy:
    return RecipePermissionPolicy(view=level, edit=level, delete=level)


class TestCanAccessResource:
    """Tests for can_access_resource."""

    @pytest.mark.parametrize("level", list(AccessLevel))
    def test_admin_always_allowed(self, level: AccessLevel) -> None:
        """Should allow server admins at every level."""
        assert can_access_resource(
            _policy(level), "view", "root", "alice", None, is_admin=True
        )

    @pytest.mark.parametrize("level", list(AccessLevel))
    def test_owner_always_allowed(self, level: AccessLevel) -> None:
        """Should allow owners at every level."""
        assert can_access_resource(
            _policy(level), "delete", "alice", "alice", None, is_admin=False
        )

    def test_everyone(self) -> None:
        """Should allow any user."""
        assert can_access_resource(
            _policy(AccessLevel.EVERYONE), "view", "carol", "alice", None, False
        )

    def test_household_member(self) -> None:
        """Should allow when the owner is in the actor's household."""
        assert can_access_resource(
            _policy(AccessLevel.HOUSEHOLD), "view", "bob", "alice", HOUSEHOLD, False
        )

    def test_household_outsider(self) -> None:
        """Should deny when the owner is outside the actor's household."""
        assert not can_access_resource(
            _policy(AccessLevel.HOUSEHOLD), "view", "carol", "dave", HOUSEHOLD, False
        )

    def test_household_without_household(self) -> None:
        """Should deny when the actor has no household."""
        assert not can_access_resource(
            _policy(AccessLevel.HOUSEHOLD), "view", "carol", "alice", None, False
        )

    def test_owner_level_denies_household(self) -> None:
        """Should deny household members at owner level."""
        assert not can_access_resource(
            _policy(AccessLevel.OWNER), "edit", "bob", "alice", HOUSEHOLD, False
        )

    def test_uses_level_of_requested_action(self) -> None:
        """Should look up the level of the specific action."""
        policy = RecipePermissionPolicy(
            view=AccessLevel.EVERYONE,
            edit=AccessLevel.OWNER,
        )
        assert can_access_resource(policy, PermissionAction.VIEW, "c", "a", None, False)
        assert not can_access_resource(
            policy, PermissionAction.EDIT, "c", "a", None, False
        )

    def test_unknown_action(self) -> None:
        """Should reject actions outside the policy."""
        with pytest.raises(ValueError):
            can_access_resource(
                _policy(AccessLevel.EVERYONE), "share", "a", "b", None, False
            )


class TestPolicyPermissionEvaluator:
    """Tests for PolicyPermissionEvaluator."""

    def test_satisfies_protocol(self) -> None:
        """Should be usable wherever a PermissionEvaluator is expected."""
        assert isinstance(PolicyPermissionEvaluator(), PermissionEvaluator)

    @pytest.mark.asyncio
    async def test_uses_explicit_policy(self) -> None:
        """Should evaluate against the given policy."""
        evaluator = PolicyPermissionEvaluator(_policy(AccessLevel.OWNER))
        allowed = await evaluator.can_access_resource(
            "view", "b", "a", ["a", "b"], False
        )
        assert allowed is False

    @pytest.mark.asyncio
    async def test_defaults_to_configured_policy(self, test_settings: Settings) -> None:
        """Should read the policy from settings when none is given."""
        evaluator = PolicyPermissionEvaluator()
        with patch(
            "recipebox.auth.permissions.get_settings",
            return_value=test_settings,
        ):
            allowed = await evaluator.can_access_resource(
                "view", "stranger", "alice", None, False
            )
        assert allowed is True
