"""Authentication and authorization.

- providers: resolve request credentials to an AuthSession
- permissions: evaluate the recipe permission policy
- access: choose how a single recipe is authorized based on ownership
"""

from recipebox.auth.access import (
    OwnedRecipeAccess,
    RecipeAccessStrategy,
    UnownedRecipeAccess,
    select_access_strategy,
)
from recipebox.auth.dependencies import get_permission_evaluator, get_session_service
from recipebox.auth.permissions import (
    PermissionEvaluator,
    PolicyPermissionEvaluator,
    can_access_resource,
)
from recipebox.auth.providers import AuthSession, SessionService, SessionUser


__all__ = [
    "AuthSession",
    "OwnedRecipeAccess",
    "PermissionEvaluator",
    "PolicyPermissionEvaluator",
    "RecipeAccessStrategy",
    "SessionService",
    "SessionUser",
    "UnownedRecipeAccess",
    "can_access_resource",
    "get_permission_evaluator",
    "get_session_service",
    "select_access_strategy",
]
