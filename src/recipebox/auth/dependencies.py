"""FastAPI dependencies for authentication and authorization.

Endpoints depend on the session service and permission evaluator through
these functions so tests can swap them with app.dependency_overrides.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from recipebox.auth.permissions import PermissionEvaluator, PolicyPermissionEvaluator
from recipebox.auth.providers import get_session_provider


if TYPE_CHECKING:
    from recipebox.auth.providers import SessionService


def get_session_service() -> SessionService:
    """Return the configured session provider.

    Raises:
        RuntimeError: If the provider was not initialized at startup.
    """
    return get_session_provider()


def get_permission_evaluator() -> PermissionEvaluator:
    """Return an evaluator for the configured recipe permission policy."""
    return PolicyPermissionEvaluator()
