"""Trusted-header session provider.

Reads the user from X-User-ID and the admin flag from X-User-Admin.
Use only for local development or behind a gateway that has already
authenticated the caller: header values are trusted completely.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.datastructures import Headers

from recipebox.auth.providers.models import AuthSession, SessionUser
from recipebox.observability.logging import get_logger


if TYPE_CHECKING:
    from collections.abc import Mapping

logger = get_logger(__name__)

_TRUTHY = frozenset({"1", "true", "yes", "on"})


class HeaderSessionProvider:
    """Builds sessions from request headers."""

    def __init__(
        self,
        user_id_header: str = "X-User-ID",
        is_admin_header: str = "X-User-Admin",
    ) -> None:
        self.user_id_header = user_id_header
        self.is_admin_header = is_admin_header

    @property
    def provider_name(self) -> str:
        return "header"

    async def get_session(
        self,
        headers: Mapping[str, str],
        cookies: Mapping[str, str],  # noqa: ARG002
    ) -> AuthSession | None:
        normalized = Headers(headers=dict(headers))
        user_id = normalized.get(self.user_id_header, "").strip()
        if not user_id:
            return None

        is_admin = normalized.get(self.is_admin_header, "").strip().lower() in _TRUTHY
        logger.debug("Authenticated via headers", user_id=user_id, is_admin=is_admin)
        return AuthSession(
            user=SessionUser(id=user_id, is_server_admin=is_admin),
            source="header",
        )

    async def initialize(self) -> None:
        logger.warning(
            "HeaderSessionProvider is enabled - ensure this is only used in "
            "development/testing or behind a trusted gateway",
            user_id_header=self.user_id_header,
        )

    async def shutdown(self) -> None:
        logger.debug("HeaderSessionProvider shutdown")
