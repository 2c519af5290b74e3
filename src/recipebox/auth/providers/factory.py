"""Session provider factory and process-wide provider state."""

from __future__ import annotations

from typing import TYPE_CHECKING

from recipebox.auth.providers.database import DatabaseSessionProvider
from recipebox.auth.providers.exceptions import ConfigurationError
from recipebox.auth.providers.header import HeaderSessionProvider
from recipebox.auth.providers.models import AuthSession, SessionUser
from recipebox.core.config import AuthMode, get_settings
from recipebox.observability.logging import get_logger


if TYPE_CHECKING:
    from collections.abc import Mapping

    from recipebox.auth.providers.protocol import SessionProvider
    from recipebox.core.config import Settings

logger = get_logger(__name__)

ANONYMOUS_USER_ID = "anonymous"

_state: dict[str, SessionProvider | None] = {"provider": None}


class DisabledSessionProvider:
    """Treats every request as the same anonymous, non-admin user.

    WARNING: bypasses authentication entirely. Refused in production.
    """

    @property
    def provider_name(self) -> str:
        return "disabled"

    async def get_session(
        self,
        headers: Mapping[str, str],  # noqa: ARG002
        cookies: Mapping[str, str],  # noqa: ARG002
    ) -> AuthSession | None:
        return AuthSession(
            user=SessionUser(id=ANONYMOUS_USER_ID, name="Anonymous"),
            source="disabled",
        )

    async def initialize(self) -> None:
        logger.warning(
            "DisabledSessionProvider initialized - authentication is disabled! "
            "Ensure this is intentional and not a production deployment."
        )

    async def shutdown(self) -> None:
        pass


def create_session_provider(settings: Settings | None = None) -> SessionProvider:
    """Create the session provider selected by auth.mode.

    Raises:
        ConfigurationError: If a development-only mode is used in production.
    """
    if settings is None:
        settings = get_settings()

    mode = settings.auth_mode_enum
    logger.info("Creating session provider", mode=mode.value)

    if mode == AuthMode.DATABASE:
        return DatabaseSessionProvider(
            api_key_header=settings.auth.api_key_header,
            session_cookie=settings.auth.session_cookie,
        )

    if settings.is_production:
        msg = f"auth.mode '{mode.value}' is not allowed in production"
        raise ConfigurationError(msg)

    if mode == AuthMode.HEADER:
        return HeaderSessionProvider(
            user_id_header=settings.auth.headers.user_id,
            is_admin_header=settings.auth.headers.is_admin,
        )

    return DisabledSessionProvider()


def get_session_provider() -> SessionProvider:
    """Return the process-wide session provider.

    Raises:
        RuntimeError: If no provider has been set.
    """
    provider = _state["provider"]
    if provider is None:
        msg = "Session provider not initialized. Call initialize_session_provider()."
        raise RuntimeError(msg)
    return provider


def set_session_provider(provider: SessionProvider | None) -> None:
    """Replace the process-wide session provider."""
    _state["provider"] = provider
    if provider is not None:
        logger.info("Session provider set", provider=provider.provider_name)


async def initialize_session_provider(
    settings: Settings | None = None,
) -> SessionProvider:
    """Create, initialize and install the session provider."""
    provider = create_session_provider(settings)
    await provider.initialize()
    set_session_provider(provider)
    return provider


async def shutdown_session_provider() -> None:
    """Shut down and clear the process-wide session provider."""
    provider = _state["provider"]
    if provider is not None:
        await provider.shutdown()
        _state["provider"] = None
        logger.info("Session provider shutdown complete")
