"""Session service protocols.

SessionService is the single capability the recipe endpoint depends on,
so tests can substitute any object with a matching get_session.
SessionProvider adds the lifecycle hooks used at application startup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from collections.abc import Mapping

    from recipebox.auth.providers.models import AuthSession


@runtime_checkable
class SessionService(Protocol):
    """Resolves request credentials to a session."""

    async def get_session(
        self,
        headers: Mapping[str, str],
        cookies: Mapping[str, str],
    ) -> AuthSession | None:
        """Return the session for these credentials, or None.

        Args:
            headers: Request headers; the API key header is read from here.
            cookies: Request cookies; the session cookie is read from here.

        Raises:
            SessionLookupError: If the session store is unreachable.
        """
        ...


@runtime_checkable
class SessionProvider(SessionService, Protocol):
    """A SessionService with a name and startup/shutdown hooks."""

    @property
    def provider_name(self) -> str:
        """Short name for logging, e.g. 'database' or 'header'."""
        ...

    async def initialize(self) -> None:
        """Validate configuration and acquire resources."""
        ...

    async def shutdown(self) -> None:
        """Release resources."""
        ...
