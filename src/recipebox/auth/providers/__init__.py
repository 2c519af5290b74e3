"""Session providers.

Providers resolve request credentials to an AuthSession. The factory
picks one based on auth.mode:

- DatabaseSessionProvider: API keys and session cookies (default)
- HeaderSessionProvider: trusted X-User-ID header (development only)
- DisabledSessionProvider: fixed anonymous user (testing only)

Usage:
    from recipebox.auth.providers import get_session_provider

    session = await get_session_provider().get_session(headers, cookies)
"""

from recipebox.auth.providers.database import DatabaseSessionProvider, hash_api_key
from recipebox.auth.providers.exceptions import (
    ConfigurationError,
    SessionLookupError,
    SessionProviderError,
)
from recipebox.auth.providers.factory import (
    DisabledSessionProvider,
    create_session_provider,
    get_session_provider,
    initialize_session_provider,
    set_session_provider,
    shutdown_session_provider,
)
from recipebox.auth.providers.header import HeaderSessionProvider
from recipebox.auth.providers.models import AuthSession, SessionUser
from recipebox.auth.providers.protocol import SessionProvider, SessionService


__all__ = [
    "AuthSession",
    "ConfigurationError",
    "DatabaseSessionProvider",
    "DisabledSessionProvider",
    "HeaderSessionProvider",
    "SessionLookupError",
    "SessionProvider",
    "SessionProviderError",
    "SessionService",
    "SessionUser",
    "create_session_provider",
    "get_session_provider",
    "hash_api_key",
    "initialize_session_provider",
    "set_session_provider",
    "shutdown_session_provider",
]
