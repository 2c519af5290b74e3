"""Session provider exceptions.

A missing or invalid credential is not an exception: providers return None
and the endpoint answers 401. These exceptions signal that the provider
itself could not do its job.
"""

from __future__ import annotations


class SessionProviderError(Exception):
    """Base exception for session provider errors."""


class SessionLookupError(SessionProviderError):
    """Raised when the session store cannot be queried."""


class ConfigurationError(SessionProviderError):
    """Raised when the session provider is misconfigured."""
