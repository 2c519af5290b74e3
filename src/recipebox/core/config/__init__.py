"""Configuration module with YAML and environment variable support."""

from .settings import (
    AccessLevel,
    AuthMode,
    RecipePermissionPolicy,
    Settings,
    TranscriptionProvider,
    get_settings,
)


__all__ = [
    "AccessLevel",
    "AuthMode",
    "RecipePermissionPolicy",
    "Settings",
    "TranscriptionProvider",
    "get_settings",
]
