"""Admin-managed server configuration."""

from recipebox.services.server_config.loader import (
    default_ai_config,
    default_video_config,
    get_ai_config,
    get_video_config,
)


__all__ = [
    "default_ai_config",
    "default_video_config",
    "get_ai_config",
    "get_video_config",
]
