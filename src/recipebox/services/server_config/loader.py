"""Load admin-managed configuration with settings as the fallback.

Stored documents override the YAML defaults field by field. Secrets come
from the stored document first and the environment second, and are only
returned when explicitly requested.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from recipebox.core.config import get_settings
from recipebox.database.repositories.server_config import (
    AI_CONFIG_KEY,
    VIDEO_CONFIG_KEY,
    ServerConfigRepository,
)
from recipebox.observability.logging import get_logger
from recipebox.schemas.server_config import AIConfig, VideoConfig


if TYPE_CHECKING:
    from recipebox.core.config import Settings

logger = get_logger(__name__)


def default_video_config(settings: Settings, *, include_secrets: bool) -> VideoConfig:
    """Build the video config from settings alone."""
    video = settings.video
    return VideoConfig(
        enabled=video.enabled,
        transcription_provider=video.transcription_provider,
        transcription_api_key=(
            (settings.TRANSCRIPTION_API_KEY or None) if include_secrets else None
        ),
        transcription_endpoint=video.transcription_endpoint,
        transcription_model=video.transcription_model,
        max_length_seconds=video.max_length_seconds,
    )


def default_ai_config(settings: Settings, *, include_secrets: bool) -> AIConfig:
    """Build the AI config from settings alone."""
    ai = settings.ai
    return AIConfig(
        enabled=ai.enabled,
        provider=ai.provider,
        endpoint=ai.endpoint,
        model=ai.model,
        api_key=(settings.AI_API_KEY or None) if include_secrets else None,
    )


def _merge(defaults: dict[str, Any], stored: dict[str, Any] | None) -> dict[str, Any]:
    if not stored:
        return defaults
    # Explicit nulls in the stored document do not erase defaults
    return {**defaults, **{k: v for k, v in stored.items() if v is not None}}


async def get_video_config(
    include_secrets: bool = False,
    *,
    repository: ServerConfigRepository | None = None,
    settings: Settings | None = None,
) -> VideoConfig:
    """Return the effective video configuration.

    Args:
        include_secrets: Include the transcription API key.
        repository: Config repository (defaults to the shared pool).
        settings: Settings providing defaults.
    """
    settings = settings or get_settings()
    repository = repository or ServerConfigRepository()

    defaults = default_video_config(settings, include_secrets=include_secrets)
    stored = await repository.get_config(
        VIDEO_CONFIG_KEY, include_secrets=include_secrets
    )
    if stored is None:
        logger.debug("No stored video config, using settings defaults")

    return VideoConfig.model_validate(_merge(defaults.model_dump(), stored))


async def get_ai_config(
    include_secrets: bool = False,
    *,
    repository: ServerConfigRepository | None = None,
    settings: Settings | None = None,
) -> AIConfig:
    """Return the effective AI provider configuration."""
    settings = settings or get_settings()
    repository = repository or ServerConfigRepository()

    defaults = default_ai_config(settings, include_secrets=include_secrets)
    stored = await repository.get_config(AI_CONFIG_KEY, include_secrets=include_secrets)
    if stored is None:
        logger.debug("No stored AI config, using settings defaults")

    return AIConfig.model_validate(_merge(defaults.model_dump(), stored))
