"""Audio transcription for video imports.

transcribe_audio() takes its configuration as arguments so it can be used
and tested without a database. transcribe_audio_from_server_config() loads
the admin-managed configuration first.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from recipebox.clients.transcription import (
    DEFAULT_BASE_URLS,
    TranscriptionAPIError,
    TranscriptionClient,
)
from recipebox.core.config import TranscriptionProvider, get_settings
from recipebox.observability.logging import get_logger
from recipebox.services.server_config import get_ai_config, get_video_config
from recipebox.services.transcription.exceptions import (
    AudioFileNotFoundError,
    InvalidTranscriptionResponseError,
    TranscriptionAuthenticationError,
    TranscriptionConfigurationError,
    TranscriptionFailedError,
    TranscriptionRateLimitError,
)


if TYPE_CHECKING:
    from collections.abc import Callable
    from os import PathLike

    from recipebox.schemas.server_config import AIConfig, VideoConfig

logger = get_logger(__name__)

DEFAULT_MODEL: Final[str] = "whisper-1"
TRANSCRIPTION_LANGUAGE: Final[str] = "en"

VIDEO_DISABLED_MESSAGE: Final[str] = (
    "Video parsing is not enabled. Enable it in admin settings."
)
PROVIDER_DISABLED_MESSAGE: Final[str] = (
    "Transcription is disabled. Configure a transcription provider in admin settings."
)
MISSING_API_KEY_MESSAGE: Final[str] = (
    "No API key configured for transcription. Set it in admin settings."
)


def normalize_transcription_response(response: Any) -> str:
    """Extract the transcript from a vendor response.

    Accepts a plain string, an object with a "text" field, or an object
    with a "segments" list whose texts are trimmed and joined by spaces.
    Arrays are treated like objects without either field.

    Raises:
        InvalidTranscriptionResponseError: If no transcript can be found or
            it is empty.
    """
    if response is None or (not response and not isinstance(response, (dict, list))):
        msg = "Invalid transcription response from transcription service"
        raise InvalidTranscriptionResponseError(msg)

    if isinstance(response, str):
        transcript = response.strip()
    elif isinstance(response, (dict, list)):
        fields = response if isinstance(response, dict) else {}
        text = fields.get("text")
        segments = fields.get("segments")
        if isinstance(text, str) and text:
            transcript = text.strip()
        elif isinstance(segments, list):
            parts = (
                segment.get("text", "").strip()
                for segment in segments
                if isinstance(segment, dict) and isinstance(segment.get("text"), str)
            )
            transcript = " ".join(part for part in parts if part).strip()
        else:
            msg = "Transcription response missing text content"
            raise InvalidTranscriptionResponseError(msg)
    else:
        msg = "Invalid transcription response format"
        raise InvalidTranscriptionResponseError(msg)

    if not transcript:
        msg = "Transcription returned empty text"
        raise InvalidTranscriptionResponseError(msg)
    return transcript


def resolve_base_url(
    provider: TranscriptionProvider,
    video_config: VideoConfig,
    ai_config: AIConfig | None,
) -> str:
    """Pick the API base URL.

    Only the generic-openai provider honours custom endpoints, preferring
    the transcription endpoint over the general AI endpoint.
    """
    if provider == TranscriptionProvider.GENERIC_OPENAI:
        endpoint = video_config.transcription_endpoint or (
            ai_config.endpoint if ai_config else None
        )
        if endpoint:
            return endpoint
    return DEFAULT_BASE_URLS[provider]


async def transcribe_audio(
    audio_path: str | PathLike[str],
    video_config: VideoConfig,
    ai_config: AIConfig | None,
    *,
    timeout: float = 120.0,
    client_factory: Callable[..., TranscriptionClient] = TranscriptionClient,
) -> str:
    """Transcribe an audio file to English text.

    Args:
        audio_path: Path to the extracted audio track.
        video_config: Video settings including the provider and its key.
        ai_config: General AI settings used as key and endpoint fallback.
        timeout: HTTP timeout for the vendor call in seconds.
        client_factory: Builds the transcription client.

    Returns:
        The trimmed transcript.

    Raises:
        TranscriptionConfigurationError: If video parsing or transcription
            is disabled, or no API key is configured.
        AudioFileNotFoundError: If audio_path does not exist.
        TranscriptionRateLimitError: If the vendor answered 429.
        TranscriptionAuthenticationError: If the vendor answered 401 or 403.
        TranscriptionFailedError: For any other failure.
    """
    if not video_config.enabled:
        raise TranscriptionConfigurationError(VIDEO_DISABLED_MESSAGE)

    provider = TranscriptionProvider(video_config.transcription_provider)
    if provider == TranscriptionProvider.DISABLED:
        raise TranscriptionConfigurationError(PROVIDER_DISABLED_MESSAGE)

    api_key = video_config.transcription_api_key or (
        ai_config.api_key if ai_config else None
    )
    if not api_key:
        raise TranscriptionConfigurationError(MISSING_API_KEY_MESSAGE)

    base_url = resolve_base_url(provider, video_config, ai_config)
    model = video_config.transcription_model or DEFAULT_MODEL

    try:
        async with client_factory(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
        ) as client:
            response = await client.transcribe(
                Path(audio_path),
                model=model,
                language=TRANSCRIPTION_LANGUAGE,
                response_format="json",
            )
        logger.debug("Transcription response", provider=provider.value, model=model)
        return normalize_transcription_response(response)

    except FileNotFoundError as e:
        logger.opt(exception=e).error(
            "Transcription failed", audio_path=str(audio_path)
        )
        raise AudioFileNotFoundError from e

    except TranscriptionAPIError as e:
        logger.opt(exception=e).error(
            "Transcription failed",
            provider=provider.value,
            status_code=e.status_code,
        )
        if e.status_code == 429:
            raise TranscriptionRateLimitError from e
        if e.status_code in (401, 403):
            raise TranscriptionAuthenticationError from e
        raise TranscriptionFailedError(e.message or "Unknown error") from e

    except InvalidTranscriptionResponseError as e:
        logger.opt(exception=e).error("Transcription failed", provider=provider.value)
        raise TranscriptionFailedError(str(e)) from e

    except Exception as e:
        logger.opt(exception=e).error(
            "Transcription failed",
            provider=provider.value,
            audio_path=str(audio_path),
        )
        raise TranscriptionFailedError(str(e) or "Unknown error") from e


async def transcribe_audio_from_server_config(
    audio_path: str | PathLike[str],
) -> str:
    """Load video and AI config (with secrets) concurrently, then transcribe."""
    video_config, ai_config = await asyncio.gather(
        get_video_config(include_secrets=True),
        get_ai_config(include_secrets=True),
    )
    return await transcribe_audio(
        audio_path,
        video_config,
        ai_config,
        timeout=get_settings().video.transcription_timeout,
    )
