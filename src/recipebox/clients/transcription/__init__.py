"""OpenAI-compatible audio transcription API client."""

from recipebox.clients.transcription.client import (
    DEFAULT_BASE_URLS,
    TranscriptionAPIError,
    TranscriptionClient,
)


__all__ = [
    "DEFAULT_BASE_URLS",
    "TranscriptionAPIError",
    "TranscriptionClient",
]
