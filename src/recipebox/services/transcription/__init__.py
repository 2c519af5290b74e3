"""Audio transcription service module."""

from recipebox.services.transcription.exceptions import (
    AudioFileNotFoundError,
    InvalidTranscriptionResponseError,
    TranscriptionAuthenticationError,
    TranscriptionConfigurationError,
    TranscriptionError,
    TranscriptionFailedError,
    TranscriptionRateLimitError,
)
from recipebox.services.transcription.service import (
    normalize_transcription_response,
    resolve_base_url,
    transcribe_audio,
    transcribe_audio_from_server_config,
)


__all__ = [
    "AudioFileNotFoundError",
    "InvalidTranscriptionResponseError",
    "TranscriptionAuthenticationError",
    "TranscriptionConfigurationError",
    "TranscriptionError",
    "TranscriptionFailedError",
    "TranscriptionRateLimitError",
    "normalize_transcription_response",
    "resolve_base_url",
    "transcribe_audio",
    "transcribe_audio_from_server_config",
]
