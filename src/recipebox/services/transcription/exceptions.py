"""Transcription exceptions.

Messages are shown to administrators as-is, so each one says what to fix.
"""

from __future__ import annotations


class TranscriptionError(Exception):
    """Base exception for transcription failures."""


class TranscriptionConfigurationError(TranscriptionError):
    """Transcription is disabled or missing required settings."""


class AudioFileNotFoundError(TranscriptionError):
    def __init__(self, message: str = "Audio file not found") -> None:
        super().__init__(message)


class TranscriptionRateLimitError(TranscriptionError):
    def __init__(
        self,
        message: str = (
            "Rate limit exceeded on transcription service. Please try again later."
        ),
    ) -> None:
        super().__init__(message)


class TranscriptionAuthenticationError(TranscriptionError):
    def __init__(
        self,
        message: str = (
            "Invalid API key for transcription service. "
            "Check your API key in admin settings."
        ),
    ) -> None:
        super().__init__(message)


class InvalidTranscriptionResponseError(TranscriptionError):
    """The vendor answered with a body that holds no transcript."""


class TranscriptionFailedError(TranscriptionError):
    """Any other vendor failure, wrapping the vendor message."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Failed to transcribe audio: {detail}")
