"""Admin-managed configuration documents.

Stored as camelCase JSON in the server_config table. Secret fields are
None unless the document was loaded with secrets.
"""

from __future__ import annotations

from recipebox.core.config import TranscriptionProvider
from recipebox.schemas.base import RecordModel


class VideoConfig(RecordModel):
    """Video import and transcription settings."""

    enabled: bool = False
    transcription_provider: TranscriptionProvider = TranscriptionProvider.DISABLED
    transcription_api_key: str | None = None
    transcription_endpoint: str | None = None
    transcription_model: str | None = None
    max_length_seconds: int = 120


class AIConfig(RecordModel):
    """General AI provider settings."""

    enabled: bool = False
    provider: str = "openai"
    endpoint: str | None = None
    model: str = "gpt-4o-mini"
    api_key: str | None = None
