"""HTTP client for OpenAI-compatible audio transcription APIs.

OpenAI, Groq and self-hosted Whisper servers all expose
POST {base_url}/audio/transcriptions taking a multipart upload.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, Self

import httpx
import orjson

from recipebox.core.config import TranscriptionProvider
from recipebox.observability.logging import get_logger


if TYPE_CHECKING:
    from pathlib import Path
    from types import TracebackType

logger = get_logger(__name__)


DEFAULT_BASE_URLS: Final[dict[TranscriptionProvider, str]] = {
    TranscriptionProvider.OPENAI: "https://api.openai.com/v1",
    TranscriptionProvider.GENERIC_OPENAI: "https://api.openai.com/v1",
    TranscriptionProvider.GROQ: "https://api.groq.com/openai/v1",
}


class TranscriptionAPIError(Exception):
    """The transcription API failed or could not be reached.

    Attributes:
        status_code: HTTP status returned by the vendor, or None when no
            response was received.
        message: Vendor error message.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class TranscriptionClient:
    """Async client for the audio transcription endpoint.

    Use as an async context manager or call initialize() / shutdown().
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URLS[TranscriptionProvider.OPENAI],
        timeout: float = 120.0,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._http_client: httpx.AsyncClient | None = None

    @property
    def transcriptions_url(self) -> str:
        """Get the transcription endpoint URL."""
        return f"{self.base_url}/audio/transcriptions"

    async def initialize(self) -> None:
        """Create the HTTP client with auth headers."""
        if self._http_client is not None:
            return

        self._http_client = httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            headers={"Authorization": f"Bearer {self.api_key}"},
        )
        logger.debug("TranscriptionClient initialized", base_url=self.base_url)

    async def shutdown(self) -> None:
        """Close the HTTP client and release connections."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> Self:
        await self.initialize()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.shutdown()

    async def transcribe(
        self,
        audio_path: Path,
        *,
        model: str = "whisper-1",
        language: str = "en",
        response_format: str = "json",
    ) -> Any:
        """Upload an audio file and return the decoded response body.

        JSON bodies are returned decoded; anything else is returned as text,
        which some self-hosted transcribers send for plain transcripts.

        Raises:
            FileNotFoundError: If audio_path does not exist.
            TranscriptionAPIError: On HTTP error status or connection failure.
        """
        if self._http_client is None:
            await self.initialize()
        assert self._http_client is not None

        with audio_path.open("rb") as audio:
            try:
                response = await self._http_client.post(
                    self.transcriptions_url,
                    files={"file": (audio_path.name, audio)},
                    data={
                        "model": model,
                        "language": language,
                        "response_format": response_format,
                    },
                )
            except httpx.RequestError as e:
                logger.warning(
                    "Transcription request failed",
                    url=self.transcriptions_url,
                    error=str(e),
                )
                raise TranscriptionAPIError(str(e) or type(e).__name__) from e

        if response.is_error:
            raise TranscriptionAPIError(
                _error_message(response),
                status_code=response.status_code,
            )

        if "json" in response.headers.get("content-type", ""):
            try:
                return orjson.loads(response.content)
            except orjson.JSONDecodeError as e:
                msg = "Transcription service returned invalid JSON"
                raise TranscriptionAPIError(msg, response.status_code) from e
        return response.text


def _error_message(response: httpx.Response) -> str:
    """Extract the vendor error message, falling back to the status line."""
    try:
        body = orjson.loads(response.content)
    except orjson.JSONDecodeError:
        body = None

    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str) and error:
            return error

    text = response.text.strip()
    return text or f"{response.status_code} {response.reason_phrase}".strip()
