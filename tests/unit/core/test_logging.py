"""Unit tests for logging configuration.

Tests cover:
- Context binding helpers
- JSON sink formatting
- setup_logging sink selection
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING
from unittest.mock import MagicMock, patch

import orjson
import pytest

from recipebox.observability import logging as logging_module
from recipebox.observability.logging import (
    bind_context,
    clear_context,
    get_context,
    setup_logging,
)


if TYPE_CHECKING:
    from collections.abc import Generator


pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def reset_context() -> Generator[None]:
    clear_context()
    yield
    clear_context()


class TestContext:
    """Tests for request-scoped logging context."""

    def test_bind_and_get(self) -> None:
        """Should accumulate bound fields."""
        bind_context(request_id="abc")
        bind_context(path="/api/recipes")
        assert get_context() == {"request_id": "abc", "path": "/api/recipes"}

    def test_clear(self) -> None:
        """Should drop all fields."""
        bind_context(request_id="abc")
        clear_context()
        assert get_context() == {}

    def test_get_returns_copy(self) -> None:
        """Should not expose the stored dict."""
        bind_context(request_id="abc")
        get_context()["request_id"] = "changed"
        assert get_context()["request_id"] == "abc"


class TestJsonSinkFormat:
    """Tests for the JSON line formatter."""

    def _record(self) -> dict:
        level = MagicMock()
        level.name = "INFO"
        return {
            "time": datetime(2024, 1, 1, tzinfo=UTC),
            "level": level,
            "message": "Listing recipes",
            "name": "recipebox.api",
            "function": "get_recipes",
            "line": 42,
            "extra": {"name": "recipebox.api.endpoints.recipes", "limit": 50},
            "exception": None,
        }

    def test_includes_extra_and_context(self) -> None:
        """Should merge bound context and extras into one object."""
        bind_context(request_id="req-1")

        line = logging_module._json_sink_format(self._record())
        payload = orjson.loads(
            line.removesuffix("\n{exception}").replace("{{", "{").replace("}}", "}")
        )

        assert payload["message"] == "Listing recipes"
        assert payload["logger"] == "recipebox.api.endpoints.recipes"
        assert payload["limit"] == 50
        assert payload["request_id"] == "req-1"

    def test_escapes_braces(self) -> None:
        """Should escape braces so loguru does not treat them as fields."""
        line = logging_module._json_sink_format(self._record())
        assert line.startswith("{{")


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_json_sink_in_production(self) -> None:
        """Should use the JSON formatter outside development."""
        with patch.object(logging_module, "logger") as mock_logger:
            setup_logging("INFO", "json", is_development=False)

        mock_logger.remove.assert_called_once()
        _, kwargs = mock_logger.add.call_args
        assert kwargs["format"] is logging_module._json_sink_format
        assert kwargs["level"] == "INFO"

    def test_text_sink_in_development(self) -> None:
        """Should use the text formatter in development."""
        with patch.object(logging_module, "logger") as mock_logger:
            setup_logging("debug", "json", is_development=True)

        _, kwargs = mock_logger.add.call_args
        assert kwargs["format"] is logging_module._text_sink_format
        assert kwargs["level"] == "DEBUG"
