"""Shared test fixtures and configuration for the Recipe Box API tests."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest


# Load config/environments/test before any settings are created
os.environ.setdefault("APP_ENV", "test")

from recipebox.core.config import Settings, get_settings  # noqa: E402


if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None]:
    """Drop cached settings so environment patches take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    """Settings for the test environment."""
    return Settings(APP_ENV="test")
