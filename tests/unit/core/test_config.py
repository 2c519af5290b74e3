"""Unit tests for settings and the layered YAML source.

Tests cover:
- Base and environment YAML merging
- Environment variable overrides
- Derived properties
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from recipebox.core.config import AccessLevel, AuthMode, Settings, TranscriptionProvider
from recipebox.core.config.yaml_source import (
    CONFIG_DIR_ENV,
    MultiYamlConfigSettingsSource,
    deep_merge,
)


if TYPE_CHECKING:
    from pathlib import Path


pytestmark = pytest.mark.unit


class TestDeepMerge:
    """Tests for deep_merge."""

    def test_merges_nested_dicts(self) -> None:
        """Should merge nested keys instead of replacing the section."""
        base = {"auth": {"mode": "database", "session_cookie": "session_token"}}
        override = {"auth": {"mode": "header"}}

        result = deep_merge(base, override)

        assert result == {"auth": {"mode": "header", "session_cookie": "session_token"}}

    def test_does_not_mutate_inputs(self) -> None:
        """Should leave base untouched."""
        base = {"a": {"b": 1}}
        deep_merge(base, {"a": {"b": 2}})
        assert base == {"a": {"b": 1}}

    def test_override_replaces_non_dict(self) -> None:
        """Should replace scalars and lists outright."""
        result = deep_merge({"origins": ["a"]}, {"origins": ["b"]})
        assert result == {"origins": ["b"]}


class TestYamlSource:
    """Tests for MultiYamlConfigSettingsSource."""

    def test_environment_overrides_base(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Should layer environments/{APP_ENV} over base."""
        (tmp_path / "base").mkdir()
        (tmp_path / "base" / "app.yaml").write_text(
            "app:\n  name: Base\n  debug: false\n"
        )
        env_dir = tmp_path / "environments" / "staging"
        env_dir.mkdir(parents=True)
        (env_dir / "overrides.yaml").write_text("app:\n  debug: true\n")

        monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path))
        monkeypatch.setenv("APP_ENV", "staging")

        data = MultiYamlConfigSettingsSource(Settings)()

        assert data["app"] == {"name": "Base", "debug": True}

    def test_missing_directory_yields_empty(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Should tolerate a config directory without YAML files."""
        monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path / "nowhere"))
        assert MultiYamlConfigSettingsSource(Settings)() == {}


class TestSettings:
    """Tests for Settings."""

    def test_loads_project_config(self, test_settings: Settings) -> None:
        """Should read the shipped base and test YAML."""
        assert test_settings.api.prefix == "/api"
        assert test_settings.auth.mode == "disabled"
        assert test_settings.pagination.default_limit == 50
        assert test_settings.pagination.max_limit == 100

    def test_default_recipe_policy(self, test_settings: Settings) -> None:
        """Should default to view=everyone, edit/delete=household."""
        policy = test_settings.permissions.recipes
        assert policy.view == AccessLevel.EVERYONE
        assert policy.edit == AccessLevel.HOUSEHOLD
        assert policy.delete == AccessLevel.HOUSEHOLD

    def test_video_disabled_by_default(self, test_settings: Settings) -> None:
        """Should ship with transcription switched off."""
        assert test_settings.video.enabled is False
        assert test_settings.video.transcription_provider == (
            TranscriptionProvider.DISABLED
        )
        assert test_settings.video.transcription_model == "whisper-1"

    def test_nested_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should apply SECTION__KEY environment overrides."""
        monkeypatch.setenv("DATABASE__HOST", "db.internal")
        monkeypatch.setenv("PAGINATION__MAX_LIMIT", "25")

        settings = Settings()

        assert settings.database.host == "db.internal"
        assert settings.pagination.max_limit == 25

    def test_secrets_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should read secrets from plain environment variables."""
        monkeypatch.setenv("AI_API_KEY", "sk-test")
        assert Settings().AI_API_KEY == "sk-test"

    def test_auth_mode_enum(self) -> None:
        """Should parse auth.mode case-insensitively."""
        settings = Settings(auth={"mode": "HEADER"})
        assert settings.auth_mode_enum == AuthMode.HEADER

    def test_auth_mode_enum_invalid(self) -> None:
        """Should reject unknown auth modes."""
        settings = Settings(auth={"mode": "jwt"})
        with pytest.raises(ValueError, match="Invalid auth mode"):
            _ = settings.auth_mode_enum

    def test_database_url_omits_password(self) -> None:
        """Should build a URL without the password."""
        settings = Settings(
            database={"host": "db", "port": 5433, "name": "recipes", "user": "app"},
            DATABASE_PASSWORD="secret",
        )
        assert settings.database_url == "postgresql://app@db:5433/recipes"
        assert "secret" not in settings.database_url

    @pytest.mark.parametrize(
        ("env", "development", "production", "testing"),
        [
            ("development", True, False, False),
            ("production", False, True, False),
            ("test", False, False, True),
        ],
    )
    def test_environment_flags(
        self,
        env: str,
        development: bool,
        production: bool,
        testing: bool,
    ) -> None:
        """Should derive environment flags from APP_ENV."""
        settings = Settings(APP_ENV=env)
        assert settings.is_development is development
        assert settings.is_production is production
        assert settings.is_testing is testing
