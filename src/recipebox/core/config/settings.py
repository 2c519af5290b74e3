"""Application configuration using Pydantic Settings with YAML support.

Configuration is organised by domain:
- Server, API and auth settings for the HTTP surface
- Database connection settings for the asyncpg pool
- Recipe permission policy and pagination limits
- Defaults for the admin-managed video and AI configuration
"""

from __future__ import annotations

from enum import StrEnum
from functools import lru_cache
from typing import TYPE_CHECKING

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

from .yaml_source import MultiYamlConfigSettingsSource


if TYPE_CHECKING:
    from pydantic_settings import PydanticBaseSettingsSource


class AuthMode(StrEnum):
    """Session resolution mode.

    - DATABASE: Resolve API keys and session cookies against the database
    - HEADER: Trust X-User-ID / X-User-Admin headers (development only)
    - DISABLED: Every request runs as a fixed anonymous user (testing only)
    """

    DATABASE = "database"
    HEADER = "header"
    DISABLED = "disabled"


class AccessLevel(StrEnum):
    """Who may perform an action on a recipe owned by someone else."""

    EVERYONE = "everyone"
    HOUSEHOLD = "household"
    OWNER = "owner"


class TranscriptionProvider(StrEnum):
    """Speech-to-text provider for video imports."""

    OPENAI = "openai"
    GENERIC_OPENAI = "generic-openai"
    GROQ = "groq"
    DISABLED = "disabled"


# =============================================================================
# Nested Configuration Models (from YAML)
# =============================================================================


class AppSettings(BaseModel):
    """Application identity settings."""

    name: str = "Recipe Box API"
    version: str = "0.1.0"
    debug: bool = False


class ServerSettings(BaseModel):
    """Server configuration settings."""

    host: str = "127.0.0.1"
    port: int = 8000


class ApiSettings(BaseModel):
    """API configuration settings."""

    prefix: str = "/api"
    cors_origins: list[str] = []


class AuthHeaderSettings(BaseModel):
    """Header names used by the trusted-header session provider."""

    user_id: str = "X-User-ID"
    is_admin: str = "X-User-Admin"


class AuthSettings(BaseModel):
    """Authentication configuration settings."""

    mode: str = "database"
    api_key_header: str = "x-api-key"
    session_cookie: str = "session_token"
    headers: AuthHeaderSettings = AuthHeaderSettings()


class DatabaseSettings(BaseModel):
    """PostgreSQL database configuration settings."""

    host: str = "localhost"
    port: int = 5432
    name: str = "recipebox"
    db_schema: str = "public"
    user: str | None = None
    min_pool_size: int = 2
    max_pool_size: int = 10
    command_timeout: float = 30.0
    ssl: bool = False


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    level: str = "INFO"
    format: str = "json"


class RecipePermissionPolicy(BaseModel):
    """Access level required for each recipe action."""

    view: AccessLevel = AccessLevel.EVERYONE
    edit: AccessLevel = AccessLevel.HOUSEHOLD
    delete: AccessLevel = AccessLevel.HOUSEHOLD


class PermissionSettings(BaseModel):
    """Authorization policy settings."""

    recipes: RecipePermissionPolicy = RecipePermissionPolicy()


class PaginationSettings(BaseModel):
    """Recipe list pagination limits."""

    default_limit: int = 50
    max_limit: int = 100


class VideoSettings(BaseModel):
    """Defaults for video import, used when no admin override is stored."""

    enabled: bool = False
    max_length_seconds: int = 120
    transcription_provider: TranscriptionProvider = TranscriptionProvider.DISABLED
    transcription_endpoint: str | None = None
    transcription_model: str = "whisper-1"
    transcription_timeout: float = 120.0


class AISettings(BaseModel):
    """Defaults for the AI provider, used when no admin override is stored."""

    enabled: bool = False
    provider: str = "openai"
    endpoint: str | None = None
    model: str = "gpt-4o-mini"


# =============================================================================
# Main Settings Class
# =============================================================================


class Settings(BaseSettings):
    """Application settings with YAML + environment variable support.

    Priority (highest to lowest): init arguments, environment variables,
    .env file, environment-specific YAML, base YAML, code defaults.

    Nested values are overridden with '__', e.g. DATABASE__HOST=db.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=False,
        env_nested_delimiter="__",
    )

    APP_ENV: str = "development"

    app: AppSettings = AppSettings()
    server: ServerSettings = ServerSettings()
    api: ApiSettings = ApiSettings()
    auth: AuthSettings = AuthSettings()
    database: DatabaseSettings = DatabaseSettings()
    logging: LoggingSettings = LoggingSettings()
    permissions: PermissionSettings = PermissionSettings()
    pagination: PaginationSettings = PaginationSettings()
    video: VideoSettings = VideoSettings()
    ai: AISettings = AISettings()

    # Secrets (from .env only - never in YAML)
    DATABASE_PASSWORD: str = ""
    AI_API_KEY: str = ""
    TRANSCRIPTION_API_KEY: str = ""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the YAML source below .env and above Docker secrets."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            MultiYamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    @property
    def auth_mode_enum(self) -> AuthMode:
        """Get auth mode as enum with validation."""
        try:
            return AuthMode(self.auth.mode.lower())
        except ValueError:
            msg = (
                f"Invalid auth mode: {self.auth.mode}. "
                f"Must be one of: {', '.join(m.value for m in AuthMode)}"
            )
            raise ValueError(msg) from None

    @property
    def database_url(self) -> str:
        """PostgreSQL connection URL without the password."""
        user_part = f"{self.database.user}@" if self.database.user else ""
        return (
            f"postgresql://{user_part}{self.database.host}:"
            f"{self.database.port}/{self.database.name}"
        )

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.APP_ENV == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.APP_ENV == "production"

    @property
    def is_testing(self) -> bool:
        """Check if running in test environment."""
        return self.APP_ENV == "test"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
