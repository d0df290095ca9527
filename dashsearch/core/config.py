"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Limits and folder depth are validated at load time.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings have defaults. validate_limits rejects non-positive
    search limits or folder depth, and a default limit above the maximum.
    """

    # App
    app_name: str = "dashsearch"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database (storage collaborator). Empty URL means no SQL engine.
    database_url: str = ""
    database_echo: bool = False
    db_pool_size: int | None = None
    db_max_overflow: int | None = None

    # Feature flag consumed as a plain boolean (evaluated elsewhere)
    nested_folders_enabled: bool = False
    # Set False for dialects without WITH RECURSIVE; nested folders then
    # fall back to a bounded self-join per ancestor level.
    database_supports_recursive_queries: bool = True
    max_nested_folder_depth: int = 8

    # Search
    search_default_limit: int = 1000
    search_max_limit: int = 5000
    app_sub_url: str = ""

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_limits(self) -> "Settings":
        """Validate search limits and nested folder depth."""
        if self.search_default_limit < 1 or self.search_max_limit < 1:
            raise ValueError(
                "SEARCH_DEFAULT_LIMIT and SEARCH_MAX_LIMIT must be positive integers."
            )
        if self.search_default_limit > self.search_max_limit:
            raise ValueError(
                f"SEARCH_DEFAULT_LIMIT ({self.search_default_limit}) must not exceed "
                f"SEARCH_MAX_LIMIT ({self.search_max_limit})."
            )
        if self.max_nested_folder_depth < 1:
            raise ValueError("MAX_NESTED_FOLDER_DEPTH must be at least 1.")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
