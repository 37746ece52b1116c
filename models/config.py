"""Application configuration using Pydantic v2.

Centralized settings for the AnimeApi provider:
- Mirror endpoints and request options
- Preferred stream language/quality
- Logging
- Plugin loading
- OS-specific data paths

Configuration can be overridden via environment variables:
    ANIME_API__PROVIDER__API_URLS='["https://mirror.example/"]'
    ANIME_API__PROVIDER__TIMEOUT=30
    ANIME_API__LOGGING__DEBUG=true
"""

import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LEGACY_USER_AGENT = "Mozilla/5.0 (Linux) AppleWebkit/534.30 (KHTML, like Gecko) PT/3.8.0"


def get_data_path() -> Path:
    """Get OS-specific data directory for the provider.

    Returns:
        Path: ~/.local/state/animeapi (Linux/macOS) or %LOCALAPPDATA%\\animeapi (Windows)
    """
    if os.name == "nt":
        return Path(os.environ.get("LOCALAPPDATA", Path.home())) / "animeapi"
    return Path.home() / ".local" / "state" / "animeapi"


class ProviderSettings(BaseModel):
    """AnimeApi provider configuration."""

    api_urls: list[str] = Field(
        default_factory=lambda: [
            "https://anime.api-fetch.sh/",
            "cloudflare+https://anime.api-fetch.sh/",
        ],
        min_length=1,
        description="Mirror base URLs, tried in order",
    )
    language: str = Field("en", description="Preferred stream language")
    quality: str = Field("720p", description="Preferred stream quality")
    translate: str = Field("en", description="Metadata translation language")
    timeout: float = Field(
        15.0,
        gt=0,
        le=120,
        description="Connect/read timeout per mirror request (seconds)",
    )
    user_agent: str = Field(
        LEGACY_USER_AGENT,
        description="User-Agent sent when routing through the proxy edge",
    )
    edge_domain: str = Field(
        "com",
        min_length=1,
        description="TLD appended to the edge name of a proxy-scheme URL",
    )

    @field_validator("api_urls", mode="before")
    @classmethod
    def split_api_urls(cls, v):
        """Accept a comma-separated string as well as a list."""
        if isinstance(v, str):
            return [url.strip() for url in v.split(",") if url.strip()]
        return v


class LoggingSettings(BaseModel):
    """Logging configuration (loguru)."""

    debug: bool = Field(False, description="Log DEBUG messages to the console")
    console_level: str = Field("WARNING", description="Console level when not debugging")
    log_to_file: bool = Field(True, description="Also write a rotating log file")
    rotation: str = Field("50 MB", description="Rotate the log file at this size")
    retention: int = Field(10, ge=1, description="Rotated files to keep")


class PluginSettings(BaseModel):
    """Provider plugin management settings."""

    disabled_plugins: list[str] = Field(
        default_factory=list,
        description="Plugin module names not to load (e.g., ['animeapi'])",
    )


class AppSettings(BaseSettings):
    """Root settings with environment variable support.

    Environment variables use the prefix ANIME_API__ with nested delimiters:
    - ANIME_API__PROVIDER__LANGUAGE=pt
    - ANIME_API__LOGGING__LOG_TO_FILE=false

    Can also be configured via .env file in project root.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_prefix="ANIME_API__",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    provider: ProviderSettings = Field(default_factory=ProviderSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    plugins: PluginSettings = Field(default_factory=PluginSettings)


# Singleton instance - import and use throughout the app
settings = AppSettings()
