"""Application configuration using Pydantic v2.

Centralized settings for anime-schedule including:
- Catalog API endpoint and request timeout
- Home screen loading delay
- Carousel rotation and refetch timings
- Log file name, levels and rotation
- OS-specific data paths

Configuration can be overridden via environment variables:
    ANIME_SCHEDULE__JIKAN__API_URL=http://localhost:8080/v4
    ANIME_SCHEDULE__HOME__LOADING_DELAY_MS=0
    ANIME_SCHEDULE__CAROUSEL__ROTATION_INTERVAL_MS=5000
    ANIME_SCHEDULE__LOGGING__FILE_LEVEL=INFO
"""

import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_data_path() -> Path:
    """Get OS-specific data directory for anime-schedule.

    Returns:
        Path: ~/.local/state/anime-schedule (Linux/macOS) or %LOCALAPPDATA%\\anime-schedule (Windows)
    """
    if os.name == "nt":
        return Path(os.environ.get("LOCALAPPDATA", Path.home())) / "anime-schedule"
    return Path.home() / ".local" / "state" / "anime-schedule"


class JikanSettings(BaseModel):
    """Jikan (MyAnimeList) REST API configuration."""

    api_url: str = Field(
        "https://api.jikan.moe/v4",
        description="Jikan v4 base URL",
    )
    timeout: float | None = Field(
        None,
        gt=0,
        description="Per-request timeout in seconds (None keeps the transport default)",
    )


class HomeSettings(BaseModel):
    """Home screen configuration."""

    loading_delay_ms: int = Field(
        2500,
        ge=0,
        le=60_000,
        description="Minimum loading time before the home screen fetches anything",
    )


class CarouselSettings(BaseModel):
    """Top airing carousel configuration."""

    rotation_interval_ms: int = Field(
        3000,
        ge=100,
        le=600_000,
        description="Time each anime stays on screen",
    )
    refetch_guard_ms: int = Field(
        5000,
        ge=0,
        le=600_000,
        description="Minimum time between two fetch attempts of the same carousel",
    )


class DisplaySettings(BaseModel):
    """Terminal rendering configuration."""

    refresh_per_second: float = Field(
        4,
        gt=0,
        le=60,
        description="Live view refresh rate",
    )


LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseModel):
    """Log sinks. The file lives in get_data_path()."""

    file_name: str = Field(
        "anime-schedule.log",
        min_length=1,
        description="Log file name inside the data directory",
    )
    file_level: LogLevel = Field("DEBUG", description="Minimum level written to the log file")
    console_level: LogLevel = Field(
        "WARNING",
        description="Minimum level printed to stderr (--debug forces DEBUG)",
    )
    rotation: str = Field("10 MB", description="Size or age at which the log file rotates")
    retention: int = Field(5, ge=1, description="Rotated log files kept")


class AppSettings(BaseSettings):
    """Root application settings with environment variable support.

    Environment variables use the prefix ANIME_SCHEDULE__ with nested delimiters:
    - ANIME_SCHEDULE__JIKAN__TIMEOUT=10
    - ANIME_SCHEDULE__HOME__LOADING_DELAY_MS=0
    - ANIME_SCHEDULE__CAROUSEL__REFETCH_GUARD_MS=5000

    Can also be configured via .env file in project root.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",  # ANIME_SCHEDULE__JIKAN__API_URL
        env_prefix="ANIME_SCHEDULE__",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )

    jikan: JikanSettings = Field(default_factory=JikanSettings)
    home: HomeSettings = Field(default_factory=HomeSettings)
    carousel: CarouselSettings = Field(default_factory=CarouselSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Singleton instance - import and use throughout the app
settings = AppSettings()
