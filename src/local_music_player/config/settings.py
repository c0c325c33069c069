"""Application Settings and Configuration

Pydantic-based settings management using environment variables.
Settings are loaded from environment variables with support for .env files,
type validation, and sensible defaults. All settings are frozen and immutable
after initialization.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.shared.constants import AudioConstants, IngestionConstants
from ..domain.shared.messages import ErrorMessages


class PlayerSettings(BaseModel):
    """Playback and ingestion configuration."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    default_volume: float = Field(
        default=AudioConstants.DEFAULT_VOLUME,
        ge=0.0,
        le=1.0,
        validation_alias=AliasChoices("default_volume", "volume"),
    )
    mute_restore_volume: float = Field(
        default=AudioConstants.MUTE_RESTORE_VOLUME,
        ge=0.0,
        le=1.0,
        validation_alias=AliasChoices("mute_restore_volume", "unmute_volume"),
    )
    default_artist: str = Field(default=IngestionConstants.DEFAULT_ARTIST, min_length=1)
    default_cover_art: str | None = Field(
        default=IngestionConstants.DEFAULT_COVER_ART,
        validation_alias=AliasChoices("default_cover_art", "cover_art", "cover"),
    )
    audio_extensions: tuple[str, ...] = Field(
        default=IngestionConstants.AUDIO_EXTENSIONS,
        validation_alias=AliasChoices("audio_extensions", "extensions"),
    )

    @field_validator("audio_extensions", mode="before")
    @classmethod
    def validate_audio_extensions(cls, v: tuple[str, ...] | list[str] | str) -> tuple[str, ...]:
        """Normalise extensions to lowercase and convert lists to tuples."""
        # Accept a comma-separated string from plain env vars
        if isinstance(v, str):
            v = [part for part in v.split(",") if part.strip()]
        normalised = tuple(ext.strip().lower() for ext in v)
        for ext in normalised:
            if not ext.startswith("."):
                raise ValueError(ErrorMessages.INVALID_AUDIO_EXTENSION.format(extension=ext))
        return normalised


class Settings(BaseSettings):
    """Application settings container.

    Automatically loads configuration from environment variables.

    Environment variable naming:
    - ENVIRONMENT, DEBUG, LOG_LEVEL (top-level)
    - PLAYER__DEFAULT_VOLUME, PLAYER__DEFAULT_ARTIST, etc. (nested with delimiter)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    player: PlayerSettings = Field(default_factory=PlayerSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(ErrorMessages.INVALID_LOG_LEVEL.format(level=v, valid_levels=valid_levels))
        return v_upper


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are automatically loaded from:
    1. .env file (if present)
    2. Environment variables
    3. Default values
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
