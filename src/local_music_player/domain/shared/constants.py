"""Centralized constants for configuration keys, playback defaults, and other shared values.

This module provides reusable constants that reduce magic strings and improve maintainability.
"""

from __future__ import annotations


class ConfigKeys:
    """Configuration and environment variable key names.

    Pydantic Settings already provides type-safe access; these constants
    keep raw environment lookups (tests, scripts) consistent with it.
    """

    # Top-level Settings
    ENVIRONMENT = "ENVIRONMENT"
    DEBUG = "DEBUG"
    LOG_LEVEL = "LOG_LEVEL"

    # Player Settings (nested delimiter format)
    PLAYER_DEFAULT_VOLUME = "PLAYER__DEFAULT_VOLUME"
    PLAYER_MUTE_RESTORE_VOLUME = "PLAYER__MUTE_RESTORE_VOLUME"
    PLAYER_DEFAULT_ARTIST = "PLAYER__DEFAULT_ARTIST"
    PLAYER_DEFAULT_COVER_ART = "PLAYER__DEFAULT_COVER_ART"

    # Logging
    NO_COLOR = "NO_COLOR"


class AudioConstants:
    """Playback defaults."""

    DEFAULT_VOLUME = 0.8
    # Unmuting restores this level, not the level that was muted.
    MUTE_RESTORE_VOLUME = 0.8


class IngestionConstants:
    """Defaults applied to tracks built from local files."""

    DEFAULT_ARTIST = "Local File"
    DEFAULT_COVER_ART = (
        "https://images.unsplash.com/photo-1470225620780-dba8ba36b745"
        "?auto=format&fit=crop&w=800&q=80"
    )
    AUDIO_EXTENSIONS = (
        ".aac",
        ".aif",
        ".aiff",
        ".flac",
        ".m4a",
        ".mp3",
        ".oga",
        ".ogg",
        ".opus",
        ".wav",
        ".weba",
        ".wma",
    )
    AUDIO_MIME_PREFIX = "audio/"
