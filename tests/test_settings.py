"""
Unit Tests for Application Settings Configuration

Tests for:
- Default values
- Nested player settings from environment variables
- Custom validators (log level, audio extensions)
- Invalid values (out of range volumes)
- Settings caching and clearing
"""

import pytest
from pydantic import ValidationError

from local_music_player.config.settings import (
    PlayerSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from local_music_player.domain.shared.constants import ConfigKeys, IngestionConstants


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in (
        ConfigKeys.ENVIRONMENT,
        ConfigKeys.DEBUG,
        ConfigKeys.LOG_LEVEL,
        ConfigKeys.PLAYER_DEFAULT_VOLUME,
        ConfigKeys.PLAYER_MUTE_RESTORE_VOLUME,
        ConfigKeys.PLAYER_DEFAULT_ARTIST,
        ConfigKeys.PLAYER_DEFAULT_COVER_ART,
    ):
        monkeypatch.delenv(key, raising=False)


# =============================================================================
# PlayerSettings Tests
# =============================================================================


class TestPlayerSettings:
    def test_create_with_defaults(self):
        player = PlayerSettings()

        assert player.default_volume == 0.8
        assert player.mute_restore_volume == 0.8
        assert player.default_artist == IngestionConstants.DEFAULT_ARTIST
        assert player.default_cover_art == IngestionConstants.DEFAULT_COVER_ART
        assert ".mp3" in player.audio_extensions

    def test_aliases(self):
        player = PlayerSettings(volume=0.4, unmute_volume=0.7, cover=None)

        assert player.default_volume == 0.4
        assert player.mute_restore_volume == 0.7
        assert player.default_cover_art is None

    @pytest.mark.parametrize("volume", [-0.1, 1.5])
    def test_volume_out_of_range(self, volume):
        with pytest.raises(ValidationError):
            PlayerSettings(default_volume=volume)

    def test_extensions_from_comma_string(self):
        player = PlayerSettings(audio_extensions=".MP3, .ogg,")
        assert player.audio_extensions == (".mp3", ".ogg")

    def test_extensions_from_list(self):
        player = PlayerSettings(audio_extensions=[".Flac"])
        assert player.audio_extensions == (".flac",)

    def test_extension_without_dot_rejected(self):
        with pytest.raises(ValidationError):
            PlayerSettings(audio_extensions=["mp3"])

    def test_frozen(self):
        player = PlayerSettings()
        with pytest.raises(ValidationError):
            player.default_volume = 0.1


# =============================================================================
# Settings Tests
# =============================================================================


class TestSettings:
    def test_defaults(self):
        settings = Settings()

        assert settings.environment == "development"
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert isinstance(settings.player, PlayerSettings)

    def test_log_level_uppercased(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    def test_invalid_environment(self):
        with pytest.raises(ValidationError):
            Settings(environment="staging")

    def test_load_from_env(self, monkeypatch):
        monkeypatch.setenv(ConfigKeys.ENVIRONMENT, "test")
        monkeypatch.setenv(ConfigKeys.LOG_LEVEL, "warning")
        monkeypatch.setenv(ConfigKeys.PLAYER_DEFAULT_VOLUME, "0.5")
        monkeypatch.setenv(ConfigKeys.PLAYER_DEFAULT_ARTIST, "Unknown Artist")

        settings = Settings()

        assert settings.environment == "test"
        assert settings.log_level == "WARNING"
        assert settings.player.default_volume == 0.5
        assert settings.player.default_artist == "Unknown Artist"

    def test_invalid_env_volume(self, monkeypatch):
        monkeypatch.setenv(ConfigKeys.PLAYER_DEFAULT_VOLUME, "2")
        with pytest.raises(ValidationError):
            Settings()

    def test_every_config_key_is_read(self, monkeypatch):
        monkeypatch.setenv(ConfigKeys.DEBUG, "true")
        monkeypatch.setenv(ConfigKeys.PLAYER_MUTE_RESTORE_VOLUME, "0.4")
        monkeypatch.setenv(ConfigKeys.PLAYER_DEFAULT_COVER_ART, "https://example.com/cover.png")

        settings = Settings()

        assert settings.debug is True
        assert settings.player.mute_restore_volume == 0.4
        assert settings.player.default_cover_art == "https://example.com/cover.png"


class TestSettingsCache:
    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_clear_settings_cache(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv(ConfigKeys.LOG_LEVEL, "ERROR")
        clear_settings_cache()

        second = get_settings()

        assert second is not first
        assert second.log_level == "ERROR"
