"""Tests for LocalFileIngestor and title derivation."""

from pathlib import Path

import pytest

from local_music_player.application.services.ingestion import LocalFileIngestor, title_from_filename
from local_music_player.config.settings import PlayerSettings
from local_music_player.domain.shared.constants import IngestionConstants
from local_music_player.domain.shared.exceptions import ValidationError


class TestTitleFromFilename:
    @pytest.mark.parametrize(
        ("filename", "expected"),
        [
            ("song.mp3", "song"),
            ("song.final.mp3", "song.final"),
            ("My Track.FLAC", "My Track"),
            ("noextension", "noextension"),
            (".mp3", ".mp3"),
        ],
    )
    def test_strips_last_extension(self, filename, expected):
        assert title_from_filename(filename) == expected


class TestLocalFileIngestor:
    @pytest.fixture
    def ingestor(self):
        return LocalFileIngestor()

    def test_track_from_path_defaults(self, ingestor, tmp_path):
        path = tmp_path / "Morning Walk.mp3"
        path.write_bytes(b"")

        track = ingestor.track_from_path(path)

        assert track.title == "Morning Walk"
        assert track.artist == IngestionConstants.DEFAULT_ARTIST
        assert track.cover_art == IngestionConstants.DEFAULT_COVER_ART
        assert track.duration_hint is None
        assert track.source == path.resolve().as_uri()
        assert track.source.startswith("file://")

    def test_accepts_string_paths(self, ingestor, tmp_path):
        track = ingestor.track_from_path(str(tmp_path / "b.ogg"))
        assert track.title == "b"

    def test_extension_match_is_case_insensitive(self, ingestor):
        assert ingestor.is_audio_file(Path("LOUD.WAV")) is True

    def test_non_audio_rejected(self, ingestor):
        with pytest.raises(ValidationError) as exc_info:
            ingestor.track_from_path(Path("notes.txt"))
        assert exc_info.value.field == "path"

    def test_mimetype_fallback(self):
        ingestor = LocalFileIngestor(PlayerSettings(audio_extensions=[".xyz"]))
        assert ingestor.is_audio_file(Path("clip.mp3")) is True
        assert ingestor.is_audio_file(Path("clip.png")) is False

    def test_settings_override_metadata(self, tmp_path):
        ingestor = LocalFileIngestor(
            PlayerSettings(default_artist="Me", default_cover_art=None)
        )
        track = ingestor.track_from_path(tmp_path / "x.mp3")
        assert track.artist == "Me"
        assert track.cover_art is None

    def test_ingest_keeps_order_and_skips_non_audio(self, ingestor, tmp_path, caplog):
        paths = [tmp_path / "b.mp3", tmp_path / "readme.txt", tmp_path / "a.flac"]

        tracks = ingestor.ingest(paths)

        assert [track.title for track in tracks] == ["b", "a"]
        assert any("readme.txt" in record.getMessage() for record in caplog.records)

    def test_ingest_empty(self, ingestor):
        assert ingestor.ingest([]) == []
