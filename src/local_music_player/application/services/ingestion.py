"""Local file ingestion - turns files picked by the user into queueable tracks."""

from __future__ import annotations

import logging
import mimetypes
from collections.abc import Iterable
from pathlib import Path

from ...config.settings import PlayerSettings
from ...domain.music.entities import NewTrack
from ...domain.shared.constants import IngestionConstants
from ...domain.shared.exceptions import ValidationError
from ...domain.shared.messages import ErrorMessages, LogTemplates

logger = logging.getLogger(__name__)


class LocalFileIngestor:
    """Builds ``NewTrack`` descriptors from paths on the local device.

    Only metadata derivable from the path is filled in: the title is the
    file name without its last extension, the artist and cover art come from
    settings, and the duration stays unknown until the output reports it.
    """

    def __init__(self, settings: PlayerSettings | None = None) -> None:
        self._settings = settings or PlayerSettings()

    def is_audio_file(self, path: Path) -> bool:
        if path.suffix.lower() in self._settings.audio_extensions:
            return True
        mime_type, _ = mimetypes.guess_type(path.name)
        return mime_type is not None and mime_type.startswith(IngestionConstants.AUDIO_MIME_PREFIX)

    def track_from_path(self, path: Path | str) -> NewTrack:
        """Describe a single audio file.

        Raises:
            ValidationError: If *path* does not look like an audio file.
        """
        path = Path(path)
        if not self.is_audio_file(path):
            raise ValidationError(ErrorMessages.NOT_AN_AUDIO_FILE.format(path=path), field="path")

        title = title_from_filename(path.name)
        track = NewTrack(
            title=title,
            artist=self._settings.default_artist,
            source=path.expanduser().resolve().as_uri(),
            cover_art=self._settings.default_cover_art,
        )
        logger.debug(LogTemplates.INGEST_ACCEPTED, path, track.title)
        return track

    def ingest(self, paths: Iterable[Path | str]) -> list[NewTrack]:
        """Describe every audio file in *paths*, in order, skipping the rest."""
        tracks: list[NewTrack] = []
        for path in paths:
            try:
                tracks.append(self.track_from_path(path))
            except ValidationError:
                logger.warning(LogTemplates.INGEST_SKIPPED, path)
        return tracks


def title_from_filename(filename: str) -> str:
    """Strip the final extension from *filename*.

    ``"song.final.mp3"`` becomes ``"song.final"``. Names that are nothing but
    an extension (``".mp3"``) are kept whole so the title is never empty.
    """
    stem, dot, _ = filename.rpartition(".")
    if not dot or not stem:
        return filename
    return stem
