"""Query for retrieving the now-playing view."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from local_music_player.domain.music.entities import Track
from local_music_player.domain.music.value_objects import RepeatMode, TransportState
from local_music_player.domain.shared.datetime_utils import format_playback_time
from local_music_player.domain.shared.types import NonNegativeInt, PlaybackSeconds, VolumeLevel

if TYPE_CHECKING:
    from ..services.playback_controller import PlaybackController


class GetCurrentTrackQuery(BaseModel):
    model_config = ConfigDict(frozen=True)


class CurrentTrackInfo(BaseModel):

    track: Track | None = None
    transport: TransportState = TransportState.STOPPED
    position: PlaybackSeconds = 0.0
    duration: float | None = None
    volume: VolumeLevel = 0.0
    repeat_mode: RepeatMode = RepeatMode.OFF
    shuffle_enabled: bool = False
    is_liked: bool = False
    queue_length: NonNegativeInt = 0

    @property
    def is_playing(self) -> bool:
        return self.transport == TransportState.PLAYING

    @property
    def position_formatted(self) -> str:
        return format_playback_time(self.position)

    @property
    def duration_formatted(self) -> str:
        return format_playback_time(self.duration)

    @property
    def progress(self) -> float:
        """Fraction of the track played, in [0, 1]; 0 while the duration is unknown."""
        if not self.duration or not math.isfinite(self.duration):
            return 0.0
        return min(1.0, self.position / self.duration)


class GetCurrentTrackHandler:

    def __init__(self, *, controller: PlaybackController) -> None:
        self._controller = controller

    async def handle(self, query: GetCurrentTrackQuery) -> CurrentTrackInfo:
        session = self._controller.session
        state = session.state
        track = session.current_track

        return CurrentTrackInfo(
            track=track,
            transport=state.transport,
            position=state.position,
            duration=self._controller.duration if track is not None else None,
            volume=state.volume,
            repeat_mode=state.repeat_mode,
            shuffle_enabled=state.shuffle_enabled,
            is_liked=track is not None and state.is_liked(track.id),
            queue_length=session.queue_length,
        )
