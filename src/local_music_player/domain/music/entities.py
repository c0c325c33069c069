"""Core domain entities for the music bounded context.

``PlaybackSession`` is the aggregate root. It is immutable: every command is
a method that returns a ``Transition`` holding the next session and the
output instructions needed to make the audio device match it. Commands that
cannot apply raise ``PreconditionViolationError`` and leave nothing changed.
"""

from __future__ import annotations

import random
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from local_music_player.domain.music.effects import (
    AnyPortEffect,
    ApplyVolume,
    LoadSource,
    PausePlayback,
    SeekTo,
    StartPlayback,
)
from local_music_player.domain.music.value_objects import (
    RepeatMode,
    TrackId,
    TrackIdField,
    TransportState,
)
from local_music_player.domain.shared.constants import AudioConstants
from local_music_player.domain.shared.datetime_utils import format_playback_time
from local_music_player.domain.shared.exceptions import PreconditionViolationError
from local_music_player.domain.shared.messages import ErrorMessages
from local_music_player.domain.shared.types import (
    DurationHintSeconds,
    NonEmptyStr,
    PlaybackSeconds,
    QueueIndexInt,
    TrackTitleStr,
    VolumeLevel,
)
from local_music_player.domain.shared.validators import (
    clamp_position,
    clamp_volume,
    validate_non_empty_string,
)


class NewTrack(BaseModel):
    """Track metadata supplied at ingestion time, before the queue assigns an id."""

    model_config = ConfigDict(frozen=True)

    title: TrackTitleStr
    artist: NonEmptyStr
    source: NonEmptyStr
    cover_art: NonEmptyStr | None = None
    duration_hint: DurationHintSeconds | None = None

    @field_validator("title", "artist", "source")
    @classmethod
    def _strip_text(cls, v: str, info: ValidationInfo) -> str:
        return validate_non_empty_string(v, info.field_name)

    @property
    def duration_formatted(self) -> str:
        """Format the duration hint as M:SS, or "Unknown" without one."""
        if self.duration_hint is None:
            return "Unknown"
        return format_playback_time(self.duration_hint)

    @property
    def display_title(self) -> str:
        """Get display title with duration if available."""
        if self.duration_hint:
            return f"{self.title} [{self.duration_formatted}]"
        return self.title

    def with_id(self, track_id: TrackId) -> Track:
        """Return a queued track carrying this metadata and *track_id*."""
        return Track(
            id=track_id,
            title=self.title,
            artist=self.artist,
            source=self.source,
            cover_art=self.cover_art,
            duration_hint=self.duration_hint,
        )


class Track(NewTrack):
    """Immutable value object representing a queued, playable track."""

    id: TrackIdField


class PlaybackState(BaseModel):
    """Playback state for the session; transitions replace it rather than mutate it."""

    model_config = ConfigDict(frozen=True)

    current_index: QueueIndexInt = 0
    transport: TransportState = TransportState.STOPPED
    position: PlaybackSeconds = 0.0
    volume: VolumeLevel = AudioConstants.DEFAULT_VOLUME
    repeat_mode: RepeatMode = RepeatMode.OFF
    shuffle_enabled: bool = False
    liked: frozenset[TrackIdField] = Field(default_factory=frozenset)

    @property
    def is_playing(self) -> bool:
        return self.transport.is_playing

    @property
    def is_muted(self) -> bool:
        return self.volume == 0.0

    def is_liked(self, track_id: TrackId | int) -> bool:
        if not isinstance(track_id, TrackId):
            track_id = TrackId(track_id)
        return track_id in self.liked


class PlaybackSession(BaseModel):
    """Aggregate root: the queue plus the playback state that walks it."""

    model_config = ConfigDict(frozen=True)

    queue: tuple[Track, ...] = ()
    state: PlaybackState = Field(default_factory=PlaybackState)
    next_track_id: TrackIdField = TrackId(1)

    @property
    def queue_length(self) -> int:
        return len(self.queue)

    @property
    def is_empty(self) -> bool:
        return not self.queue

    @property
    def current_track(self) -> Track | None:
        if not self.queue:
            return None
        return self.queue[self.state.current_index]

    def track_by_id(self, track_id: TrackId | int) -> Track | None:
        if not isinstance(track_id, TrackId):
            track_id = TrackId(track_id)
        return next((track for track in self.queue if track.id == track_id), None)

    # ── Commands ────────────────────────────────────────────────────

    def add_tracks(self, new_tracks: Sequence[NewTrack]) -> Transition:
        """Append tracks in order, assigning each the next session id.

        The first tracks ever added start playing from index 0. Adding to a
        queue that already has tracks leaves the cursor and transport alone.
        """
        if not new_tracks:
            raise PreconditionViolationError("add_tracks", ErrorMessages.NO_TRACKS_SUPPLIED)

        track_id = self.next_track_id
        added: list[Track] = []
        for new_track in new_tracks:
            added.append(new_track.with_id(track_id))
            track_id = track_id.next()

        was_empty = self.is_empty
        session = self.model_copy(
            update={"queue": self.queue + tuple(added), "next_track_id": track_id}
        )
        if not was_empty:
            return Transition(session=session)
        return session._play_from_start(0)

    def select_track(self, index: int) -> Transition:
        """Jump to *index* and play it from the beginning."""
        self._require_tracks("select_track")
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < len(self.queue):
            raise PreconditionViolationError(
                "select_track",
                ErrorMessages.INDEX_OUT_OF_RANGE.format(index=index, length=len(self.queue)),
            )
        return self._play_from_start(index)

    def toggle_play_pause(self) -> Transition:
        self._require_tracks("toggle_play_pause")
        if self.state.is_playing:
            return self._with_state({"transport": TransportState.PAUSED}, PausePlayback())
        return self._with_state({"transport": TransportState.PLAYING}, StartPlayback())

    def next(self, rng: random.Random | None = None) -> Transition:
        self._require_tracks("next")
        return self._play_from_start(self._choose_index(1, rng))

    def previous(self, rng: random.Random | None = None) -> Transition:
        self._require_tracks("previous")
        return self._play_from_start(self._choose_index(-1, rng))

    def track_ended(self, rng: random.Random | None = None) -> Transition:
        """Decide what plays after the current track finishes on its own.

        Repeat ONE restarts the same track. OFF and ALL both advance exactly
        like ``next()``, wrapping from the last track to the first.
        """
        self._require_tracks("track_ended")
        if self.state.repeat_mode == RepeatMode.ONE:
            return self._with_state(
                {"position": 0.0, "transport": TransportState.PLAYING},
                SeekTo(seconds=0.0),
                StartPlayback(),
            )
        return self._play_from_start(self._choose_index(1, rng))

    def seek(self, seconds: float, duration: float | None) -> Transition:
        """Move the play head, clamped to ``[0, duration]``."""
        self._require_tracks("seek")
        position = self._clamped_position("seek", seconds, duration)
        return self._with_state({"position": position}, SeekTo(seconds=position))

    def update_position(self, seconds: float, duration: float | None) -> Transition:
        """Overwrite the position with a value reported by the output."""
        self._require_tracks("position_tick")
        position = self._clamped_position("position_tick", seconds, duration)
        return self._with_state({"position": position})

    def set_volume(self, level: float) -> Transition:
        try:
            volume = clamp_volume(level)
        except ValueError as e:
            raise PreconditionViolationError("set_volume", str(e)) from e
        return self._with_state({"volume": volume}, ApplyVolume(level=volume))

    def toggle_mute(self, restore_volume: float = AudioConstants.MUTE_RESTORE_VOLUME) -> Transition:
        """Mute, or unmute to *restore_volume* (never the pre-mute level)."""
        volume = 0.0 if self.state.volume > 0 else clamp_volume(restore_volume)
        return self._with_state({"volume": volume}, ApplyVolume(level=volume))

    def toggle_shuffle(self) -> Transition:
        return self._with_state({"shuffle_enabled": not self.state.shuffle_enabled})

    def cycle_repeat_mode(self) -> Transition:
        return self._with_state({"repeat_mode": self.state.repeat_mode.next_mode()})

    def toggle_liked(self, track_id: TrackId | int) -> Transition:
        try:
            track = self.track_by_id(track_id)
        except ValueError as e:
            raise PreconditionViolationError("toggle_liked", str(e)) from e
        if track is None:
            raise PreconditionViolationError(
                "toggle_liked", ErrorMessages.UNKNOWN_TRACK.format(track_id=track_id)
            )
        return self._with_state({"liked": self.state.liked ^ {track.id}})

    # ── Helpers ─────────────────────────────────────────────────────

    def _require_tracks(self, operation: str) -> None:
        if not self.queue:
            raise PreconditionViolationError(operation, ErrorMessages.QUEUE_EMPTY)

    def _choose_index(self, step: int, rng: random.Random | None) -> int:
        # Shuffle ignores both the cursor and the direction.
        length = len(self.queue)
        if self.state.shuffle_enabled:
            return (rng or random).randrange(length)
        return (self.state.current_index + step) % length

    def _clamped_position(self, operation: str, seconds: float, duration: float | None) -> float:
        try:
            return clamp_position(seconds, duration)
        except ValueError as e:
            raise PreconditionViolationError(operation, str(e)) from e

    def _with_state(self, changes: dict[str, object], *effects: AnyPortEffect) -> Transition:
        target = changes.get("transport")
        current = self.state.transport
        if isinstance(target, TransportState) and not current.can_transition_to(target):
            raise PreconditionViolationError(
                f"transition to {target.value}",
                ErrorMessages.INVALID_TRANSITION.format(current=current.value, target=target.value),
            )
        state = self.state.model_copy(update=changes)
        return Transition(session=self.model_copy(update={"state": state}), effects=effects)

    def _play_from_start(self, index: int) -> Transition:
        return self._with_state(
            {"current_index": index, "position": 0.0, "transport": TransportState.PLAYING},
            LoadSource(source=self.queue[index].source),
            ApplyVolume(level=self.state.volume),
            StartPlayback(),
        )


class Transition(BaseModel):
    """Result of a session command: the next session and the output calls to make."""

    model_config = ConfigDict(frozen=True)

    session: PlaybackSession
    effects: tuple[AnyPortEffect, ...] = ()

    @property
    def state(self) -> PlaybackState:
        return self.session.state
