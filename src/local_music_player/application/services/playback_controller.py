"""Playback Session Controller - drives the session state machine and the audio output."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from pydantic import BaseModel

from ...config.settings import PlayerSettings
from ...domain.music.effects import (
    ApplyVolume,
    LoadSource,
    PausePlayback,
    PortEffect,
    SeekTo,
    StartPlayback,
)
from ...domain.music.entities import NewTrack, PlaybackSession, PlaybackState, Track, Transition
from ...domain.music.services import QueueDomainService
from ...domain.music.value_objects import RepeatMode, TrackId
from ...domain.shared.events import (
    CommandRejected,
    EventBus,
    PlaybackDeviceFailed,
    PlaybackStateChanged,
    PositionUpdated,
    TracksAdded,
    TrackStarted,
    get_event_bus,
)
from ...domain.shared.exceptions import PlaybackDeviceError, PreconditionViolationError
from ...domain.shared.messages import LogTemplates
from ..queries.get_queue import QueueInfo

if TYPE_CHECKING:
    from ..interfaces.audio_output import AudioOutputPort

logger = logging.getLogger(__name__)


class CommandResult(BaseModel):
    success: bool
    operation: str
    message: str = ""


class PlaybackController:
    """Owns the playback session and carries out commands against the audio output.

    Every command runs to completion before the next one starts: the session
    transition is computed, stored, and its output calls are awaited in order.
    Commands that cannot apply are no-ops reported through ``CommandResult``;
    they never raise. Output failures are logged and suppressed, and the
    session is not rolled back, so ``PLAYING`` may briefly disagree with what
    the device is actually doing.
    """

    def __init__(
        self,
        *,
        audio_output: AudioOutputPort,
        settings: PlayerSettings | None = None,
        event_bus: EventBus | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._output = audio_output
        self._settings = settings or PlayerSettings()
        self._event_bus = event_bus or get_event_bus()
        self._rng = rng or random.Random()
        self._session = PlaybackSession(state=PlaybackState(volume=self._settings.default_volume))

        self._output.set_on_ended_callback(self.on_ended)
        self._output.set_on_position_tick_callback(self.on_position_tick)

    # ── Observation ─────────────────────────────────────────────────

    @property
    def session(self) -> PlaybackSession:
        return self._session

    @property
    def state(self) -> PlaybackState:
        return self._session.state

    @property
    def queue(self) -> tuple[Track, ...]:
        return self._session.queue

    @property
    def current_track(self) -> Track | None:
        return self._session.current_track

    @property
    def duration(self) -> float | None:
        """Length of the loaded track as reported by the output."""
        return self._output.duration

    def get_queue_info(self) -> QueueInfo:
        """Snapshot of the queue for rendering."""
        session = self._session
        if session.is_empty:
            return QueueInfo(total_duration=0.0, total_duration_formatted="0s")

        return QueueInfo(
            tracks=list(session.queue),
            current_track=session.current_track,
            current_index=session.state.current_index,
            total_duration=QueueDomainService.get_queue_duration(session),
            total_duration_formatted=QueueDomainService.format_queue_duration(session),
        )

    # ── Commands ────────────────────────────────────────────────────

    async def add_tracks(self, new_tracks: Sequence[NewTrack]) -> CommandResult:
        new_tracks = list(new_tracks)
        was_empty = self._session.is_empty
        result = await self._execute("add_tracks", lambda s: s.add_tracks(new_tracks))
        if result.success:
            added = self._session.queue[-len(new_tracks):]
            logger.info(LogTemplates.TRACKS_ADDED, len(added), self._session.queue_length)
            await self._event_bus.publish(
                TracksAdded(
                    track_ids=tuple(track.id for track in added),
                    queue_length=self._session.queue_length,
                    auto_started=was_empty,
                )
            )
        return result

    async def select_track(self, index: int) -> CommandResult:
        result = await self._execute("select_track", lambda s: s.select_track(index))
        if result.success and self.current_track is not None:
            logger.debug(LogTemplates.TRACK_SELECTED, index, self.current_track.title)
        return result

    async def toggle_play_pause(self) -> CommandResult:
        result = await self._execute("toggle_play_pause", lambda s: s.toggle_play_pause())
        if result.success:
            template = (
                LogTemplates.PLAYBACK_RESUMED if self.state.is_playing else LogTemplates.PLAYBACK_PAUSED
            )
            logger.debug(template, self.state.position)
        return result

    async def next(self) -> CommandResult:
        return await self._execute("next", lambda s: s.next(self._rng))

    async def previous(self) -> CommandResult:
        return await self._execute("previous", lambda s: s.previous(self._rng))

    async def seek(self, seconds: float) -> CommandResult:
        duration = self._output.duration
        result = await self._execute("seek", lambda s: s.seek(seconds, duration))
        if result.success:
            logger.debug(LogTemplates.SEEKED, self.state.position)
        return result

    async def set_volume(self, level: float) -> CommandResult:
        result = await self._execute("set_volume", lambda s: s.set_volume(level))
        if result.success:
            logger.debug(LogTemplates.VOLUME_CHANGED, self.state.volume)
        return result

    async def toggle_mute(self) -> CommandResult:
        restore = self._settings.mute_restore_volume
        result = await self._execute("toggle_mute", lambda s: s.toggle_mute(restore))
        logger.debug(LogTemplates.VOLUME_CHANGED, self.state.volume)
        return result

    async def toggle_shuffle(self) -> CommandResult:
        result = await self._execute("toggle_shuffle", lambda s: s.toggle_shuffle())
        logger.debug(LogTemplates.SHUFFLE_TOGGLED, "on" if self.state.shuffle_enabled else "off")
        return result

    async def cycle_repeat_mode(self) -> CommandResult:
        result = await self._execute("cycle_repeat_mode", lambda s: s.cycle_repeat_mode())
        logger.debug(LogTemplates.REPEAT_MODE_CHANGED, self.state.repeat_mode.value)
        return result

    async def toggle_liked(self, track_id: TrackId | int) -> CommandResult:
        result = await self._execute("toggle_liked", lambda s: s.toggle_liked(track_id))
        if result.success:
            logger.debug(LogTemplates.LIKED_TOGGLED, int(track_id), self.state.is_liked(track_id))
        return result

    # ── Output notifications ────────────────────────────────────────

    async def on_ended(self) -> None:
        """Handle the output reaching the end of the loaded track."""
        track = self.current_track
        if track is not None:
            logger.debug(
                LogTemplates.TRACK_ENDED,
                track.title,
                self.state.repeat_mode.value,
                self.state.shuffle_enabled,
            )
            if self.state.repeat_mode == RepeatMode.ONE:
                logger.info(LogTemplates.TRACK_REPEATED, track.title)
        await self._execute("track_ended", lambda s: s.track_ended(self._rng))

    async def on_position_tick(self, seconds: float) -> None:
        """Overwrite the position with the value the output reports."""
        duration = self._output.duration
        try:
            transition = self._session.update_position(seconds, duration)
        except PreconditionViolationError as e:
            logger.debug(LogTemplates.COMMAND_REJECTED, e.operation, e.reason)
            return
        self._session = transition.session
        await self._event_bus.publish(
            PositionUpdated(position=self.state.position, duration=duration)
        )

    # ── Internals ───────────────────────────────────────────────────

    async def _execute(
        self, operation: str, command: Callable[[PlaybackSession], Transition]
    ) -> CommandResult:
        try:
            transition = command(self._session)
        except PreconditionViolationError as e:
            logger.debug(LogTemplates.COMMAND_REJECTED, operation, e.reason)
            await self._event_bus.publish(CommandRejected(operation=operation, reason=e.reason))
            return CommandResult(success=False, operation=operation, message=e.message)

        self._session = transition.session
        for effect in transition.effects:
            await self._apply(operation, effect)

        if any(isinstance(effect, LoadSource) for effect in transition.effects):
            await self._announce_track()

        await self._event_bus.publish(self._state_changed(operation))
        return CommandResult(success=True, operation=operation)

    async def _apply(self, operation: str, effect: PortEffect) -> None:
        try:
            if isinstance(effect, LoadSource):
                await self._output.load(effect.source)
            elif isinstance(effect, StartPlayback):
                await self._output.play()
            elif isinstance(effect, PausePlayback):
                await self._output.pause()
            elif isinstance(effect, SeekTo):
                await self._output.seek(effect.seconds)
            elif isinstance(effect, ApplyVolume):
                await self._output.set_volume(effect.level)
        except Exception as e:
            error = PlaybackDeviceError(operation, cause=e)
            logger.exception(LogTemplates.DEVICE_FAILURE, operation, self.state.transport.value)
            await self._event_bus.publish(
                PlaybackDeviceFailed(operation=operation, error=error.message)
            )

    async def _announce_track(self) -> None:
        track = self.current_track
        if track is None:
            return
        logger.info(LogTemplates.TRACK_STARTED, int(track.id), track.title, track.artist)
        await self._event_bus.publish(
            TrackStarted(
                track_id=track.id,
                track_title=track.title,
                artist=track.artist,
                index=self.state.current_index,
            )
        )

    def _state_changed(self, operation: str) -> PlaybackStateChanged:
        state = self.state
        return PlaybackStateChanged(
            operation=operation,
            current_index=state.current_index,
            transport=state.transport,
            position=state.position,
            volume=state.volume,
            repeat_mode=state.repeat_mode,
            shuffle_enabled=state.shuffle_enabled,
            queue_length=self._session.queue_length,
        )
