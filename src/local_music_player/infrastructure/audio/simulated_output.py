"""
Simulated Audio Output

In-memory implementation of the audio output port. It renders no sound;
it keeps the play head, volume and loaded source the way a real device
would, and reports position ticks and end-of-track when time is advanced.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from enum import Enum

from local_music_player.application.interfaces.audio_output import AudioOutputPort
from local_music_player.domain.shared.messages import LogTemplates

logger = logging.getLogger(__name__)


class OutputState(Enum):
    """States for the simulated output."""

    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"
    ENDED = "ended"


class NothingLoadedError(RuntimeError):
    """Raised when the output is asked to play before any source is loaded."""


class SimulatedAudioOutput(AudioOutputPort):
    """Audio output that tracks playback without producing sound.

    Durations are looked up per source; sources without an entry use
    ``default_duration`` (``None`` means "unknown", like a stream that has
    not finished buffering).
    """

    def __init__(
        self,
        durations: Mapping[str, float] | None = None,
        default_duration: float | None = None,
    ) -> None:
        self._durations = dict(durations or {})
        self._default_duration = default_duration

        self._source: str | None = None
        self._duration: float | None = None
        self._position = 0.0
        self._volume = 1.0
        self._state = OutputState.IDLE

        self._on_ended: Callable[[], Awaitable[None]] | None = None
        self._on_position_tick: Callable[[float], Awaitable[None]] | None = None

    # ── Port implementation ─────────────────────────────────────────

    async def load(self, source: str) -> None:
        self._source = source
        self._duration = self._durations.get(source, self._default_duration)
        self._position = 0.0
        self._state = OutputState.IDLE
        logger.debug(LogTemplates.SIMULATED_LOADED, source, self._duration)

    async def play(self) -> None:
        if self._source is None:
            raise NothingLoadedError("No source loaded")
        if self._state == OutputState.ENDED:
            self._position = 0.0
        self._state = OutputState.PLAYING

    async def pause(self) -> None:
        if self._state == OutputState.PLAYING:
            self._state = OutputState.PAUSED

    async def seek(self, seconds: float) -> None:
        seconds = max(0.0, seconds)
        if self._duration is not None:
            seconds = min(seconds, self._duration)
        self._position = seconds

    async def set_volume(self, level: float) -> None:
        self._volume = level

    @property
    def position(self) -> float:
        return self._position

    @property
    def duration(self) -> float | None:
        return self._duration

    def set_on_ended_callback(self, callback: Callable[[], Awaitable[None]]) -> None:
        self._on_ended = callback

    def set_on_position_tick_callback(self, callback: Callable[[float], Awaitable[None]]) -> None:
        self._on_position_tick = callback

    # ── Simulation controls ─────────────────────────────────────────

    @property
    def source(self) -> str | None:
        return self._source

    @property
    def volume(self) -> float:
        return self._volume

    @property
    def state(self) -> OutputState:
        return self._state

    @property
    def is_playing(self) -> bool:
        return self._state == OutputState.PLAYING

    async def advance(self, seconds: float) -> None:
        """Let *seconds* of playback elapse, emitting a tick and, at the end, end-of-track."""
        if not self.is_playing:
            return

        self._position += max(0.0, seconds)
        reached_end = self._duration is not None and self._position >= self._duration
        if reached_end:
            self._position = self._duration

        if self._on_position_tick is not None:
            await self._on_position_tick(self._position)

        if reached_end:
            self._state = OutputState.ENDED
            logger.debug(LogTemplates.SIMULATED_ENDED, self._source)
            if self._on_ended is not None:
                await self._on_ended()
