"""Port interface for the audio output device."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable


class AudioOutputPort(ABC):
    """Interface for the device that renders sound for the session.

    The controller directs it and never inspects how it works. Any method
    may raise to report a device failure (codec, permissions, ...).
    """

    @abstractmethod
    async def load(self, source: str) -> None:
        """Load *source*, replacing whatever was loaded before."""
        ...

    @abstractmethod
    async def play(self) -> None:
        """Start or resume rendering the loaded source."""
        ...

    @abstractmethod
    async def pause(self) -> None:
        """Pause rendering, keeping the current position."""
        ...

    @abstractmethod
    async def seek(self, seconds: float) -> None:
        """Move the play head to *seconds*."""
        ...

    @abstractmethod
    async def set_volume(self, level: float) -> None:
        """Set the output level in ``[0.0, 1.0]``."""
        ...

    @property
    @abstractmethod
    def position(self) -> float:
        """Seconds elapsed in the loaded source."""
        ...

    @property
    @abstractmethod
    def duration(self) -> float | None:
        """Length of the loaded source in seconds, or None while unknown."""
        ...

    @abstractmethod
    def set_on_ended_callback(self, callback: Callable[[], Awaitable[None]]) -> None:
        """Set callback for when the loaded source plays to its end."""
        ...

    @abstractmethod
    def set_on_position_tick_callback(self, callback: Callable[[float], Awaitable[None]]) -> None:
        """Set callback receiving the play head position as it advances."""
        ...
