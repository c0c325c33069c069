"""Immutable value objects for the music bounded context."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Annotated

from pydantic import PlainSerializer, PlainValidator

from local_music_player.domain.shared.messages import ErrorMessages


@dataclass(frozen=True)
class TrackId:
    """Session-scoped track identifier, assigned in insertion order starting at 1."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int) or self.value <= 0:
            raise ValueError(ErrorMessages.INVALID_TRACK_ID)

    def __str__(self) -> str:
        return str(self.value)

    def __int__(self) -> int:
        return self.value

    def __hash__(self) -> int:
        return hash(self.value)

    def next(self) -> TrackId:
        """Return the identifier assigned after this one."""
        return TrackId(self.value + 1)


# Pydantic-compatible type alias for TrackId fields.
# Serializes as plain int in JSON, stores as TrackId in the model.
TrackIdField = Annotated[
    TrackId,
    PlainValidator(lambda v: v if isinstance(v, TrackId) else TrackId(v)),
    PlainSerializer(lambda v: v.value, return_type=int),
]


class TransportState(Enum):
    """Transport status with enforced transitions.

    State transitions:
    - STOPPED -> PLAYING (first tracks added, or any navigation)
    - PLAYING -> PAUSED (toggle)
    - PAUSED -> PLAYING (toggle, select, next, previous)
    - PLAYING -> PLAYING (select, next, previous, repeat)

    Nothing returns to STOPPED: the queue is append-only, so once it holds a
    track it never becomes empty again.
    """

    STOPPED = "stopped"
    PLAYING = "playing"
    PAUSED = "paused"

    def can_transition_to(self, target: TransportState) -> bool:
        """Check if transition to target state is valid."""
        valid_transitions = {
            TransportState.STOPPED: {TransportState.PLAYING},
            TransportState.PLAYING: {TransportState.PLAYING, TransportState.PAUSED},
            TransportState.PAUSED: {TransportState.PLAYING},
        }
        return target in valid_transitions.get(self, set())

    @property
    def is_playing(self) -> bool:
        return self == TransportState.PLAYING


class RepeatMode(Enum):
    """Automatic behaviour when a track finishes."""

    OFF = "off"
    ALL = "all"  # Loop the queue
    ONE = "one"  # Loop the current track

    def next_mode(self) -> RepeatMode:
        """Cycle OFF -> ALL -> ONE -> OFF."""
        modes = list(RepeatMode)
        current_index = modes.index(self)
        next_index = (current_index + 1) % len(modes)
        return modes[next_index]
