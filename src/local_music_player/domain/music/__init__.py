"""
Music Bounded Context

Domain logic for tracks, the playback queue, and the session state machine.
"""

from local_music_player.domain.music.effects import (
    ApplyVolume,
    LoadSource,
    PausePlayback,
    PortEffect,
    SeekTo,
    StartPlayback,
)
from local_music_player.domain.music.entities import (
    NewTrack,
    PlaybackSession,
    PlaybackState,
    Track,
    Transition,
)
from local_music_player.domain.music.services import PlaybackDomainService, QueueDomainService
from local_music_player.domain.music.value_objects import RepeatMode, TrackId, TransportState

__all__ = [
    # Entities
    "NewTrack",
    "Track",
    "PlaybackSession",
    "PlaybackState",
    "Transition",
    # Value Objects
    "TrackId",
    "TransportState",
    "RepeatMode",
    # Effects
    "PortEffect",
    "LoadSource",
    "StartPlayback",
    "PausePlayback",
    "SeekTo",
    "ApplyVolume",
    # Services
    "PlaybackDomainService",
    "QueueDomainService",
]
