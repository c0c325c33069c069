"""Audio infrastructure - output device adapters."""

from local_music_player.infrastructure.audio.simulated_output import (
    NothingLoadedError,
    OutputState,
    SimulatedAudioOutput,
)

__all__ = [
    "NothingLoadedError",
    "OutputState",
    "SimulatedAudioOutput",
]
