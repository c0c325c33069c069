"""Infrastructure layer - external systems integration.

This layer contains implementations for:
- Audio (simulated output device)
"""

from local_music_player.infrastructure.audio.simulated_output import SimulatedAudioOutput

__all__ = [
    "SimulatedAudioOutput",
]
