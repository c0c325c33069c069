"""
Application Interfaces (Ports)

Abstract interfaces that define contracts between the application
layer and infrastructure adapters. These are the "ports" in
hexagonal architecture.
"""

from local_music_player.application.interfaces.audio_output import AudioOutputPort

__all__ = [
    "AudioOutputPort",
]
