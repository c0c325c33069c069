"""
Shared Domain Kernel

Contains types, exceptions and helpers shared across the package.
"""

from local_music_player.domain.shared.exceptions import (
    DomainError,
    PlaybackDeviceError,
    PreconditionViolationError,
    ValidationError,
)

__all__ = [
    "DomainError",
    "ValidationError",
    "PreconditionViolationError",
    "PlaybackDeviceError",
]
