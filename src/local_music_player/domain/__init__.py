"""
Domain Layer

Contains pure business logic organized by bounded contexts:
- shared/: Cross-cutting types, exceptions, messages and events
- music/: Track, queue, and playback state machine
"""

from local_music_player.domain.shared.exceptions import DomainError

__all__ = [
    "DomainError",
]
