"""
Music Domain Services

Domain services containing business logic that doesn't naturally fit
within a single entity or value object.
"""

from __future__ import annotations

from local_music_player.domain.music.entities import PlaybackSession


class PlaybackDomainService:
    """Domain service for playback-related business rules.

    The presentation layer uses these guards to disable controls that would
    otherwise only produce no-op results.
    """

    @staticmethod
    def can_control_transport(session: PlaybackSession) -> bool:
        """Check if play/pause, seek and navigation controls apply.

        Args:
            session: The playback session.

        Returns:
            True if the queue holds at least one track.
        """
        return not session.is_empty

    @staticmethod
    def can_select(session: PlaybackSession, index: int) -> bool:
        """Check if *index* names a queued track.

        Args:
            session: The playback session.
            index: Zero-based queue index.

        Returns:
            True if ``select_track(index)`` would apply.
        """
        return 0 <= index < session.queue_length

    @staticmethod
    def can_pause(session: PlaybackSession) -> bool:
        return session.state.is_playing

    @staticmethod
    def can_resume(session: PlaybackSession) -> bool:
        return not session.is_empty and not session.state.is_playing


class QueueDomainService:
    """Domain service for queue-wide calculations."""

    @classmethod
    def get_queue_duration(cls, session: PlaybackSession) -> float | None:
        """Return the summed duration hints, or None if any track has no hint."""
        total = 0.0
        for track in session.queue:
            if track.duration_hint is None:
                return None
            total += track.duration_hint
        return total

    @classmethod
    def format_queue_duration(cls, session: PlaybackSession) -> str:
        """Format the total queue duration as a human-readable string."""
        duration = cls.get_queue_duration(session)
        if duration is None:
            return "Unknown"

        hours, remainder = divmod(int(duration), 3600)
        minutes, seconds = divmod(remainder, 60)

        if hours > 0:
            return f"{hours}h {minutes}m {seconds}s"
        elif minutes > 0:
            return f"{minutes}m {seconds}s"
        return f"{seconds}s"
