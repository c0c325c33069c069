"""Date/time helpers.

- Event timestamps are timezone-aware UTC datetimes.
- Playback positions are rendered as ``m:ss`` for display.

This module is intentionally dependency-free and safe to use in any layer.
"""

from __future__ import annotations

import math
from datetime import UTC, datetime


def utcnow() -> datetime:
    """Preferred replacement for `datetime.now(UTC)()`.

    Returns a timezone-aware datetime in UTC.
    """
    return datetime.now(UTC)


def format_playback_time(seconds: float | None) -> str:
    """Format elapsed seconds as ``m:ss``.

    Unknown values (``None`` or NaN) render as ``0:00`` so a progress bar
    can be drawn before the output reports a duration. Minutes are not
    rolled over into hours.
    """
    if seconds is None or math.isnan(seconds) or math.isinf(seconds):
        return "0:00"
    total = max(0, int(seconds))
    minutes, secs = divmod(total, 60)
    return f"{minutes}:{secs:02d}"
