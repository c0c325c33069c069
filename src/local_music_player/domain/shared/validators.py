"""Shared validators and clamping helpers for domain models.

Commands coming from the presentation layer carry raw slider values, so
most numeric inputs are clamped into range rather than rejected. Only
values that cannot be placed on the range at all (NaN) are refused.
"""

from __future__ import annotations

import math

from local_music_player.domain.shared.messages import ErrorMessages


def require_number(value: float, field_name: str = "value") -> float:
    """Validate that a float is not NaN.

    Args:
        value: The number to validate.
        field_name: Name of the field for error messages.

    Returns:
        The value as a float.

    Raises:
        ValueError: If the value is NaN.
    """
    value = float(value)
    if math.isnan(value):
        raise ValueError(ErrorMessages.NOT_A_NUMBER.format(field_name=field_name))
    return value


def clamp_volume(level: float) -> float:
    """Clamp a volume level into ``[0.0, 1.0]``."""
    return min(1.0, max(0.0, require_number(level, "volume")))


def clamp_position(seconds: float, duration: float | None) -> float:
    """Clamp a playback position into ``[0, duration]``.

    When the duration is unknown (``None``, NaN or infinite, as reported by
    outputs that are still buffering) the position is only bounded below.

    Raises:
        ValueError: If ``seconds`` is NaN, or is infinite with no usable
            duration to clamp it against.
    """
    seconds = max(0.0, require_number(seconds, "position"))
    if duration is not None and math.isfinite(duration):
        return min(seconds, max(0.0, duration))
    if math.isinf(seconds):
        raise ValueError(ErrorMessages.UNBOUNDED_SEEK)
    return seconds


def validate_non_empty_string(value: str, field_name: str = "value") -> str:
    """Validate that a string is not empty or whitespace-only.

    Args:
        value: The string to validate.
        field_name: Name of the field for error messages.

    Returns:
        The stripped string.

    Raises:
        ValueError: If the string is empty or whitespace-only.
    """
    stripped = value.strip() if value else ""
    if not stripped:
        raise ValueError(f"{field_name} cannot be empty")
    return stripped
