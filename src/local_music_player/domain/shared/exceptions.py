"""Base exception classes for domain-level errors."""

from __future__ import annotations

from local_music_player.domain.shared.messages import ErrorMessages


class DomainError(Exception):
    """Base exception for all domain-level errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Raised when domain validation fails."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


class PreconditionViolationError(DomainError):
    """Raised when a command is issued in a state where it cannot apply.

    The controller turns these into no-op results instead of letting them
    reach the presentation layer.
    """

    def __init__(self, operation: str, reason: str, message: str | None = None) -> None:
        msg = message or f"Cannot perform '{operation}': {reason}"
        super().__init__(msg, code="PRECONDITION_VIOLATION")
        self.operation = operation
        self.reason = reason


class PlaybackDeviceError(DomainError):
    """Raised when the audio output rejects a call (codec, permission, ...)."""

    def __init__(self, operation: str, cause: BaseException | None = None, message: str | None = None) -> None:
        msg = message or ErrorMessages.DEVICE_CALL_FAILED.format(operation=operation)
        if cause is not None and message is None:
            msg = f"{msg}: {cause}"
        super().__init__(msg, code="PLAYBACK_DEVICE_FAILURE")
        self.operation = operation
        self.cause = cause
