"""Centralized message constants for error messages, validation, and log output."""

from __future__ import annotations


class ErrorMessages:
    """Error messages for exceptions and validation failures."""

    # Track Validation Errors
    INVALID_TRACK_ID = "Track ID must be positive"

    # Precondition Violations
    NO_TRACKS_SUPPLIED = "At least one track must be supplied"
    QUEUE_EMPTY = "Queue is empty"
    INDEX_OUT_OF_RANGE = "Index {index} is out of range for a queue of {length} tracks"
    UNKNOWN_TRACK = "Track {track_id} is not in the queue"
    INVALID_TRANSITION = "Cannot transition from {current} to {target}"
    NOT_A_NUMBER = "{field_name} must be a number"
    UNBOUNDED_SEEK = "Cannot seek to an infinite position when the duration is unknown"

    # Device Failures
    DEVICE_CALL_FAILED = "Audio output failed during '{operation}'"

    # Settings Validation Errors
    INVALID_LOG_LEVEL = "Invalid log level: {level}. Must be one of {valid_levels}"
    INVALID_AUDIO_EXTENSION = "Audio extension '{extension}' must start with '.'"

    # Ingestion Errors
    NOT_AN_AUDIO_FILE = "'{path}' is not an audio file"


class LogTemplates:
    """Log message templates for structured logging.

    Use these with logger.info(), logger.error(), etc. and pass values as parameters
    for proper log formatting and structured logging support.
    """

    # Application Lifecycle
    APP_STARTING = "Starting local music player (environment: %s)"
    APP_NO_FILES = "No audio files given; session is empty"
    APP_FINISHED = "Session finished: %d tracks queued, now %s"
    LOGGING_CONFIG_FALLBACK = "Could not load %s, falling back to console logging"

    # Queue Operations
    TRACKS_ADDED = "Added %d track(s) to the queue (length now %d)"
    TRACK_SELECTED = "Selected track %d: %s"
    TRACK_STARTED = "Now playing [%d] %s - %s"

    # Transport
    PLAYBACK_PAUSED = "Playback paused at %.2fs"
    PLAYBACK_RESUMED = "Playback resumed at %.2fs"
    TRACK_ENDED = "Track ended: %s (repeat=%s, shuffle=%s)"
    TRACK_REPEATED = "Repeating track: %s"
    SEEKED = "Seeked to %.2fs"
    VOLUME_CHANGED = "Volume set to %.2f"

    # Modes
    SHUFFLE_TOGGLED = "Shuffle %s"
    REPEAT_MODE_CHANGED = "Repeat mode changed to %s"
    LIKED_TOGGLED = "Track %d liked=%s"

    # Errors
    COMMAND_REJECTED = "Ignoring %s: %s"
    DEVICE_FAILURE = "Audio output failed during %s; playback state kept as %s"

    # Ingestion
    INGEST_SKIPPED = "Skipping non-audio file: %s"
    INGEST_ACCEPTED = "Ingested %s as '%s'"

    # Simulated Output
    SIMULATED_LOADED = "Simulated output loaded %s (duration=%s)"
    SIMULATED_ENDED = "Simulated output reached end of %s"
