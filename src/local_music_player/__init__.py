"""Local music player: playback session controller for files on the user's device."""

__version__ = "0.1.0"
