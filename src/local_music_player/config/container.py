"""Dependency Injection Container

Manages the application's dependency graph, providing lazy initialization
and lifecycle management for the controller, its audio output, ingestion,
and query handlers. Components are created on-demand and cached for reuse
for the lifetime of the session.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ..application.interfaces.audio_output import AudioOutputPort
    from ..application.queries.get_current import GetCurrentTrackHandler
    from ..application.queries.get_queue import GetQueueHandler
    from ..application.services.ingestion import LocalFileIngestor
    from ..application.services.playback_controller import PlaybackController
    from ..domain.shared.events import EventBus
    from .settings import Settings


@dataclass
class Container:
    """Dependency injection container.

    This container manages all application dependencies and their lifecycle.
    Components are lazily initialized when first accessed. Pre-set
    ``_audio_output`` or ``_rng`` to substitute them (tests, alternative
    devices).
    """

    settings: Settings

    # Infrastructure adapters
    _audio_output: AudioOutputPort | None = None
    _event_bus: EventBus | None = None
    _rng: random.Random | None = None

    # Application services
    _playback_controller: PlaybackController | None = None
    _ingestor: LocalFileIngestor | None = None

    # Query handlers
    _get_queue_handler: GetQueueHandler | None = None
    _get_current_handler: GetCurrentTrackHandler | None = None

    # === Infrastructure Adapters ===

    @property
    def audio_output(self) -> AudioOutputPort:
        """Get the audio output device."""
        if self._audio_output is None:
            from ..infrastructure.audio.simulated_output import SimulatedAudioOutput

            self._audio_output = SimulatedAudioOutput()
        return self._audio_output

    @property
    def event_bus(self) -> EventBus:
        """Get the event bus."""
        if self._event_bus is None:
            from ..domain.shared.events import get_event_bus

            self._event_bus = get_event_bus()
        return self._event_bus

    # === Application Services ===

    @property
    def playback_controller(self) -> PlaybackController:
        """Get the playback session controller."""
        if self._playback_controller is None:
            from ..application.services.playback_controller import PlaybackController

            self._playback_controller = PlaybackController(
                audio_output=self.audio_output,
                settings=self.settings.player,
                event_bus=self.event_bus,
                rng=self._rng,
            )
        return self._playback_controller

    @property
    def ingestor(self) -> LocalFileIngestor:
        """Get the local file ingestor."""
        if self._ingestor is None:
            from ..application.services.ingestion import LocalFileIngestor

            self._ingestor = LocalFileIngestor(self.settings.player)
        return self._ingestor

    # === Query Handlers ===

    @property
    def get_queue_handler(self) -> GetQueueHandler:
        """Get the get queue query handler."""
        if self._get_queue_handler is None:
            from ..application.queries.get_queue import GetQueueHandler

            self._get_queue_handler = GetQueueHandler(controller=self.playback_controller)
        return self._get_queue_handler

    @property
    def get_current_handler(self) -> GetCurrentTrackHandler:
        """Get the get current track query handler."""
        if self._get_current_handler is None:
            from ..application.queries.get_current import GetCurrentTrackHandler

            self._get_current_handler = GetCurrentTrackHandler(controller=self.playback_controller)
        return self._get_current_handler

    # === Lifecycle ===

    def shutdown(self) -> None:
        """Tear the session down. Nothing is persisted."""
        if self._event_bus is not None:
            self._event_bus.clear()
        self._playback_controller = None
        self._get_queue_handler = None
        self._get_current_handler = None
        logger.debug("Container shut down")


def create_container(settings: Settings) -> Container:
    """Create a new dependency injection container."""
    return Container(settings)
