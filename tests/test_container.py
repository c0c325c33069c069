"""
Unit Tests for Dependency Injection Container

Tests for:
- Lazy initialization (properties create instances on first access)
- Caching (subsequent property access returns same instance)
- Substituting the audio output and RNG
- Settings flowing into the controller and ingestor
- Shutdown
"""

import random
from unittest.mock import MagicMock

import pytest

from local_music_player.application.interfaces.audio_output import AudioOutputPort
from local_music_player.application.queries.get_current import GetCurrentTrackHandler
from local_music_player.application.queries.get_queue import GetQueueHandler
from local_music_player.application.services.ingestion import LocalFileIngestor
from local_music_player.application.services.playback_controller import PlaybackController
from local_music_player.config.container import Container, create_container
from local_music_player.config.settings import PlayerSettings, Settings
from local_music_player.domain.shared.events import CommandRejected, get_event_bus
from local_music_player.infrastructure.audio.simulated_output import SimulatedAudioOutput


@pytest.fixture
def settings():
    return Settings(player=PlayerSettings(default_volume=0.3, default_artist="Tester"))


@pytest.fixture
def container(settings):
    return create_container(settings)


class TestContainerInit:
    def test_create_container(self, settings):
        container = create_container(settings)

        assert isinstance(container, Container)
        assert container.settings is settings
        assert container._playback_controller is None
        assert container._audio_output is None


class TestLazyProperties:
    def test_audio_output_defaults_to_simulated(self, container):
        assert isinstance(container.audio_output, SimulatedAudioOutput)
        assert container.audio_output is container.audio_output

    def test_event_bus_is_global_singleton(self, container):
        assert container.event_bus is get_event_bus()

    def test_playback_controller(self, container):
        controller = container.playback_controller

        assert isinstance(controller, PlaybackController)
        assert controller is container.playback_controller
        assert controller.state.volume == 0.3

    def test_ingestor_uses_player_settings(self, container, tmp_path):
        ingestor = container.ingestor

        assert isinstance(ingestor, LocalFileIngestor)
        assert ingestor.track_from_path(tmp_path / "a.mp3").artist == "Tester"

    def test_query_handlers(self, container):
        assert isinstance(container.get_queue_handler, GetQueueHandler)
        assert isinstance(container.get_current_handler, GetCurrentTrackHandler)
        assert container.get_queue_handler is container.get_queue_handler


class TestSubstitution:
    def test_preset_audio_output_is_used(self, settings):
        port = MagicMock(spec=AudioOutputPort)
        container = Container(settings, _audio_output=port)

        container.playback_controller

        port.set_on_ended_callback.assert_called_once()

    async def test_preset_rng_drives_shuffle(self, settings, three_new_tracks):
        container = Container(settings, _rng=random.Random(11))
        expected = random.Random(11).randrange(3)
        controller = container.playback_controller

        await controller.add_tracks(three_new_tracks)
        await controller.toggle_shuffle()
        await controller.next()

        assert controller.state.current_index == expected


class TestShutdown:
    async def test_shutdown_clears_bus_and_services(self, container):
        received = []

        async def handler(event):
            received.append(event)

        container.event_bus.subscribe(CommandRejected, handler)
        first = container.playback_controller

        container.shutdown()
        await container.event_bus.publish(CommandRejected(operation="next"))

        assert received == []
        assert container._playback_controller is None
        assert container.playback_controller is not first
