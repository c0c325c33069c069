import random

import pytest

from local_music_player.config.settings import PlayerSettings, clear_settings_cache
from local_music_player.domain.shared.events import EventBus, reset_event_bus

# ============================================================================
# Global State
# ============================================================================


@pytest.fixture(autouse=True)
def _isolate_globals():
    """Give every test a fresh event bus singleton and settings cache."""
    reset_event_bus()
    clear_settings_cache()
    yield
    reset_event_bus()
    clear_settings_cache()


# ============================================================================
# Domain Entity Fixtures
# ============================================================================


@pytest.fixture
def make_new_track():
    """Factory for NewTrack descriptors with distinct sources."""
    from local_music_player.domain.music.entities import NewTrack

    def _make(title: str = "Song", **kwargs):
        kwargs.setdefault("artist", "Local File")
        kwargs.setdefault("source", f"file:///music/{title.replace(' ', '_')}.mp3")
        return NewTrack(title=title, **kwargs)

    return _make


@pytest.fixture
def three_new_tracks(make_new_track):
    """Three descriptors: A, B and C."""
    return [make_new_track("A"), make_new_track("B"), make_new_track("C")]


# ============================================================================
# Application Fixtures
# ============================================================================


@pytest.fixture
def player_settings():
    return PlayerSettings()


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def recorded_events(event_bus):
    """Subscribe a recorder to every controller event and return its list."""
    from local_music_player.domain.shared.events import (
        CommandRejected,
        PlaybackDeviceFailed,
        PlaybackStateChanged,
        PositionUpdated,
        TracksAdded,
        TrackStarted,
    )

    events = []

    async def record(event):
        events.append(event)

    for event_type in (
        CommandRejected,
        PlaybackDeviceFailed,
        PlaybackStateChanged,
        PositionUpdated,
        TracksAdded,
        TrackStarted,
    ):
        event_bus.subscribe(event_type, record)
    return events


@pytest.fixture
def simulated_output():
    """Simulated output where every track is 200 seconds long."""
    from local_music_player.infrastructure.audio.simulated_output import SimulatedAudioOutput

    return SimulatedAudioOutput(default_duration=200.0)


@pytest.fixture
def controller(simulated_output, player_settings, event_bus):
    """Controller wired to the simulated output and a seeded RNG."""
    from local_music_player.application.services.playback_controller import PlaybackController

    return PlaybackController(
        audio_output=simulated_output,
        settings=player_settings,
        event_bus=event_bus,
        rng=random.Random(1234),
    )
