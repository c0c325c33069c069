"""Tests for domain events and the EventBus."""

import logging
from datetime import UTC

import pytest
from pydantic import ValidationError

from local_music_player.domain.music.value_objects import TrackId, TransportState
from local_music_player.domain.shared.events import (
    CommandRejected,
    EventBus,
    PlaybackStateChanged,
    TracksAdded,
    get_event_bus,
    reset_event_bus,
)


class TestDomainEvents:
    def test_events_get_id_and_utc_timestamp(self):
        first = CommandRejected(operation="next", reason="Queue is empty")
        second = CommandRejected(operation="next", reason="Queue is empty")

        assert first.event_id != second.event_id
        assert first.occurred_at.tzinfo == UTC

    def test_events_are_frozen(self):
        event = CommandRejected(operation="next")
        with pytest.raises(ValidationError):
            event.reason = "changed"

    def test_track_ids_serialize_as_ints(self):
        event = TracksAdded(track_ids=(TrackId(1), 2), queue_length=2)
        assert event.track_ids == (TrackId(1), TrackId(2))
        assert event.model_dump()["track_ids"] == (1, 2)

    def test_state_changed_defaults(self):
        event = PlaybackStateChanged(operation="seek")
        assert event.transport == TransportState.STOPPED
        assert event.queue_length == 0


class TestEventBus:
    async def test_publish_reaches_subscribers(self):
        bus = EventBus()
        received = []

        async def handler(event):
            received.append(event)

        bus.subscribe(CommandRejected, handler)
        event = CommandRejected(operation="next")
        await bus.publish(event)

        assert received == [event]

    async def test_handlers_only_receive_their_type(self):
        bus = EventBus()
        received = []

        async def handler(event):
            received.append(event)

        bus.subscribe(TracksAdded, handler)
        await bus.publish(CommandRejected(operation="next"))

        assert received == []

    async def test_unsubscribe(self):
        bus = EventBus()
        received = []

        async def handler(event):
            received.append(event)

        bus.subscribe(CommandRejected, handler)
        bus.unsubscribe(CommandRejected, handler)
        await bus.publish(CommandRejected(operation="next"))

        assert received == []

    async def test_failing_handler_is_logged_and_isolated(self, caplog):
        bus = EventBus()
        received = []

        async def broken(event):
            raise RuntimeError("boom")

        async def healthy(event):
            received.append(event)

        bus.subscribe(CommandRejected, broken)
        bus.subscribe(CommandRejected, healthy)

        with caplog.at_level(logging.ERROR):
            await bus.publish(CommandRejected(operation="next"))

        assert len(received) == 1
        assert any("boom" in record.getMessage() for record in caplog.records)

    async def test_clear(self):
        bus = EventBus()
        received = []

        async def handler(event):
            received.append(event)

        bus.subscribe(CommandRejected, handler)
        bus.clear()
        await bus.publish(CommandRejected(operation="next"))

        assert received == []


class TestEventBusSingleton:
    def test_get_returns_same_instance(self):
        assert get_event_bus() is get_event_bus()

    def test_reset_creates_new_instance(self):
        first = get_event_bus()
        reset_event_bus()
        assert get_event_bus() is not first
