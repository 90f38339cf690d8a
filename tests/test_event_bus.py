"""Tests for event bus."""

import pytest
from unittest.mock import MagicMock

from gateway.event_bus import EventBus, Topics


class TestEventBusInit:
    """Tests for EventBus initialization."""

    def test_init(self):
        bus = EventBus()
        assert bus._handlers == {}


class TestSubscribe:
    """Tests for subscription."""

    def test_subscribe_handler(self):
        bus = EventBus()
        handler = MagicMock()

        bus.subscribe("test.topic", handler)

        assert "test.topic" in bus._handlers
        assert handler in bus._handlers["test.topic"]

    def test_subscribe_multiple_handlers(self):
        bus = EventBus()
        handler1 = MagicMock()
        handler2 = MagicMock()

        bus.subscribe("test.topic", handler1)
        bus.subscribe("test.topic", handler2)

        assert len(bus._handlers["test.topic"]) == 2

    def test_subscribe_different_topics(self):
        bus = EventBus()
        handler1 = MagicMock()
        handler2 = MagicMock()

        bus.subscribe("topic1", handler1)
        bus.subscribe("topic2", handler2)

        assert handler1 in bus._handlers["topic1"]
        assert handler2 in bus._handlers["topic2"]


class TestUnsubscribe:
    """Tests for unsubscription."""

    def test_unsubscribe_handler(self):
        bus = EventBus()
        handler = MagicMock()

        bus.subscribe("test.topic", handler)
        bus.unsubscribe("test.topic", handler)

        assert handler not in bus._handlers.get("test.topic", [])

    def test_unsubscribe_nonexistent_handler(self):
        bus = EventBus()

        # Should not raise error
        bus.unsubscribe("test.topic", MagicMock())

    def test_unsubscribe_unknown_handler_on_known_topic(self):
        bus = EventBus()
        bus.subscribe("test.topic", MagicMock())

        bus.unsubscribe("test.topic", MagicMock())

        assert bus.get_subscriber_count("test.topic") == 1


class TestPublish:
    """Tests for publishing."""

    def test_publish_calls_handler(self):
        bus = EventBus()
        handler = MagicMock()
        bus.subscribe("test.topic", handler)

        bus.publish("test.topic", {"key": "value"})

        handler.assert_called_once_with({"key": "value"})

    def test_publish_default_data_is_none(self):
        bus = EventBus()
        handler = MagicMock()
        bus.subscribe(Topics.AUTH_REQUIRED, handler)

        bus.publish(Topics.AUTH_REQUIRED)

        handler.assert_called_once_with(None)

    def test_publish_calls_all_handlers(self):
        bus = EventBus()
        handler1 = MagicMock()
        handler2 = MagicMock()
        bus.subscribe("test.topic", handler1)
        bus.subscribe("test.topic", handler2)

        bus.publish("test.topic", "data")

        handler1.assert_called_once_with("data")
        handler2.assert_called_once_with("data")

    def test_publish_no_subscribers(self):
        bus = EventBus()

        # Should not raise error
        bus.publish("nonexistent.topic", "data")

    def test_publish_only_to_topic(self):
        bus = EventBus()
        handler1 = MagicMock()
        handler2 = MagicMock()
        bus.subscribe("topic1", handler1)
        bus.subscribe("topic2", handler2)

        bus.publish("topic1", "data")

        handler1.assert_called_once_with("data")
        handler2.assert_not_called()

    def test_publish_handles_exception(self):
        """Test a failing handler does not stop the others."""
        bus = EventBus()
        handler1 = MagicMock(side_effect=Exception("Handler error"))
        handler2 = MagicMock()
        bus.subscribe("test.topic", handler1)
        bus.subscribe("test.topic", handler2)

        bus.publish("test.topic", "data")

        handler1.assert_called_once()
        handler2.assert_called_once_with("data")

    def test_handler_may_unsubscribe_itself(self):
        """Test a handler removing itself mid-publish does not skip others."""
        bus = EventBus()
        calls = []

        def once(data):
            calls.append("once")
            bus.unsubscribe("test.topic", once)

        def always(data):
            calls.append("always")

        bus.subscribe("test.topic", once)
        bus.subscribe("test.topic", always)

        bus.publish("test.topic")
        bus.publish("test.topic")

        assert calls == ["once", "always", "always"]


class TestClear:
    """Tests for clearing handlers."""

    def test_clear_topic(self):
        bus = EventBus()
        bus.subscribe("topic1", MagicMock())
        bus.subscribe("topic2", MagicMock())

        bus.clear("topic1")

        assert "topic1" not in bus._handlers
        assert "topic2" in bus._handlers

    def test_clear_all(self):
        bus = EventBus()
        bus.subscribe("topic1", MagicMock())
        bus.subscribe("topic2", MagicMock())

        bus.clear()

        assert bus._handlers == {}

    def test_clear_unknown_topic(self):
        EventBus().clear("missing")


class TestSubscriberCount:
    """Tests for subscriber counting and topic listing."""

    def test_get_subscriber_count(self):
        bus = EventBus()
        assert bus.get_subscriber_count("test.topic") == 0

        bus.subscribe("test.topic", MagicMock())
        bus.subscribe("test.topic", MagicMock())

        assert bus.get_subscriber_count("test.topic") == 2

    def test_get_all_topics(self):
        bus = EventBus()
        bus.subscribe("b.topic", MagicMock())
        bus.subscribe("a.topic", MagicMock())

        assert bus.get_all_topics() == ["a.topic", "b.topic"]

    def test_get_all_topics_skips_emptied_topics(self):
        bus = EventBus()
        handler = MagicMock()
        bus.subscribe("a.topic", handler)
        bus.unsubscribe("a.topic", handler)

        assert bus.get_all_topics() == []

