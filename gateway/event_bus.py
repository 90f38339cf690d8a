"""Event bus for pub/sub communication between components.

Lets the gateway announce session changes without knowing who listens.
"""

import logging
from typing import Any, Callable


logger = logging.getLogger(__name__)


class Topics:
    """Event topic constants."""

    # Session events
    AUTH_REQUIRED = "auth.required"
    AUTH_LOGGED_IN = "auth.logged_in"
    AUTH_LOGGED_OUT = "auth.logged_out"


class EventBus:
    """
    Simple synchronous pub/sub event bus for decoupled communication.

    Delivery is best-effort: a failing handler is logged and the remaining
    handlers still run. Nothing is queued for late subscribers.
    """

    def __init__(self):
        self._handlers: dict[str, list[Callable]] = {}

    def subscribe(self, topic: str, handler: Callable[[Any], None]) -> None:
        """
        Subscribe a handler to a topic.

        Args:
            topic: Event topic to subscribe to
            handler: Function to call with the event data when published
        """
        if topic not in self._handlers:
            self._handlers[topic] = []

        self._handlers[topic].append(handler)
        logger.debug(f"Subscribed handler to topic: {topic}")

    def unsubscribe(self, topic: str, handler: Callable) -> None:
        """
        Unsubscribe a handler from a topic.

        Args:
            topic: Event topic to unsubscribe from
            handler: Handler to remove
        """
        if topic in self._handlers:
            try:
                self._handlers[topic].remove(handler)
                logger.debug(f"Unsubscribed handler from topic: {topic}")
            except ValueError:
                pass

    def publish(self, topic: str, data: Any = None) -> None:
        """
        Publish an event to all current subscribers.

        Args:
            topic: Event topic
            data: Event data to pass to handlers
        """
        if topic not in self._handlers:
            return

        logger.debug(f"Publishing to topic: {topic}")

        # Snapshot so handlers may unsubscribe themselves while being called
        for handler in list(self._handlers[topic]):
            try:
                handler(data)
            except Exception as e:
                logger.error(f"Error in handler for topic '{topic}': {e}")

    def clear(self, topic: str | None = None) -> None:
        """
        Clear all handlers for a topic, or all topics if topic is None.

        Args:
            topic: Topic to clear, or None to clear all
        """
        if topic is None:
            self._handlers.clear()
            logger.debug("Cleared all event handlers")
        else:
            self._handlers.pop(topic, None)
            logger.debug(f"Cleared handlers for topic: {topic}")

    def get_subscriber_count(self, topic: str) -> int:
        """
        Get the number of subscribers for a topic.

        Args:
            topic: Topic to check

        Returns:
            Number of subscribers
        """
        return len(self._handlers.get(topic, []))

    def get_all_topics(self) -> list[str]:
        """
        Get all topics with subscribers.

        Returns:
            List of topic names
        """
        return sorted(topic for topic, handlers in self._handlers.items() if handlers)
