"""Unauthorized notification channel on top of the event bus."""

import logging
from typing import Any, Callable

from .event_bus import EventBus, Topics

logger = logging.getLogger(__name__)


class UnauthorizedChannel:
    """Broadcasts that the current session is no longer valid.

    Handlers take no arguments. Every ``notify()`` calls each current
    subscriber once, synchronously; subscribers that arrive later never see
    earlier notifications.
    """

    def __init__(self, event_bus: EventBus | None = None):
        self._event_bus = event_bus or EventBus()
        # handler -> bus-facing wrapper, so unsubscribe can find the wrapper
        self._wrappers: dict[Callable[[], None], Callable[[Any], None]] = {}

    @property
    def event_bus(self) -> EventBus:
        """Underlying event bus."""
        return self._event_bus

    @property
    def subscriber_count(self) -> int:
        """Number of registered handlers."""
        return len(self._wrappers)

    def subscribe(self, handler: Callable[[], None]) -> None:
        """Register a handler. Registering the same handler twice is a no-op."""
        if handler in self._wrappers:
            return

        def wrapper(_data: Any) -> None:
            handler()

        self._wrappers[handler] = wrapper
        self._event_bus.subscribe(Topics.AUTH_REQUIRED, wrapper)

    def unsubscribe(self, handler: Callable[[], None]) -> None:
        """Deregister a handler. Unknown handlers are ignored."""
        wrapper = self._wrappers.pop(handler, None)
        if wrapper is not None:
            self._event_bus.unsubscribe(Topics.AUTH_REQUIRED, wrapper)

    def notify(self) -> None:
        """Broadcast to every current subscriber."""
        logger.debug(f"Broadcasting unauthorized notification to {self.subscriber_count} subscriber(s)")
        self._event_bus.publish(Topics.AUTH_REQUIRED)
