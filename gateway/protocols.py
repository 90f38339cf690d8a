"""Protocol definitions for dependency injection.

Defines interfaces for core components to enable loose coupling and testability.
"""

from typing import Protocol, Callable, runtime_checkable


@runtime_checkable
class IKeyValueStorage(Protocol):
    """Interface for string key-value persistence."""

    def get_item(self, key: str) -> str | None:
        """Get a stored value, or None if the key is absent."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store a value under a key."""
        ...

    def remove_item(self, key: str) -> None:
        """Remove a key. No-op if absent."""
        ...


@runtime_checkable
class ITokenStore(Protocol):
    """Interface for the session token slot."""

    def get(self) -> str | None:
        """Get the current token."""
        ...

    def set(self, token: str) -> None:
        """Overwrite the current token."""
        ...

    def clear(self) -> None:
        """Remove the current token."""
        ...

    def is_authenticated(self) -> bool:
        """Check whether a token is present."""
        ...


@runtime_checkable
class INotificationChannel(Protocol):
    """Interface for the payload-less unauthorized broadcast."""

    def notify(self) -> None:
        """Broadcast to all current subscribers."""
        ...

    def subscribe(self, handler: Callable[[], None]) -> None:
        """Register a handler."""
        ...

    def unsubscribe(self, handler: Callable[[], None]) -> None:
        """Deregister a handler."""
        ...


@runtime_checkable
class ILoginPrompt(Protocol):
    """Interface for the UI element that collects the password."""

    def show_login(self, message: str | None = None) -> None:
        """Show the login prompt, optionally with a message."""
        ...

    def hide_login(self) -> None:
        """Hide the login prompt."""
        ...
