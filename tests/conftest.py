"""Shared pytest fixtures for device dashboard tests."""

import pytest
from unittest.mock import MagicMock

from gateway.event_bus import EventBus
from gateway.notifications import UnauthorizedChannel
from gateway.request_gateway import RequestGateway
from gateway.storage import MemoryStorage
from gateway.token_store import TokenStore


BASE_URL = "http://device.test"


def url(path: str) -> str:
    """Absolute URL for a device API path."""
    return f"{BASE_URL}{path}"


def recorded_calls(mocked, method: str, path: str) -> list:
    """Requests recorded by aioresponses for a method and URL path."""
    return [
        call
        for (call_method, call_url), calls in mocked.requests.items()
        if call_method == method and call_url.path == path
        for call in calls
    ]


def sent_headers(mocked, method: str, path: str):
    """Headers of the last recorded request for a method and URL path."""
    calls = recorded_calls(mocked, method, path)
    assert calls, f"no {method} request to {path}"
    return calls[-1].kwargs["headers"]


@pytest.fixture
def event_bus():
    """Provide a fresh EventBus."""
    return EventBus()


@pytest.fixture
def token_store():
    """Provide an in-memory token store."""
    return TokenStore(MemoryStorage())


@pytest.fixture
def channel(event_bus):
    """Provide an unauthorized channel on the shared bus."""
    return UnauthorizedChannel(event_bus)


@pytest.fixture
def listener(channel):
    """Subscribe a mock handler to the unauthorized channel."""
    handler = MagicMock()
    channel.subscribe(handler)
    return handler


@pytest.fixture
def gateway(token_store, channel, event_bus):
    """Provide a gateway pointed at the fake device."""
    return RequestGateway(
        token_store=token_store,
        channel=channel,
        base_url=BASE_URL,
        event_bus=event_bus
    )
