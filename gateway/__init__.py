"""Session-aware request gateway for the device dashboard."""

from .errors import (
    GatewayError,
    Unauthorized,
    HttpError,
    NetworkFailure,
    MalformedResponse,
)
from .event_bus import EventBus, Topics
from .models import RequestDescriptor, LoginResult
from .notifications import UnauthorizedChannel
from .storage import MemoryStorage, JsonFileStorage
from .token_store import TokenStore
from .request_gateway import RequestGateway
from .endpoints import DeviceApi
from .config_manager import ConfigManager

__all__ = [
    "GatewayError",
    "Unauthorized",
    "HttpError",
    "NetworkFailure",
    "MalformedResponse",
    "EventBus",
    "Topics",
    "RequestDescriptor",
    "LoginResult",
    "UnauthorizedChannel",
    "MemoryStorage",
    "JsonFileStorage",
    "TokenStore",
    "RequestGateway",
    "DeviceApi",
    "ConfigManager",
]
