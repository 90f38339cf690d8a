"""Dependency injection container for managing component lifecycles."""

import logging
from pathlib import Path
from typing import Any, Callable

from .config_manager import ConfigManager
from .constants import CONFIG_FILENAME, DEFAULT_TOKEN_FILENAME
from .endpoints import DeviceApi
from .event_bus import EventBus
from .notifications import UnauthorizedChannel
from .paths import get_data_dir
from .request_gateway import RequestGateway
from .storage import JsonFileStorage
from .token_store import TokenStore

logger = logging.getLogger(__name__)


class DIContainer:
    """Simple dependency injection container.

    Manages singleton instances and factory functions for creating components.
    """

    def __init__(self):
        self._singletons: dict[str, Any] = {}
        self._factories: dict[str, Callable[[], Any]] = {}

    def register_singleton(self, name: str, instance: Any) -> None:
        """Register a singleton instance.

        Args:
            name: Component name
            instance: Component instance
        """
        self._singletons[name] = instance
        logger.debug(f"Registered singleton: {name}")

    def register_factory(self, name: str, factory: Callable[[], Any]) -> None:
        """Register a factory function.

        Args:
            name: Component name
            factory: Factory function that creates the component
        """
        self._factories[name] = factory
        logger.debug(f"Registered factory: {name}")

    def get(self, name: str) -> Any:
        """Get a component by name.

        Args:
            name: Component name

        Returns:
            Component instance

        Raises:
            KeyError: If component not found
        """
        # Try singleton first
        if name in self._singletons:
            return self._singletons[name]

        # Try factory
        if name in self._factories:
            instance = self._factories[name]()
            # Cache singleton after creation
            self._singletons[name] = instance
            return instance

        raise KeyError(f"Component '{name}' not found in container")

    def has(self, name: str) -> bool:
        """Check if component exists.

        Args:
            name: Component name

        Returns:
            True if component is registered
        """
        return name in self._singletons or name in self._factories


class ContainerBuilder:
    """Builder for configuring the DI container."""

    @staticmethod
    def build_container(data_dir: Path | None = None) -> DIContainer:
        """Build and configure the DI container.

        Args:
            data_dir: Directory for config and session files.
                      Defaults to the platform user data directory.

        Returns:
            Configured DI container
        """
        container = DIContainer()

        if data_dir is None:
            data_dir = get_data_dir()
        container.register_singleton("data_dir", data_dir)

        # EventBus is shared by the channel and the gateway
        event_bus = EventBus()
        container.register_singleton("event_bus", event_bus)

        def create_config_manager() -> ConfigManager:
            config_manager = ConfigManager(data_dir / CONFIG_FILENAME)
            config_manager.load()

            # Set log level from config
            log_level = config_manager.get("log_level", "INFO")
            logging.getLogger().setLevel(getattr(logging, log_level, logging.INFO))

            return config_manager

        container.register_factory("config_manager", create_config_manager)

        def create_token_store() -> TokenStore:
            config_manager = container.get("config_manager")
            token_path = config_manager.token_file or data_dir / DEFAULT_TOKEN_FILENAME
            logger.info(f"Session file: {token_path}")
            return TokenStore(JsonFileStorage(token_path))

        container.register_factory("token_store", create_token_store)

        def create_unauthorized_channel() -> UnauthorizedChannel:
            return UnauthorizedChannel(event_bus)

        container.register_factory("unauthorized_channel", create_unauthorized_channel)

        def create_gateway() -> RequestGateway:
            config_manager = container.get("config_manager")
            return RequestGateway(
                token_store=container.get("token_store"),
                channel=container.get("unauthorized_channel"),
                base_url=config_manager.get("server_url", ""),
                event_bus=event_bus
            )

        container.register_factory("gateway", create_gateway)

        def create_device_api() -> DeviceApi:
            return DeviceApi(container.get("gateway"))

        container.register_factory("device_api", create_device_api)

        logger.info("DI container configured")
        return container
