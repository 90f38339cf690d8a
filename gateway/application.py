"""Application coordinator using dependency injection and event bus."""

import logging
from typing import Any

from .errors import GatewayError
from .event_bus import EventBus, Topics
from .models import LoginResult
from .notifications import UnauthorizedChannel
from .protocols import ILoginPrompt
from .request_gateway import RequestGateway

logger = logging.getLogger(__name__)

SESSION_EXPIRED_MESSAGE = "Session expired, please log in again"
LOGIN_FAILED_MESSAGE = "Login failed"


class Application:
    """Application coordinator with dependency injection.

    Owns the reaction to session changes: whenever the gateway broadcasts
    that the session is gone, the login prompt is shown. UI widgets never
    talk to the token store themselves.
    """

    def __init__(
        self,
        gateway: RequestGateway,
        channel: UnauthorizedChannel,
        event_bus: EventBus,
        login_prompt: ILoginPrompt
    ):
        """Initialize application with dependencies.

        Args:
            gateway: Request gateway
            channel: Unauthorized notification channel
            event_bus: Event bus for session events
            login_prompt: UI element that collects the password
        """
        self.gateway = gateway
        self.channel = channel
        self.event_bus = event_bus
        self.login_prompt = login_prompt

        self._subscribe_to_events()

    def _subscribe_to_events(self) -> None:
        """Subscribe to event bus topics."""
        self.channel.subscribe(self._handle_unauthorized)
        self.event_bus.subscribe(Topics.AUTH_LOGGED_IN, self._handle_logged_in)

        logger.debug("Subscribed to session events")

    def _unsubscribe_from_events(self) -> None:
        self.channel.unsubscribe(self._handle_unauthorized)
        self.event_bus.unsubscribe(Topics.AUTH_LOGGED_IN, self._handle_logged_in)

    # Event handlers

    def _handle_unauthorized(self) -> None:
        """Session rejected by the server - ask for the password again."""
        logger.info("Session no longer valid, showing login")
        self.login_prompt.show_login(SESSION_EXPIRED_MESSAGE)

    def _handle_logged_in(self, data: None) -> None:
        """Login succeeded - dismiss the prompt.

        Args:
            data: Unused
        """
        self.login_prompt.hide_login()

    # Session flow

    async def check_session(self) -> Any:
        """Ask the device whether the current session is still valid.

        Uses the status endpoint, which does not trigger the unauthorized
        broadcast, so polling here never loops back into ``_handle_unauthorized``.

        Returns:
            The status body, or None if the device could not be queried.
        """
        try:
            status = await self.gateway.status()
        except GatewayError as e:
            logger.error(f"Could not query session status: {e}")
            self.login_prompt.show_login(str(e))
            return None

        if not isinstance(status, dict):
            logger.warning(f"Unexpected status response: {status!r}")
            return status

        if status.get("auth_required", True) and not status.get("logged_in", False):
            logger.info("Not logged in")
            self.gateway.discard_session()
            self.login_prompt.show_login()

        return status

    async def submit_password(self, password: str) -> LoginResult:
        """Try to log in and keep the prompt up with a message on failure."""
        try:
            result = await self.gateway.login(password)
        except GatewayError as e:
            logger.error(f"Login request failed: {e}")
            self.login_prompt.show_login(str(e))
            return LoginResult(succeeded=False, body=None)

        if not result.succeeded:
            self.login_prompt.show_login(result.message or LOGIN_FAILED_MESSAGE)
        elif not result.token:
            # No token came back, so AUTH_LOGGED_IN was not published
            self.login_prompt.hide_login()
        return result

    async def sign_out(self) -> None:
        """Log out and show the login prompt, even if the server is unreachable."""
        try:
            await self.gateway.logout()
        except GatewayError as e:
            logger.warning(f"Server-side logout failed: {e}")
        self.login_prompt.show_login()

    async def shutdown(self) -> None:
        """Detach from session events and close network resources."""
        logger.info("Shutting down...")
        self._unsubscribe_from_events()
        await self.gateway.close()
        logger.info("Shutdown complete")
