"""Session-aware request gateway for the device management API."""

import asyncio
import json
import logging
from typing import Any

import aiohttp

from .api_endpoints import (
    ENDPOINT_AUTH_LOGIN,
    ENDPOINT_AUTH_LOGOUT,
    ENDPOINT_AUTH_PASSWORD,
    ENDPOINT_AUTH_STATUS,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    CONTENT_TYPE_JSON,
    BEARER_PREFIX,
)
from .errors import Unauthorized, HttpError, NetworkFailure, MalformedResponse
from .event_bus import EventBus, Topics
from .models import RequestDescriptor, LoginResult
from .protocols import ITokenStore, INotificationChannel

logger = logging.getLogger(__name__)


def _is_success(status: int) -> bool:
    return 200 <= status < 300


class RequestGateway:
    """Attaches the session token to outbound calls and reacts to 401s.

    Two call styles are offered on purpose:

    - ``request()`` parses the JSON body and raises on any failure.
    - ``raw_fetch()`` hands back the unread response and never raises for
      an HTTP status.

    Both clear the token and broadcast on the unauthorized channel when the
    server answers 401.
    """

    def __init__(
        self,
        token_store: ITokenStore,
        channel: INotificationChannel,
        base_url: str = "",
        event_bus: EventBus | None = None
    ):
        """Initialize the gateway.

        Args:
            token_store: Holder of the session token
            channel: Channel notified when the server rejects the token
            base_url: Prefix for every request path (e.g. "http://192.168.0.1")
            event_bus: Optional EventBus. If provided, login and logout are
                      published as AUTH_LOGGED_IN / AUTH_LOGGED_OUT.
        """
        self._token_store = token_store
        self._channel = channel
        self._base_url = base_url.rstrip("/")
        self._event_bus = event_bus

        self._http_session: aiohttp.ClientSession | None = None

    @property
    def base_url(self) -> str:
        """Get the base URL."""
        return self._base_url

    @property
    def token_store(self) -> ITokenStore:
        """Get the token store."""
        return self._token_store

    def is_authenticated(self) -> bool:
        """Check whether a session token is present."""
        return self._token_store.is_authenticated()

    # =====================
    # Transport
    # =====================

    async def _ensure_http_session(self) -> aiohttp.ClientSession:
        """Ensure HTTP session exists."""
        if self._http_session is None or self._http_session.closed:
            self._http_session = aiohttp.ClientSession()
        return self._http_session

    def _build_headers(
        self,
        overrides: dict[str, str] | None,
        with_content_type: bool = True
    ) -> dict[str, str]:
        """Merge default, caller and authorization headers, in that order."""
        headers: dict[str, str] = {}
        if with_content_type:
            headers[HEADER_CONTENT_TYPE] = CONTENT_TYPE_JSON
        if overrides:
            headers.update(overrides)

        # Authorization is owned by the gateway; callers cannot supply their own
        for name in [h for h in headers if h.lower() == HEADER_AUTHORIZATION.lower()]:
            del headers[name]

        token = self._token_store.get()
        if token:
            headers[HEADER_AUTHORIZATION] = f"{BEARER_PREFIX}{token}"
        return headers

    @staticmethod
    def _encode_body(body: Any) -> str | bytes | None:
        if body is None or isinstance(body, (str, bytes)):
            return body
        return json.dumps(body)

    async def _send(
        self,
        method: str,
        path: str,
        headers: dict[str, str],
        body: Any = None
    ) -> aiohttp.ClientResponse:
        """Issue exactly one HTTP call."""
        session = await self._ensure_http_session()
        url = f"{self._base_url}{path}"
        try:
            return await session.request(method, url, headers=headers, data=self._encode_body(body))
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Network failure: {method} {path}: {e}")
            raise NetworkFailure(f"{method} {path} failed: {e}") from e

    @staticmethod
    async def _read_json(response: aiohttp.ClientResponse) -> Any:
        try:
            return await response.json(content_type=None)
        except ValueError as e:
            raise MalformedResponse(f"Invalid JSON from {response.url}: {e}") from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise NetworkFailure(f"Failed reading body from {response.url}: {e}") from e

    def _handle_unauthorized(self, method: str, path: str) -> None:
        """Drop the rejected token and tell whoever is listening."""
        logger.warning(f"Server rejected session token: {method} {path}")
        self._token_store.clear()
        self._channel.notify()

    def _publish(self, topic: str) -> None:
        if self._event_bus:
            self._event_bus.publish(topic)

    # =====================
    # Call styles
    # =====================

    async def request(
        self,
        path: str,
        method: str = "GET",
        headers: dict[str, str] | None = None,
        body: Any = None
    ) -> Any:
        """
        Perform an authenticated call and return the parsed JSON body.

        Args:
            path: Path appended to the base URL
            method: HTTP verb
            headers: Header overrides, applied over the JSON content type
            body: Request body; str/bytes are sent as-is, anything else JSON-encoded

        Returns:
            Parsed JSON body.

        Raises:
            Unauthorized: Server answered 401 (token already cleared and broadcast sent)
            HttpError: Any other non-2xx status
            NetworkFailure: Transport failure
            MalformedResponse: Body is not valid JSON
        """
        request_headers = self._build_headers(headers)
        response = await self._send(method, path, request_headers, body)
        try:
            if response.status == 401:
                self._handle_unauthorized(method, path)
                raise Unauthorized()

            if not _is_success(response.status):
                logger.error(f"Request failed: {method} {path} -> {response.status}")
                raise HttpError(response.status)

            return await self._read_json(response)
        finally:
            response.release()

    async def execute(self, descriptor: RequestDescriptor) -> Any:
        """Run a prepared request descriptor through ``request()``."""
        return await self.request(
            descriptor.path,
            method=descriptor.method,
            headers=descriptor.headers,
            body=descriptor.body,
        )

    async def raw_fetch(
        self,
        path: str,
        method: str = "GET",
        headers: dict[str, str] | None = None,
        body: Any = None
    ) -> aiohttp.ClientResponse:
        """
        Perform an authenticated call and return the unread response.

        No default Content-Type is added and the body is never parsed. A 401
        still clears the token and broadcasts, but the response is returned
        rather than raised. The caller must release the response, e.g. with
        ``async with response:``.

        Raises:
            NetworkFailure: Transport failure
        """
        request_headers = self._build_headers(headers, with_content_type=False)
        response = await self._send(method, path, request_headers, body)
        if response.status == 401:
            self._handle_unauthorized(method, path)
        return response

    # =====================
    # Session
    # =====================

    async def login(self, password: str) -> LoginResult:
        """
        Log in with the device password.

        Never raises for an HTTP status: a rejected password comes back as
        ``LoginResult(succeeded=False, body=...)`` so a form can render it.

        Raises:
            NetworkFailure: Transport failure
            MalformedResponse: Body is not valid JSON
        """
        headers = {HEADER_CONTENT_TYPE: CONTENT_TYPE_JSON}
        response = await self._send("POST", ENDPOINT_AUTH_LOGIN, headers, {"password": password})
        try:
            body = await self._read_json(response)
        finally:
            response.release()

        result = LoginResult(succeeded=_is_success(response.status), body=body)

        if result.succeeded and result.token:
            self._token_store.set(result.token)
            logger.info("Logged in")
            self._publish(Topics.AUTH_LOGGED_IN)
        elif not result.succeeded:
            logger.warning(f"Login rejected: {response.status}")

        return result

    async def logout(self) -> Any:
        """Log out on the server, then drop the local token on every exit path."""
        try:
            return await self.request(ENDPOINT_AUTH_LOGOUT, method="POST")
        finally:
            self._token_store.clear()
            logger.info("Logged out")
            self._publish(Topics.AUTH_LOGGED_OUT)

    def discard_session(self) -> None:
        """Drop the local token without contacting the server or broadcasting.

        Used when the status endpoint reports the session is already gone.
        """
        self._token_store.clear()
        logger.info("Local session discarded")

    async def change_password(self, old_password: str, new_password: str) -> Any:
        """Change the device password."""
        return await self.request(
            ENDPOINT_AUTH_PASSWORD,
            method="POST",
            body={"old_password": old_password, "new_password": new_password},
        )

    async def status(self) -> Any:
        """
        Query the session status without 401 interception.

        Returns whatever the server sends, normally
        ``{"logged_in": bool, "auth_required": bool}``. Polling this never
        clears the token or triggers an unauthorized broadcast.

        Raises:
            NetworkFailure: Transport failure
            MalformedResponse: Body is not valid JSON
        """
        headers = self._build_headers(None, with_content_type=False)
        response = await self._send("GET", ENDPOINT_AUTH_STATUS, headers)
        try:
            return await self._read_json(response)
        finally:
            response.release()

    # =====================
    # Cleanup
    # =====================

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._http_session and not self._http_session.closed:
            await self._http_session.close()
            self._http_session = None

        logger.info("Request gateway closed")
