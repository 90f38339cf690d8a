"""Exceptions raised by the request gateway."""


class GatewayError(Exception):
    """Base class for all gateway failures."""


class Unauthorized(GatewayError):
    """Server rejected the current credential (HTTP 401).

    By the time this is raised the token has been cleared and the
    unauthorized notification has been broadcast.
    """

    def __init__(self, message: str = "Unauthorized, please log in again"):
        super().__init__(message)


class HttpError(GatewayError):
    """Server answered with a non-2xx status other than 401."""

    def __init__(self, status: int):
        super().__init__(f"HTTP error: {status}")
        self.status = status


class NetworkFailure(GatewayError):
    """Transport-level failure (no connectivity, connection reset, ...)."""


class MalformedResponse(GatewayError):
    """Response body could not be parsed as JSON."""
