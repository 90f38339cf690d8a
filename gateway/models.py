"""Data models for gateway calls."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class RequestDescriptor:
    """One outbound call, built by a caller and consumed once by the gateway."""

    path: str                                      # Path appended to the base URL (e.g. "/api/info")
    method: str = "GET"                            # HTTP verb
    headers: dict[str, str] = field(default_factory=dict)
    body: Any = None                               # str/bytes sent as-is, anything else JSON-encoded


@dataclass
class LoginResult:
    """Outcome of a login attempt."""

    succeeded: bool
    body: Any = None

    @property
    def message(self) -> str | None:
        """Server-provided message, if the body carries one."""
        if isinstance(self.body, dict):
            message = self.body.get("message")
            return str(message) if message is not None else None
        return None

    @property
    def token(self) -> str | None:
        """Session token from the body, if the server issued one."""
        if isinstance(self.body, dict):
            return self.body.get("token") or None
        return None
