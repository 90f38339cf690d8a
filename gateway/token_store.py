"""Session token slot backed by key-value storage."""

import logging

from .constants import TOKEN_STORAGE_KEY
from .protocols import IKeyValueStorage

logger = logging.getLogger(__name__)


class TokenStore:
    """Holds at most one session token.

    The storage key is owned by this class; nothing else should read or
    write it directly.
    """

    def __init__(self, storage: IKeyValueStorage, key: str = TOKEN_STORAGE_KEY):
        self._storage = storage
        self._key = key

    @property
    def key(self) -> str:
        """Storage key the token lives under."""
        return self._key

    def get(self) -> str | None:
        """Get the current token, or None if there is none."""
        return self._storage.get_item(self._key) or None

    def set(self, token: str) -> None:
        """Overwrite the current token."""
        self._storage.set_item(self._key, token)
        logger.debug("Session token stored")

    def clear(self) -> None:
        """Remove the current token. Safe to call when already empty."""
        self._storage.remove_item(self._key)
        logger.debug("Session token cleared")

    def is_authenticated(self) -> bool:
        """Check whether a token is present."""
        return self.get() is not None
