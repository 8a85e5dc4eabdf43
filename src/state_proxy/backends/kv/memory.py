"""In-memory key-value storage."""

import asyncio
from typing import Any

from state_proxy.exceptions import StoreConnectionError
from state_proxy.protocols import Failed, Found, NotFound, Ok


class MemoryStateStore:
    """In-memory state store.

    Suitable for development and testing. Data is lost on restart.
    Closing the store simulates a severed connection: every later
    operation fails until ``reopen()`` is called.
    """

    def __init__(self, **kwargs: Any) -> None:
        """Initialize memory store.

        Args:
            **kwargs: Ignored (for compatibility with other backends)
        """
        self._data: dict[str, str] = {}
        self._lock = asyncio.Lock()
        self._closed = False

    def _unavailable(self) -> Failed:
        return Failed(StoreConnectionError("memory store is closed"))

    async def connect(self) -> None:
        """Check reachability."""
        if self._closed:
            raise StoreConnectionError("memory store is closed")

    async def ping(self) -> Ok | Failed:
        """Check reachability."""
        if self._closed:
            return self._unavailable()
        return Ok()

    async def get(self, key: str) -> Found | NotFound | Failed:
        """Get a value by key."""
        if self._closed:
            return self._unavailable()
        async with self._lock:
            value = self._data.get(key)
        if value is None:
            return NotFound()
        return Found(value)

    async def set(self, key: str, value: str) -> Ok | Failed:
        """Set a value, replacing any previous one."""
        if self._closed:
            return self._unavailable()
        async with self._lock:
            self._data[key] = value
        return Ok()

    async def close(self) -> None:
        """Mark the store closed. Stored data is kept."""
        self._closed = True

    def reopen(self) -> None:
        """Make a closed store available again."""
        self._closed = False

    async def clear(self) -> None:
        """Clear all data. Useful for testing."""
        async with self._lock:
            self._data.clear()
