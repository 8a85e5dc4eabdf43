"""StateStore protocol and store outcome variants."""

from dataclasses import dataclass
from typing import Protocol, Union, runtime_checkable


@dataclass(frozen=True)
class Ok:
    """A ping or write succeeded."""


@dataclass(frozen=True)
class Found:
    """A lookup found the key."""

    value: str


@dataclass(frozen=True)
class NotFound:
    """A lookup found no value for the key."""


@dataclass(frozen=True)
class Failed:
    """The store could not complete the operation."""

    error: Exception


StoreResult = Union[Ok, Found, NotFound, Failed]


@runtime_checkable
class StateStore(Protocol):
    """Protocol for the external key-value store (Redis, in-memory).

    Per-request operations report failures as ``Failed`` instead of raising.
    """

    async def connect(self) -> None:
        """Check reachability once at startup.

        Raises:
            StoreConnectionError: If the store cannot be reached
        """
        ...

    async def ping(self) -> Ok | Failed:
        """Check reachability without touching any keys."""
        ...

    async def get(self, key: str) -> Found | NotFound | Failed:
        """Look up a key."""
        ...

    async def set(self, key: str, value: str) -> Ok | Failed:
        """Store a value, overwriting any previous one."""
        ...

    async def close(self) -> None:
        """Release the connection."""
        ...
