"""Redis storage backend."""

from typing import Any

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from state_proxy.exceptions import ConfigError, StoreConnectionError
from state_proxy.observability import get_logger
from state_proxy.protocols import Failed, Found, NotFound, Ok

logger = get_logger(__name__)

# Errors that mean "the store call failed", as opposed to a bug in this process.
# Values written by other clients may not decode as UTF-8.
STORE_ERRORS = (RedisError, OSError, UnicodeDecodeError)


class RedisStateStore:
    """Redis storage backend.

    Wraps a single ``redis.asyncio.Redis`` client. The client owns a
    connection pool, so one instance is shared by all concurrent requests
    without extra locking.
    """

    def __init__(
        self,
        host: str | None = None,
        port: int = 6379,
        db: int = 0,
        socket_timeout: float | None = None,
        socket_connect_timeout: float | None = None,
        client: Any = None,
        **kwargs: Any,
    ) -> None:
        """Initialize Redis store.

        Args:
            host: Redis hostname
            port: Redis port
            db: Redis database number
            socket_timeout: Read/write timeout in seconds (client default if None)
            socket_connect_timeout: Connect timeout in seconds (client default if None)
            client: Pre-built asyncio Redis client, used instead of host/port
            **kwargs: Ignored
        """
        if client is None:
            if not host:
                raise ConfigError("RedisStateStore requires a host")
            client = aioredis.Redis(
                host=host,
                port=port,
                db=db,
                socket_timeout=socket_timeout,
                socket_connect_timeout=socket_connect_timeout,
                decode_responses=True,
            )
        self.host = host
        self.port = port
        self._client = client

    async def connect(self) -> None:
        """Ping Redis once, raising if it cannot be reached."""
        result = await self.ping()
        if isinstance(result, Failed):
            raise StoreConnectionError(
                f"Failed to connect to store at {self.host}:{self.port}: {result.error}"
            ) from result.error
        logger.info("Connected to store", context={"host": self.host, "port": self.port})

    async def ping(self) -> Ok | Failed:
        """Check reachability."""
        try:
            await self._client.ping()
        except STORE_ERRORS as e:
            return Failed(e)
        return Ok()

    async def get(self, key: str) -> Found | NotFound | Failed:
        """Get a value by key."""
        try:
            value = await self._client.get(key)
        except STORE_ERRORS as e:
            return Failed(e)
        if value is None:
            return NotFound()
        return Found(value)

    async def set(self, key: str, value: str) -> Ok | Failed:
        """Set a value with no expiry, overwriting any previous one."""
        try:
            await self._client.set(key, value)
        except STORE_ERRORS as e:
            return Failed(e)
        return Ok()

    async def close(self) -> None:
        """Close the client and its connection pool."""
        await self._client.aclose()
