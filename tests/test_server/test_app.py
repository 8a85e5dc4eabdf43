"""Tests for the ASGI application lifecycle."""

import asyncio
from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError
from starlette.testclient import TestClient

from state_proxy.backends.kv.memory import MemoryStateStore
from state_proxy.backends.kv.redis import RedisStateStore
from state_proxy.exceptions import StoreConnectionError
from state_proxy.server.app import create_app


class TestLifespan:
    """Tests for startup and shutdown."""

    def test_startup_checks_store(self) -> None:
        """Startup pings the store once."""
        redis_client = AsyncMock()
        store = RedisStateStore(host="redis.internal", client=redis_client)

        with TestClient(create_app(store)):
            redis_client.ping.assert_awaited_once()

    def test_startup_fails_when_store_unreachable(self) -> None:
        """An unreachable store aborts startup."""
        redis_client = AsyncMock()
        redis_client.ping.side_effect = RedisConnectionError("connection refused")
        store = RedisStateStore(host="redis.internal", client=redis_client)

        with pytest.raises(StoreConnectionError):
            with TestClient(create_app(store)):
                pass

    def test_startup_failure_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """The fatal startup error is logged at CRITICAL."""
        store = MemoryStateStore()
        asyncio.run(store.close())

        with pytest.raises(StoreConnectionError):
            with TestClient(create_app(store)):
                pass

        assert any(
            r.levelname == "CRITICAL" and r.getMessage() == "Failed to connect to store"
            for r in caplog.records
        )

    def test_shutdown_closes_store(self) -> None:
        """The store is closed when the app shuts down."""
        redis_client = AsyncMock()
        store = RedisStateStore(host="redis.internal", client=redis_client)

        with TestClient(create_app(store)):
            redis_client.aclose.assert_not_awaited()
        redis_client.aclose.assert_awaited_once()

    def test_skip_store_check(self) -> None:
        """check_store=False starts without pinging."""
        redis_client = AsyncMock()
        store = RedisStateStore(host="redis.internal", client=redis_client)

        with TestClient(create_app(store, check_store=False)):
            redis_client.ping.assert_not_awaited()
