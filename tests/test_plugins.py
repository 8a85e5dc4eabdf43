"""Tests for backend plugin discovery."""

import pytest

from state_proxy.backends.kv.memory import MemoryStateStore
from state_proxy.backends.kv.redis import RedisStateStore
from state_proxy.exceptions import BackendNotFoundError, ConfigError
from state_proxy.plugins import create_state_store, discover_backends, get_backend


class TestPlugins:
    """Tests for entry-point backend lookup."""

    def test_discovers_builtin_backends(self) -> None:
        """Both bundled backends are registered."""
        backends = discover_backends("kv")

        assert backends["memory"] is MemoryStateStore
        assert backends["redis"] is RedisStateStore

    def test_get_backend(self) -> None:
        """Looks up a backend class by name."""
        assert get_backend("kv", "memory") is MemoryStateStore

    def test_unknown_backend(self) -> None:
        """Unknown backend names list what is available."""
        with pytest.raises(BackendNotFoundError, match="memory"):
            get_backend("kv", "etcd")

    def test_unknown_backend_is_config_error(self) -> None:
        """Unknown backends are reported as configuration errors."""
        with pytest.raises(ConfigError):
            create_state_store("etcd")

    def test_create_state_store(self) -> None:
        """Creates a store, passing through backend settings."""
        store = create_state_store("redis", host="redis.internal", port=6380)

        assert isinstance(store, RedisStateStore)
        assert store.port == 6380
