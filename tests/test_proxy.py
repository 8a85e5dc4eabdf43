"""Tests for the StateProxy application object and entry point."""

from unittest.mock import patch

import pytest
from starlette.applications import Starlette
from starlette.testclient import TestClient

from state_proxy.__main__ import main
from state_proxy.backends.kv.memory import MemoryStateStore
from state_proxy.backends.kv.redis import RedisStateStore
from state_proxy.config import Config
from state_proxy.proxy import StateProxy

ENV_VARS = (
    "STATE_PROXY_CONFIG",
    "SERVICE_PORT",
    "STORE_BACKEND",
    "STORE_HOST",
    "STORE_PORT",
    "STORE_DB",
    "REDIS_HOST",
    "REDIS_PORT",
    "LOG_LEVEL",
    "LOG_FORMAT",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every variable the proxy reads."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestStateProxy:
    """Tests for StateProxy."""

    def test_uses_injected_store(self) -> None:
        """An explicit store is used as-is."""
        store = MemoryStateStore()
        proxy = StateProxy(Config.from_env({"STORE_HOST": "unused"}), store=store)

        assert proxy.store is store

    def test_builds_store_from_config(self, sample_config_dict) -> None:
        """Without a store, the configured backend is created."""
        proxy = StateProxy.from_dict(sample_config_dict)

        assert isinstance(proxy.store, RedisStateStore)
        assert proxy.store.host == "redis.internal"
        assert proxy.store.port == 6380

    def test_from_env(self, clean_env) -> None:
        """from_env reads the process environment."""
        clean_env.setenv("STORE_BACKEND", "memory")

        proxy = StateProxy.from_env()

        assert isinstance(proxy.store, MemoryStateStore)

    def test_create_app_serves_requests(self) -> None:
        """The built app is wired to the proxy's store."""
        proxy = StateProxy.from_dict({"store": {"backend": "memory"}})
        app = proxy.create_app()

        assert isinstance(app, Starlette)
        with TestClient(app) as client:
            client.post("/state/foo/bar")
            assert client.get("/state/foo").text == "bar\n"

    def test_serve_runs_uvicorn(self) -> None:
        """serve() binds the configured port with uvicorn's access log off."""
        proxy = StateProxy.from_dict({
            "server": {"port": 8081},
            "store": {"backend": "memory"},
        })

        with patch("uvicorn.run") as run:
            proxy.serve()

        _, kwargs = run.call_args
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 8081
        assert kwargs["lifespan"] == "on"
        assert kwargs["access_log"] is False

    def test_serve_overrides(self) -> None:
        """Explicit host and port win over config."""
        proxy = StateProxy.from_dict({"store": {"backend": "memory"}})

        with patch("uvicorn.run") as run:
            proxy.serve(host="127.0.0.1", port=9000)

        _, kwargs = run.call_args
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 9000


class TestMain:
    """Tests for the command-line entry point."""

    def test_missing_store_host_exits(self, clean_env) -> None:
        """Startup aborts with a nonzero code without a store host."""
        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1

    def test_unknown_backend_exits(self, clean_env) -> None:
        """Unknown backends abort startup."""
        clean_env.setenv("STORE_BACKEND", "etcd")

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1

    def test_serves_with_env_config(self, clean_env) -> None:
        """Valid configuration starts the server on SERVICE_PORT."""
        clean_env.setenv("STORE_HOST", "redis.internal")
        clean_env.setenv("SERVICE_PORT", "8088")

        with patch("uvicorn.run") as run:
            main()

        _, kwargs = run.call_args
        assert kwargs["port"] == 8088
