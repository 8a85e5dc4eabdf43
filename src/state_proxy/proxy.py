"""StateProxy application object."""

from pathlib import Path
from typing import Any

from starlette.applications import Starlette

from state_proxy.config import Config
from state_proxy.observability import get_logger
from state_proxy.plugins import create_state_store
from state_proxy.protocols import StateStore
from state_proxy.server.app import create_app

logger = get_logger(__name__)


class StateProxy:
    """HTTP proxy in front of an external key-value store.

    Holds the configuration and the one store handle for the process
    lifetime. The handle is passed to the handlers, never kept globally.

    Example usage:
        proxy = StateProxy.from_env()
        proxy.serve()
    """

    def __init__(self, config: Config, store: StateStore | None = None) -> None:
        """Initialize the proxy.

        Args:
            config: Loaded configuration
            store: Store adapter; built from ``config.store`` when omitted
        """
        self.config = config
        if store is None:
            store = create_state_store(
                config.store.backend,
                **config.store.backend_kwargs(),
            )
        self.store = store

    @classmethod
    def from_env(cls) -> "StateProxy":
        """Create a proxy configured from environment variables."""
        return cls(Config.from_env())

    @classmethod
    def from_config(cls, path: str | Path) -> "StateProxy":
        """Create a proxy from a YAML or JSON configuration file."""
        return cls(Config.from_file(path))

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "StateProxy":
        """Create a proxy from a configuration dictionary."""
        return cls(Config.from_dict(config_dict))

    def create_app(self) -> Starlette:
        """Build the ASGI application around this proxy's store."""
        return create_app(self.store)

    def serve(
        self,
        host: str | None = None,
        port: int | None = None,
    ) -> None:
        """Start the HTTP server.

        Blocks until the server stops. uvicorn exits the process with a
        nonzero code when startup fails or the port cannot be bound.

        Args:
            host: Host to bind to (defaults to config value)
            port: Port to bind to (defaults to config value)
        """
        import uvicorn

        host = host or self.config.server.host
        port = port if port is not None else self.config.server.port

        logger.info(f"Starting server on port {port}", context={"host": host, "port": port})
        uvicorn.run(
            self.create_app(),
            host=host,
            port=port,
            lifespan="on",
            access_log=False,
            log_level=self.config.logging.level.value.lower(),
        )
