"""ASGI application for standalone deployment."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from starlette.applications import Starlette

from state_proxy.exceptions import StoreConnectionError
from state_proxy.observability import get_logger
from state_proxy.protocols import StateStore
from state_proxy.server.routes import create_routes

logger = get_logger(__name__)


def create_app(store: StateStore, check_store: bool = True) -> Starlette:
    """Create the ASGI application.

    Startup fails when the store is unreachable, so the server never accepts
    requests without a working store. The store is closed on shutdown.

    Args:
        store: The store adapter shared by all handlers
        check_store: Ping the store during startup

    Returns:
        Starlette application
    """

    @asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncIterator[None]:
        if check_store:
            try:
                await store.connect()
            except StoreConnectionError as e:
                logger.critical("Failed to connect to store", error=e)
                raise
        try:
            yield
        finally:
            await store.close()

    return Starlette(routes=create_routes(store), lifespan=lifespan)
