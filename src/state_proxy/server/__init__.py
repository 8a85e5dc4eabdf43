"""HTTP Server module."""

from state_proxy.server.app import create_app
from state_proxy.server.responses import write_response
from state_proxy.server.routes import create_routes

__all__ = [
    "create_app",
    "create_routes",
    "write_response",
]
