"""State Proxy - an HTTP front end for an external key-value store."""

from state_proxy.config import Config
from state_proxy.exceptions import (
    BackendNotFoundError,
    ConfigError,
    StateProxyError,
    StoreConnectionError,
    StoreError,
)
from state_proxy.observability import (
    LogLevel,
    RequestContext,
    StructuredLogger,
    Timer,
    configure_logging,
    emit_counter,
    emit_metric,
    emit_timer,
    get_logger,
    register_metric_callback,
)
from state_proxy.protocols import Failed, Found, NotFound, Ok, StateStore, StoreResult
from state_proxy.proxy import StateProxy

__version__ = "0.1.0"
__all__ = [
    # Core
    "Config",
    "StateProxy",
    # Store
    "Failed",
    "Found",
    "NotFound",
    "Ok",
    "StateStore",
    "StoreResult",
    # Errors
    "BackendNotFoundError",
    "ConfigError",
    "StateProxyError",
    "StoreConnectionError",
    "StoreError",
    # Observability
    "LogLevel",
    "RequestContext",
    "StructuredLogger",
    "Timer",
    "configure_logging",
    "emit_counter",
    "emit_metric",
    "emit_timer",
    "get_logger",
    "register_metric_callback",
]
