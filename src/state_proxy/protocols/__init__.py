"""Protocol interfaces for pluggable backends."""

from state_proxy.protocols.state_store import (
    Failed,
    Found,
    NotFound,
    Ok,
    StateStore,
    StoreResult,
)

__all__ = [
    "Failed",
    "Found",
    "NotFound",
    "Ok",
    "StateStore",
    "StoreResult",
]
