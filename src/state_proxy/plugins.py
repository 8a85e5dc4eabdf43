"""Plugin discovery via Python entry points."""

from importlib.metadata import entry_points
from typing import Any

from state_proxy.exceptions import BackendNotFoundError
from state_proxy.protocols import StateStore

BACKEND_GROUPS = {
    "kv": "state_proxy.backends.kv",
}


def discover_backends(group: str) -> dict[str, Any]:
    """Discover all registered backends for a given group.

    Args:
        group: The backend group name (kv)

    Returns:
        Dictionary mapping backend names to their classes
    """
    full_group = BACKEND_GROUPS.get(group, group)
    eps = entry_points(group=full_group)
    return {ep.name: ep.load() for ep in eps}


def get_backend(group: str, name: str) -> Any:
    """Get a specific backend class by group and name.

    Args:
        group: The backend group name (kv)
        name: The backend name (e.g., "redis", "memory")

    Returns:
        The backend class

    Raises:
        BackendNotFoundError: If the backend is not found
    """
    backends = discover_backends(group)
    if name not in backends:
        available = ", ".join(sorted(backends.keys())) or "(none)"
        raise BackendNotFoundError(
            f"Backend '{name}' not found in group '{group}'. Available: {available}"
        )
    return backends[name]


def create_state_store(backend: str, **kwargs: Any) -> StateStore:
    """Create a StateStore instance.

    Args:
        backend: The backend name (e.g., "redis", "memory")
        **kwargs: Backend-specific configuration

    Returns:
        A StateStore implementation
    """
    cls = get_backend("kv", backend)
    return cls(**kwargs)
