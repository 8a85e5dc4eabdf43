"""State proxy exceptions."""


class StateProxyError(Exception):
    """Base exception for state-proxy."""

    pass


class ConfigError(StateProxyError):
    """Configuration error."""

    pass


class BackendNotFoundError(ConfigError):
    """No store backend is registered under the requested name."""

    pass


class StoreError(StateProxyError):
    """Store-side failure."""

    pass


class StoreConnectionError(StoreError):
    """The external store could not be reached."""

    pass
