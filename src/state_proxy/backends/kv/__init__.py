"""Key-value store backends."""

from state_proxy.backends.kv.memory import MemoryStateStore
from state_proxy.backends.kv.redis import RedisStateStore

__all__ = ["MemoryStateStore", "RedisStateStore"]
