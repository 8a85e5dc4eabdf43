"""Pytest configuration and fixtures."""

import logging

import pytest

from state_proxy.backends.kv.memory import MemoryStateStore
from state_proxy.observability import clear_metric_callbacks


@pytest.fixture
def sample_config_dict():
    """Sample configuration dictionary for testing."""
    return {
        "server": {"host": "127.0.0.1", "port": 8080},
        "store": {"backend": "redis", "host": "redis.internal", "port": 6380},
        "logging": {"level": "DEBUG", "format": "text"},
    }


@pytest.fixture
def memory_store() -> MemoryStateStore:
    """Create an empty in-memory store."""
    return MemoryStateStore()


@pytest.fixture(autouse=True)
def reset_metric_callbacks():
    """Drop metric callbacks registered by a test."""
    yield
    clear_metric_callbacks()


@pytest.fixture(autouse=True)
def reset_logging():
    """Remove handlers installed by configure_logging during a test."""
    yield
    logger = logging.getLogger("state_proxy")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
