"""Command-line entry point: ``state-proxy`` / ``python -m state_proxy``."""

import sys

from state_proxy.config import Config
from state_proxy.exceptions import ConfigError
from state_proxy.observability import configure_logging, get_logger
from state_proxy.proxy import StateProxy

logger = get_logger("state_proxy")


def main() -> None:
    """Load configuration from the environment and serve until stopped."""
    try:
        config = Config.load()
    except ConfigError as e:
        configure_logging()
        logger.critical("Invalid configuration", error=e)
        sys.exit(1)

    configure_logging(config.logging.level, config.logging.format)

    try:
        proxy = StateProxy(config)
    except ConfigError as e:
        logger.critical("Cannot create store backend", error=e)
        sys.exit(1)

    proxy.serve()


if __name__ == "__main__":
    main()
