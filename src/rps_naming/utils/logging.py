"""Logging setup for rps-naming."""

import logging
import sys

PACKAGE_LOGGER = "rps_naming"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(log_level: str) -> logging.Logger:
    """Configure the package logger.

    Installs a single stderr handler on the ``rps_naming`` logger, replacing
    any handler from an earlier call.

    Args:
        log_level: Log level name (DEBUG, INFO, WARNING, ERROR).

    Returns:
        The configured package logger.
    """
    level = getattr(logging, log_level.upper(), logging.WARNING)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    package_logger.propagate = False
    package_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    return package_logger
