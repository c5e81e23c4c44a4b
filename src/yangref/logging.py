"""Logging helper for yangref modules."""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "yangref"

# Silent until the application configures logging.
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Get a logger that defers to the application's logging setup.

    No level is set on the logger, so it follows whatever the application
    configures on the root logger, including a ``basicConfig()`` call made
    after yangref was imported. Records propagate to the root logger.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance

    """
    logger = logging.getLogger(name)
    logger.propagate = True
    return logger
