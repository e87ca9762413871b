"""Minimal logging utilities for strscanner.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from strscanner.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Compiling pattern")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "strscanner." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("engine")
        >>> logger.name
        'strscanner.engine'
    """
    if not (name == "strscanner" or name.startswith("strscanner.")):
        name = f"strscanner.{name}"
    return logging.getLogger(name)
