"""Minimal logging utilities for chatparts.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; applications configure logging.

Example:
    >>> from chatparts.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning message")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "chatparts." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'chatparts.mymodule'
    """
    # Ensure chatparts prefix for consistent namespacing
    if not (name == "chatparts" or name.startswith("chatparts.")):
        name = f"chatparts.{name}"
    return logging.getLogger(name)
