"""Minimal logging utilities for appendfmt.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; configure logging in the application.

Example:
    >>> from appendfmt.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("append rejected")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "appendfmt." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'appendfmt.mymodule'
    """
    if not (name == "appendfmt" or name.startswith("appendfmt.")):
        name = f"appendfmt.{name}"
    return logging.getLogger(name)
