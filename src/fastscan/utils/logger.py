"""Minimal logging utilities for fastscan.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from fastscan.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Window refilled")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "fastscan." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("window")
        >>> logger.name
        'fastscan.window'
    """
    if not (name == "fastscan" or name.startswith("fastscan.")):
        name = f"fastscan.{name}"
    return logging.getLogger(name)
