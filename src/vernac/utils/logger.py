"""Minimal logging utilities for vernac.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from vernac.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Reconciling sentence")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "vernac." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'vernac.mymodule'
    """
    if not (name == "vernac" or name.startswith("vernac.")):
        name = f"vernac.{name}"
    return logging.getLogger(name)
