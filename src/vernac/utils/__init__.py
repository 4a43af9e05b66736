"""Utility modules for vernac.

Provides:
- logger: get_logger for logging
"""

from vernac.utils.logger import get_logger

__all__ = [
    "get_logger",
]
