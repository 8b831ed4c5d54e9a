"""Utility modules for appendfmt.

Provides:
- logger: get_logger for logging
"""

from appendfmt.utils.logger import get_logger

__all__ = [
    "get_logger",
]
