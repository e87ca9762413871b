"""Utility modules for strscanner.

Provides:
- logger: get_logger for logging
"""

from strscanner.utils.logger import get_logger

__all__ = [
    "get_logger",
]
