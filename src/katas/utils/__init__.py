"""Utility modules for katas.

Provides:
- logger: get_logger for namespaced logging
"""

from katas.utils.logger import get_logger

__all__ = [
    "get_logger",
]
