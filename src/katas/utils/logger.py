"""Logging helpers for katas.

Wraps the standard library logging with a package namespace. katas never
installs handlers; configure the "katas" logger in your application.

Example:
    >>> from katas.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Accepted combinator %r", ">>")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the "katas." namespace.

    Example:
        >>> get_logger("mymodule").name
        'katas.mymodule'
        >>> get_logger("katas.builder").name
        'katas.builder'
    """
    if not (name == "katas" or name.startswith("katas.")):
        name = f"katas.{name}"
    return logging.getLogger(name)
