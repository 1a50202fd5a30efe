"""Shared logging utilities for consistent match engine observability.

Usage example:
    from helper_match.observability.logging import get_logger

    logger = get_logger("helper_match.ranking")
    logger.info("Ranking %s candidates", pool_size)
"""

from __future__ import annotations

import logging
import time

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def get_logger(name: str) -> logging.Logger:
    """Return a standard logger configured for UTC timestamps.

    Args:
        name: Logger name (use a stable module-qualified name).

    Returns:
        A logger with a single stream handler and a consistent UTC format.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(fmt=_LOG_FORMAT, datefmt=_LOG_DATE_FORMAT)
        formatter.converter = time.gmtime
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False
    return logger


def set_package_log_level(level: str) -> None:
    """Set the level for every logger already created under the ``helper_match`` namespace.

    Args:
        level: A standard level name such as ``"DEBUG"`` or ``"WARNING"``.
    """
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    for name, candidate in logging.Logger.manager.loggerDict.items():
        if name.startswith("helper_match") and isinstance(candidate, logging.Logger):
            candidate.setLevel(resolved)
