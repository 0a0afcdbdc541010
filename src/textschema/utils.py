"""Utility functions for textschema."""

import sys

from loguru import logger


def setup_logging(level: str = "INFO") -> None:
    """Send log output to stderr at the given level.

    Replaces any previously configured loguru handlers.
    """
    logger.remove()
    logger.add(sys.stderr, level=level, colorize=True, backtrace=False)
    logger.debug(f"Logging configured at {level}")
