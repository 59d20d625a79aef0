"""Logging configuration for the taskpad CLI."""

import logging
import sys

from ..core.constants import LOG_FORMAT


def configure_logging(level: int = logging.WARNING) -> None:
    """Send taskpad logs at or above level to stderr.

    Safe to call more than once; the handler is replaced, not duplicated.
    """
    logger = logging.getLogger("taskpad")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
