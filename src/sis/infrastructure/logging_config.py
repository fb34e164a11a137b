"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging

APP_LOGGER = "sis"
_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Attach a single stderr handler to the ``sis`` logger.

    Safe to call more than once; later calls only adjust the level.
    """
    logger = logging.getLogger(APP_LOGGER)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)

    return logger
