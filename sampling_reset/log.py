"""Terminal logging for the responder."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "sampling_reset"
LOG_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "error": logging.ERROR,
}


def configure_logging(level: str = "info", debug: bool = False, stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Attach a single stderr handler to the package logger.

    Calling this again replaces the previous handler instead of stacking
    another one.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if debug:
        level = "debug"
    try:
        logger.setLevel(_LEVELS[level])
    except KeyError:
        raise ValueError(f"unknown log level: {level!r}") from None

    for handler in list(logger.handlers):
        if getattr(handler, "_sampling_reset", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._sampling_reset = True
    logger.addHandler(handler)
    logger.propagate = False
    return logger
