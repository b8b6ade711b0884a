"""Logging setup for the command line interface."""

from __future__ import annotations

import logging
from typing import TextIO

_LOGGER_NAME = "textbringer_plugin_generator"
_FORMAT = "[textbringer-plugin-generator] %(levelname)s %(message)s"


def configure_logging(*, verbose: bool = False, stream: TextIO | None = None) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Warnings and errors are always shown; ``verbose`` adds the debug trail of
    option fallbacks, identity lookups and written files.
    """

    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Repeated CLI invocations in one process must not stack handlers.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    return logger


__all__ = ["configure_logging"]
