"""Structured logging for gregorian.

The library logs through structlog on top of the standard library logger
named ``gregorian``. A NullHandler is attached to that logger, so nothing
is emitted until the application configures logging, either through its
own stdlib setup or through configure_logging().

This module is not part of the public API.
"""

from __future__ import annotations

import logging
import sys

import structlog

from gregorian._internal.constants import LOGGER_NAME

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def configure_logging(level: str | int = "INFO") -> None:
    """Send gregorian log events to stdout as key=value lines.

    Meant for applications and test sessions; the library itself never
    calls it.

    Args:
        level: Minimum level for the ``gregorian`` logger.
    """
    if isinstance(level, str):
        level = level.upper()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger(LOGGER_NAME)
    logger.addHandler(handler)
    logger.setLevel(level)


def log() -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to the ``gregorian`` stdlib logger."""
    return structlog.wrap_logger(
        logging.getLogger(LOGGER_NAME),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.KeyValueRenderer(
                key_order=["event", "level"], sort_keys=True
            ),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


__all__ = ["configure_logging", "log"]
