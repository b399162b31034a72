"""Logging configuration for command-line entry points."""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: str | int | None = None) -> None:
    """Attach one stream handler to the ``rating_engine`` logger.

    The level defaults to ``$LOG_LEVEL`` (``INFO`` when unset). An unknown level
    name falls back to ``INFO`` with a warning. Calling this more than once
    replaces the handler instead of stacking duplicates.
    """
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO") or "INFO"
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger("rating_engine")
    logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False

    try:
        logger.setLevel(level)
    except (TypeError, ValueError):
        logger.setLevel(logging.INFO)
        logger.warning("Unknown log level %r, using INFO", level)
