"""Logging bootstrap for the people registry."""

from __future__ import annotations

import logging
from typing import Optional

from people.core.config import settings

_LOGGER_NAME = "people"


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> logging.Logger:
    """Attach a stream handler to the ``people`` logger once.

    Repeated calls only adjust the level, so importing code may call this
    freely without stacking handlers.
    """

    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt or settings.LOG_FORMAT))
        logger.addHandler(handler)
        logger.debug("Logging initialized at %s", logging.getLevelName(logger.level))

    return logger
