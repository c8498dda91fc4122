"""Logging configuration helper for blssig."""
from __future__ import annotations

import logging
from typing import Any, Optional

_PACKAGE_LOGGER = "blssig"


def configure(logging_settings: Optional[Any] = None, level: Optional[str] = None) -> logging.Logger:
    """Attach a stream handler to the package logger. Safe to call repeatedly."""
    fmt = getattr(logging_settings, "format", None) or "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    datefmt = getattr(logging_settings, "datefmt", None) or "%Y-%m-%d %H:%M:%S"
    level = (level or getattr(logging_settings, "level", None) or "INFO").upper()

    logger = logging.getLogger(_PACKAGE_LOGGER)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt, datefmt))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
