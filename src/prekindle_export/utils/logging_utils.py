"""Small logging helper used across the exporter."""
from __future__ import annotations

import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _resolve_level(level: Optional[str]) -> int:
    level_name = (level or os.getenv("PREKINDLE_LOG_LEVEL", "INFO")).upper()
    return getattr(logging, level_name, logging.INFO)


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Return a configured logger with a single stream handler."""
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(_resolve_level(level))

    # StreamHandler writes to stderr; stdout is reserved for the CSV.
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def set_level(level: str, *names: str) -> None:
    """Apply a level name (e.g. ``"debug"``) to already created loggers."""
    log_level = _resolve_level(level)
    for name in names:
        logging.getLogger(name).setLevel(log_level)
