"""Rotating file logger for the date-picker demo."""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler

_LOG_DIR = os.path.join(os.path.expanduser("~"), ".mini-date-picker", "logs")
_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def log_path(name: str = "mini-date-picker") -> str:
    """Full path of the log file for *name*; creates the folder if needed."""
    os.makedirs(_LOG_DIR, exist_ok=True)
    safe = name.strip() or "mini-date-picker"
    return os.path.join(_LOG_DIR, f"{safe}.log")


def setup_logger(
    name: str = "mini-date-picker",
    level: int = logging.INFO,
    max_bytes: int = 1024 * 1024,
    backup_count: int = 3,
) -> logging.Logger:
    """Attach a rotating file handler to the root logger.

    Calling this again returns the same logger without adding a second
    handler.  Module loggers (``logging.getLogger(__name__)``) propagate
    into it.
    """
    root = logging.getLogger()
    path = log_path(name)
    for h in root.handlers:
        if isinstance(h, RotatingFileHandler) and h.baseFilename == os.path.abspath(path):
            return logging.getLogger(name)
    handler = RotatingFileHandler(
        path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
    return logging.getLogger(name)
