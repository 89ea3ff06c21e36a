#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Logging for proxybypass

Provides the package logger and an optional rotating log file.
"""
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL_ENV = "PROXYBYPASS_LOG_LEVEL"

logger = logging.getLogger("proxybypass")
logger.addHandler(logging.NullHandler())

_file_handler: Optional[RotatingFileHandler] = None


def level_from_env() -> Optional[int]:
    """Numeric level named by PROXYBYPASS_LOG_LEVEL, or None if unset or unknown."""
    name = os.getenv(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return None
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else None


def configure_level() -> None:
    """Apply PROXYBYPASS_LOG_LEVEL; otherwise the level is inherited."""
    level = level_from_env()
    if level is not None:
        logger.setLevel(level)
    elif os.getenv(LOG_LEVEL_ENV, "").strip():
        logger.warning(f"Ignoring unknown {LOG_LEVEL_ENV} value: {os.getenv(LOG_LEVEL_ENV)!r}")


configure_level()


def set_log_file(path: Optional[str], max_bytes: int = 5 * 1024 * 1024, backup_count: int = 3) -> None:
    """Attach a rotating file handler to the package logger.

    Calling again replaces the previous file. Passing None detaches it.
    """
    global _file_handler
    if _file_handler is not None:
        logger.removeHandler(_file_handler)
        _file_handler.close()
        _file_handler = None

    if not path:
        return

    handler = RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    _file_handler = handler
