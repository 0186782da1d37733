"""
@meta
name: shared_logging_utils
type: utility
domain: shared
responsibility:
  - Provide consistent logging for the file monitor package
  - Configure loggers with standardized formatting
inputs:
  - Logger names
  - FILE_MONITOR_LOG_LEVEL environment variable
outputs:
  - Configured logger instances
tags:
  - utility
  - shared
  - logging
lifecycle:
  status: active
"""

"""Shared logging utilities for the file monitor package."""

import logging
import os
from typing import Optional

LOG_LEVEL_ENV_VAR = "FILE_MONITOR_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _level_from_env() -> Optional[int]:
    """Read the logging level name from the environment, if set and valid."""
    raw = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not raw:
        return None
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else None


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a logger with standardized formatting.

    Args:
        name: Logger name (typically __name__).
        level: Optional logging level. Falls back to FILE_MONITOR_LOG_LEVEL,
            then INFO.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(name)

    # Only configure if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

        if level is None:
            level = _level_from_env()
        if level is not None:
            logger.setLevel(level)
        elif logger.level == logging.NOTSET:
            logger.setLevel(logging.INFO)

    return logger
