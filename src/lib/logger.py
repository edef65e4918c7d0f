"""Logging utilities for pumlink.

TIER 1: May import from core only.

Provides consistent logging across all modules using Python's
standard logging module (terminal strategy).
"""

import logging
import os
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%H:%M:%S"
DEFAULT_LEVEL = "INFO"

# Cache for loggers
_loggers: dict[str, logging.Logger] = {}

# Level chosen at runtime (e.g. --log-level); applies to loggers created later too
_level_override: LogLevel | None = None


def get_logger(name: str, level: LogLevel | None = None) -> logging.Logger:
    """Get a configured logger for pumlink.

    Args:
        name: Logger name (will be prefixed with 'pumlink.')
        level: Log level override (default: the level last passed to
            set_log_level, else PUMLINK_LOG_LEVEL env, else INFO)

    Returns:
        Configured logger instance

    Example:
        >>> logger = get_logger("tree")
        >>> logger.info("billing-api has no modules")
        20:55:39 | INFO     | pumlink.tree | billing-api has no modules
    """
    full_name = f"pumlink.{name}"

    if full_name in _loggers:
        return _loggers[full_name]

    logger = logging.getLogger(full_name)

    # Only configure if no handlers exist
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
        logger.addHandler(handler)

        level = level or _level_override
        if level:
            logger.setLevel(getattr(logging, level))
        else:
            env_level = os.environ.get("PUMLINK_LOG_LEVEL", DEFAULT_LEVEL).upper()
            logger.setLevel(getattr(logging, env_level, logging.INFO))

        logger.propagate = False

    _loggers[full_name] = logger
    return logger


def set_log_level(level: LogLevel) -> None:
    """Set log level for all pumlink loggers, including ones not created yet.

    The level is remembered, so a logger first requested afterwards
    starts at it instead of PUMLINK_LOG_LEVEL.

    Args:
        level: New log level (DEBUG, INFO, WARNING, ERROR)
    """
    global _level_override
    _level_override = level
    log_level = getattr(logging, level, logging.INFO)
    for logger in _loggers.values():
        logger.setLevel(log_level)
