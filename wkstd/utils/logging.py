"""Centralized logging configuration using Loguru.

Usage:
    from wkstd.utils.logging import logger
    logger.info("Message")
    logger.debug("Debug message")  # Only shows at DEBUG level

Environment Variables:
    WKSTD_LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default: WARNING, DEBUG in development mode)
    WKSTD_LOG_FILE: path to log file (optional, always captures DEBUG)
"""

import os
import sys

from loguru import logger

from .env import is_dev

# Remove default handler
logger.remove()

_default_level = "DEBUG" if is_dev() else "WARNING"
_log_level = os.environ.get("WKSTD_LOG_LEVEL", _default_level).upper()
_log_file = os.environ.get("WKSTD_LOG_FILE")

# Human-readable format (no emojis - Windows CP1252 compatibility)
_human_format = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}:{function}:{line}</cyan> - "
    "<level>{message}</level>"
)

logger.level("DEBUG", color="<blue>")
logger.level("INFO", color="<white>")
logger.level("WARNING", color="<yellow>")
logger.level("ERROR", color="<red>")

logger.add(
    sys.stderr,
    level=_log_level,
    format=_human_format,
    colorize=None,  # Auto-detect: colors if TTY, plain if piped
)

if _log_file:
    logger.add(
        _log_file,
        level="DEBUG",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        rotation="10 MB",
        retention="7 days",
    )


def get_log_level() -> str:
    """Return the console log level in effect."""
    return _log_level


__all__ = [
    "logger",
    "get_log_level",
]
