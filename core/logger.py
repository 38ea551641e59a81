"""
Centralized logging configuration using Loguru.
Follows Single Responsibility Principle - only handles logging setup.
"""

import sys
from typing import List

from loguru import logger

VALID_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LEVEL = "WARNING"

CONSOLE_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"

# Handlers installed by this module; sinks added elsewhere are left alone
_handler_ids: List[int] = []


def _resolve_level(settings) -> str:
    # LOG_LEVEL takes precedence over the DEBUG flag
    if settings.log_level:
        level = settings.log_level.upper()
        if level not in VALID_LEVELS:
            level = "INFO"
        return level
    return "DEBUG" if settings.debug else "INFO"


def _replace_handlers(level: str, log_file=None) -> None:
    for handler_id in _handler_ids:
        logger.remove(handler_id)
    _handler_ids.clear()

    # stdout carries the task list, so diagnostics go to stderr
    _handler_ids.append(logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level))

    if log_file:
        _handler_ids.append(
            logger.add(
                log_file,
                rotation="10 MB",
                retention="30 days",
                compression="zip",
                format=FILE_FORMAT,
                level="DEBUG",  # File logs always DEBUG to capture everything
            )
        )


def setup_logger():
    """
    Configure handlers from settings.

    Loads settings, so it raises pydantic.ValidationError on a bad
    environment. Call it where such errors are handled.
    """
    from .config import get_settings
    settings = get_settings()
    _replace_handlers(_resolve_level(settings), settings.log_file)


# Settings-free console handler until setup_logger() runs
logger.remove()
_replace_handlers(DEFAULT_LEVEL)

__all__ = ["logger", "setup_logger"]
