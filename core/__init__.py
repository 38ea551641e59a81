"""
Core module containing configuration, logging and dependency wiring.
"""

from .config import Settings, get_settings
from .logger import logger, setup_logger

__all__ = [
    "Settings",
    "get_settings",
    "logger",
    "setup_logger",
]
