"""
Internal package.
Contains the console interface and other outward-facing modules.
"""

from . import cli

__all__ = [
    "cli",
]
