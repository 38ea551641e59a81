"""
Domain layer: plain entities with no knowledge of storage or presentation.
"""

from .entities import Task

__all__ = [
    "Task",
]
