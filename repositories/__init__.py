"""
Repository layer for data access.
Implements Repository Pattern and follows Single Responsibility Principle.
"""

from .interfaces import ITaskRepository
from .task_repository import InMemoryTaskRepository

__all__ = [
    "ITaskRepository",
    "InMemoryTaskRepository",
]
