"""
Domain entities for the task list.
"""

from dataclasses import dataclass


@dataclass
class Task:
    """Task entity: a description plus a completion flag."""

    description: str
    is_completed: bool = False
