"""
Interface for Task Service.
Defines the contract that all task services must implement.
"""

from abc import ABC, abstractmethod
from typing import List

from domain.entities import Task


class ITaskService(ABC):
    """Interface for task service operations."""

    @abstractmethod
    def add_task(self, description: str) -> None:
        """
        Create a new, not yet completed task.

        Args:
            description: Task description
        """
        pass

    @abstractmethod
    def get_all_tasks(self) -> List[Task]:
        """
        Get all tasks.

        Returns:
            List[Task]: Tasks in the order they were added
        """
        pass
