"""
Interface for Task Repository.
Defines the contract that all task repositories must implement.
"""

from abc import ABC, abstractmethod
from typing import List

from domain.entities import Task


class ITaskRepository(ABC):
    """Interface for task storage operations."""

    @abstractmethod
    def add_task(self, task: Task) -> None:
        """
        Store a task after the ones already stored.

        Args:
            task: Task to store
        """
        pass

    @abstractmethod
    def get_all_tasks(self) -> List[Task]:
        """
        Get every stored task.

        Returns:
            List[Task]: Tasks in the order they were added
        """
        pass
