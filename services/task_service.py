"""
Task service for task list management.
Depends only on the ITaskRepository abstraction.
"""

from typing import List

from core.logger import logger
from domain.entities import Task
from repositories.interfaces import ITaskRepository
from services.interfaces import ITaskService


class TaskService(ITaskService):
    """Service for managing tasks through an injected repository."""

    def __init__(self, task_repository: ITaskRepository):
        """
        Initialize task service.

        Args:
            task_repository: Storage backend for tasks
        """
        self.task_repository = task_repository
        logger.debug(
            f"TaskService initialized with {type(task_repository).__name__}"
        )

    def add_task(self, description: str) -> None:
        """
        Create a task from its description and store it.

        The description is not validated; empty text is stored as given.

        Args:
            description: Task description
        """
        task = Task(description=description, is_completed=False)
        self.task_repository.add_task(task)
        logger.debug(f"Task added: description={description!r}")

    def get_all_tasks(self) -> List[Task]:
        """Return the tasks reported by the repository, unmodified."""
        return self.task_repository.get_all_tasks()
