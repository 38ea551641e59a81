"""
Console entry point for Solid Tasks.
Wires a repository into the task service, adds the sample tasks and
prints the resulting list.
"""

import sys

from core.config import get_settings
from core.container import Container, bootstrap_container
from core.logger import logger, setup_logger
from internal.cli.formatter import render_task_list
from services.interfaces import ITaskService

SAMPLE_TASKS = ("Walk the dog", "Do homework", "Cook dinner")


def run(task_service: ITaskService) -> None:
    """Add the sample tasks and print the task list."""
    for description in SAMPLE_TASKS:
        task_service.add_task(description)

    tasks = task_service.get_all_tasks()
    logger.info(f"Rendering {len(tasks)} task(s)")
    for line in render_task_list(tasks):
        print(line)


def main() -> int:
    """Run the program and return the process exit status."""
    try:
        setup_logger()
        settings = get_settings()
        logger.info(f"Starting {settings.app_name} v{settings.app_version}")
        logger.debug(f"Environment: {settings.environment}")

        bootstrap_container()
        task_service = Container.resolve(ITaskService)
        run(task_service)
    except Exception as e:
        logger.exception(f"Task list run failed: {e}")
        return 1

    logger.info("Done")
    return 0


if __name__ == "__main__":
    sys.exit(main())
