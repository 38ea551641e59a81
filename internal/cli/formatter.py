"""
Console formatting for task lists.
"""

from typing import Iterable, List

from domain.entities import Task

DEFAULT_HEADER = "Task list:"
DEFAULT_COMPLETED_MARKER = "(Completed)"


def render_task_list(
    tasks: Iterable[Task],
    header: str = DEFAULT_HEADER,
    completed_marker: str = DEFAULT_COMPLETED_MARKER,
) -> List[str]:
    """
    Render tasks as console lines.

    The first line is the header, then one "- <description> <marker>" line
    per task. The marker is empty for tasks that are not completed, the
    separating space is kept either way.

    Args:
        tasks: Tasks to render, in display order
        header: Header line
        completed_marker: Text shown after completed tasks

    Returns:
        List[str]: Lines without trailing newlines
    """
    lines = [header]
    for task in tasks:
        marker = completed_marker if task.is_completed else ""
        lines.append(f"- {task.description} {marker}")
    return lines
