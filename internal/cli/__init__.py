"""
Console interface.
"""

from .formatter import render_task_list

__all__ = [
    "render_task_list",
]
