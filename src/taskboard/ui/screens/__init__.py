"""Screen components."""

from .board import BoardScreen
from .task_form import TaskFormScreen

__all__ = [
    "BoardScreen",
    "TaskFormScreen",
]
