"""Data models."""

from .board import Board
from .form import FormStep, TaskForm
from .mode import Mode, ModeSwitch
from .status import Status
from .task import Task

__all__ = [
    "Board",
    "FormStep",
    "Mode",
    "ModeSwitch",
    "Status",
    "Task",
    "TaskForm",
]
