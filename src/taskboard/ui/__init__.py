"""UI components."""

from .screens.board import BoardScreen
from .screens.task_form import TaskFormScreen
from .widgets.column import KanbanColumn
from .widgets.task_card import TaskCard

__all__ = [
    "BoardScreen",
    "KanbanColumn",
    "TaskCard",
    "TaskFormScreen",
]
