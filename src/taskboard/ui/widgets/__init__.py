"""Widget components."""

from .column import EmptyColumnMessage, KanbanColumn
from .description_area import DescriptionArea
from .task_card import TaskCard

__all__ = [
    "DescriptionArea",
    "EmptyColumnMessage",
    "KanbanColumn",
    "TaskCard",
]
