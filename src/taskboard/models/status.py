"""Task status enumeration and its column cycle."""

from enum import Enum


class Status(str, Enum):
    """Board columns, in display order and promotion order."""

    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"

    @property
    def label(self) -> str:
        """Column heading for this status."""
        return _LABELS[self]

    def next(self) -> "Status":
        """Status of the column to the right, wrapping Done -> Todo."""
        order = list(Status)
        return order[(order.index(self) + 1) % len(order)]

    def prev(self) -> "Status":
        """Status of the column to the left, wrapping Todo -> Done."""
        order = list(Status)
        return order[(order.index(self) - 1) % len(order)]


_LABELS = {
    Status.TODO: "To Do",
    Status.IN_PROGRESS: "In Progress",
    Status.DONE: "Done",
}
