"""Board state model."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .status import Status
from .task import Task


def _empty_columns() -> dict[Status, list[Task]]:
    return {status: [] for status in Status}


def _zero_selection() -> dict[Status, int]:
    return dict.fromkeys(Status, 0)


class Board(BaseModel):
    """Full board state: one ordered task list per status plus the cursor."""

    columns: dict[Status, list[Task]] = Field(default_factory=_empty_columns)
    # Cursor of each column's list widget
    selected: dict[Status, int] = Field(default_factory=_zero_selection)
    focused: Status = Status.TODO

    # Set by the first resize event
    loaded: bool = False
    column_width: int = 0
    column_height: int = 0

    # Suppresses rendering during shutdown
    quitting: bool = False

    @classmethod
    def sample(cls) -> Board:
        """Create the demo board shown on startup."""
        board = cls()
        board.columns[Status.TODO] = [
            Task(status=Status.TODO, title="create X", description="implement the X framework"),
            Task(status=Status.TODO, title="create Y", description="build an address book"),
            Task(status=Status.TODO, title="create Z", description="web ui for the notebook"),
        ]
        board.columns[Status.IN_PROGRESS] = [
            Task(status=Status.IN_PROGRESS, title="write code", description="don't worry"),
        ]
        board.columns[Status.DONE] = [
            Task(status=Status.DONE, title="stay cool", description="keep coding"),
        ]
        return board

    def get_column(self, status: Status) -> list[Task]:
        """Get tasks for a specific column."""
        return self.columns[status]

    def item_count(self, status: Status) -> int:
        """Number of tasks in a column."""
        return len(self.columns[status])

    def selected_index(self, status: Status) -> int:
        """Cursor position in a column."""
        return self.selected[status]

    def selected_task(self) -> Task | None:
        """Task under the cursor of the focused column, if any."""
        tasks = self.columns[self.focused]
        index = self.selected[self.focused]
        if 0 <= index < len(tasks):
            return tasks[index]
        return None

    def titles(self, status: Status) -> list[str]:
        """Task titles of a column, top to bottom."""
        return [task.title for task in self.columns[status]]
