"""Task card widget."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.widget import Widget
from textual.widgets import Static

from ...models import Task


class TaskCard(Widget):
    """A task card displayed in a column."""

    def __init__(self, task_data: Task, *args, selected: bool = False, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._task_data = task_data
        self.set_class(selected, "-selected")

    @property
    def task(self) -> Task:  # pyrefly: ignore[bad-override]
        """Get the task for this card."""
        return self._task_data

    def compose(self) -> ComposeResult:
        """Create card layout."""
        yield Static(
            Text(self._truncate(self._task_data.display_title, 40), style="bold"),
            classes="task-title",
        )
        preview = self._get_description_preview()
        if preview:
            yield Static(Text(preview, style="dim"), classes="task-preview")

    def _truncate(self, text: str, max_len: int) -> str:
        """Truncate text with ellipsis."""
        if len(text) <= max_len:
            return text
        return text[: max_len - 1] + "…"

    def _get_description_preview(self) -> str:
        """Get first non-empty line of the description."""
        for line in self._task_data.description.split("\n"):
            line = line.strip()
            if line:
                return self._truncate(line, 50)
        return ""
