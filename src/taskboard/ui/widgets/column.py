"""Kanban column widget."""

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widget import Widget
from textual.widgets import Static

from ...models import Status, Task
from .task_card import TaskCard


class TaskListScroll(VerticalScroll, can_focus=False):
    """Scroll container for task lists.

    Not focusable, so navigation keys reach the app bindings instead of
    being handled as scroll actions.
    """


class EmptyColumnMessage(Static):
    """Displayed when a column has no tasks."""

    pass


class KanbanColumn(Widget):
    """A single column in the kanban board."""

    def __init__(self, status: Status, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.status = status
        self._tasks: list[Task] = []
        self._selected = 0

    @property
    def _state_css_id(self) -> str:
        """Get CSS-safe version of the status for IDs."""
        return self.status.value.replace("_", "-")

    def compose(self) -> ComposeResult:
        """Create column layout."""
        yield Static(self._header_text, classes="column-header", id=f"header-{self._state_css_id}")
        yield TaskListScroll(classes="column-content", id=f"content-{self._state_css_id}")

    @property
    def _header_text(self) -> str:
        """Header text with styled task count."""
        return f"{self.status.label} [dim]({len(self._tasks)})[/]"

    def set_tasks(self, tasks: list[Task], selected: int = 0) -> None:
        """Set the tasks for this column and the card under the cursor."""
        self._tasks = list(tasks)
        self._selected = selected
        # Use call_after_refresh to ensure DOM is ready
        self.call_after_refresh(self._refresh_tasks)

    def set_focused(self, focused: bool) -> None:
        """Toggle the emphasized border of the focused column."""
        self.set_class(focused, "-focused")

    async def _refresh_tasks(self) -> None:
        """Refresh the task cards in this column."""
        content_id = f"#content-{self._state_css_id}"
        try:
            content = self.query_one(content_id, TaskListScroll)
        except Exception as e:
            self.log.error(f"Cannot find {content_id}: {e}")
            return

        # Remove existing task cards and wait for removal to complete
        await content.remove_children()

        if not self._tasks:
            await content.mount(EmptyColumnMessage("No tasks"))
        else:
            cards = [
                TaskCard(task, selected=index == self._selected)
                for index, task in enumerate(self._tasks)
            ]
            await content.mount_all(cards)
            cards[min(self._selected, len(cards) - 1)].scroll_visible()

        try:
            header = self.query_one(f"#header-{self._state_css_id}", Static)
            header.update(self._header_text)
        except Exception:
            pass

    @property
    def tasks(self) -> list[Task]:
        """Get the tasks in this column."""
        return self._tasks

    @property
    def task_count(self) -> int:
        """Get the number of tasks in this column."""
        return len(self._tasks)
