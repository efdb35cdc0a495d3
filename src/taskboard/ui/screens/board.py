"""Main kanban board screen."""

from textual import events
from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from ...models import Board, Status
from ..widgets.column import KanbanColumn


class BoardScreen(Screen):
    """The three columns side by side, focused one highlighted."""

    @property
    def board(self) -> Board:
        """Get the board model from the app."""
        return self.app.mode_service.board  # pyrefly: ignore[missing-attribute]

    def compose(self) -> ComposeResult:
        """Create the board layout."""
        yield Header()
        yield Static("loading...", id="loading")

        with Container(id="board-container"), Horizontal(id="columns"):
            for status in Status:
                yield KanbanColumn(status, id=f"column-{status.value.replace('_', '-')}")

        yield Footer()

    def on_mount(self) -> None:
        """Render whatever state the board is in."""
        self.refresh_board()
        # The first layout counts as the first resize
        self.call_after_refresh(self._size_from_layout)

    def on_resize(self, event: events.Resize) -> None:
        """Size the columns from the first resize."""
        self._size_columns(event.size.width, event.size.height)

    def _size_from_layout(self) -> None:
        self._size_columns(self.size.width, self.size.height)

    def _size_columns(self, width: int, height: int) -> None:
        board_service = self.app.mode_service.board_service  # pyrefly: ignore[missing-attribute]
        if board_service.resize(self.board, width, height):
            self.refresh_board()

    def refresh_board(self) -> None:
        """Re-render the columns from the board model."""
        board = self.board
        loading = self.query_one("#loading", Static)
        container = self.query_one("#board-container", Container)

        if board.quitting:
            loading.display = False
            container.display = False
            return

        loading.display = not board.loaded
        container.display = board.loaded
        if not board.loaded:
            return

        for status in Status:
            column = self._get_column(status)
            if column is None:
                continue
            column.styles.width = board.column_width
            column.set_focused(status is board.focused)
            column.set_tasks(board.get_column(status), board.selected_index(status))

    def _get_column(self, status: Status) -> KanbanColumn | None:
        """Get column widget by status."""
        widget_id = f"column-{status.value.replace('_', '-')}"
        try:
            return self.query_one(f"#{widget_id}", KanbanColumn)
        except Exception:
            return None
