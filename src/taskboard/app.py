"""taskboard TUI Application."""

import logging

from textual.app import App
from textual.binding import Binding

from .cli.output import error
from .config import Settings
from .models import Board, ModeSwitch, Task
from .services import BoardService, FormService, KeyToken, ModeService
from .ui.screens import BoardScreen, TaskFormScreen

logger = logging.getLogger(__name__)


class TaskBoardApp(App):
    """taskboard - three-column terminal task board."""

    TITLE = "taskboard"

    CSS_PATH = "ui/styles.tcss"

    BINDINGS = [
        # Core bindings
        Binding("q", "quit", "Quit", show=True),
        Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
        # Navigation - vim style
        Binding("h", "nav_left", "← Column", show=False),
        Binding("j", "nav_down", "↓ Task", show=False),
        Binding("k", "nav_up", "↑ Task", show=False),
        Binding("l", "nav_right", "→ Column", show=False),
        # Navigation - arrow keys
        Binding("left", "nav_left", "← Column", show=True),
        Binding("down", "nav_down", "↓ Task", show=False),
        Binding("up", "nav_up", "↑ Task", show=False),
        Binding("right", "nav_right", "→ Column", show=True),
        # Task actions
        Binding("enter", "promote_task", "Move →", show=True),
        Binding("n", "new_task", "New", show=True),
    ]

    SCREENS = {
        "board": BoardScreen,
    }

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self.settings = settings or Settings()
        self._init_services()

    def _init_services(self) -> None:
        """Initialize the mode switch and services."""
        board = Board.sample() if self.settings.sample_tasks else Board()
        self.board_service = BoardService()
        self.form_service = FormService()
        self.mode_service = ModeService(
            ModeSwitch(board=board),
            board_service=self.board_service,
            form_service=self.form_service,
        )

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.push_screen("board")

    def action_quit(self) -> None:
        """Quit from either screen without handing off."""
        self.mode_service.handle_key(KeyToken.QUIT)
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.refresh_board()
        self.exit()

    # Navigation actions
    def action_nav_left(self) -> None:
        """Focus the previous column."""
        self._board_command(KeyToken.LEFT)

    def action_nav_right(self) -> None:
        """Focus the next column."""
        self._board_command(KeyToken.RIGHT)

    def action_nav_up(self) -> None:
        """Select the previous task."""
        self._board_command(KeyToken.UP)

    def action_nav_down(self) -> None:
        """Select the next task."""
        self._board_command(KeyToken.DOWN)

    # Task actions
    def action_promote_task(self) -> None:
        """Move the selected task to the next column."""
        if self._board_command(KeyToken.CONFIRM):
            board = self.mode_service.board
            moved = board.get_column(board.focused.next())[-1]
            self.notify(f"Moved to {moved.status.label}", timeout=2)

    def action_new_task(self) -> None:
        """Hand off to the task form for the focused column."""
        screen = self.screen
        if not isinstance(screen, BoardScreen):
            return

        form = self.mode_service.open_form()
        if form is None:
            return

        self.push_screen(  # pyrefly: ignore[no-matching-overload]
            TaskFormScreen(form),
            callback=self._handle_task_created,
        )

    def _handle_task_created(self, task: Task | None) -> None:
        """Show the board again with the new task in place."""
        screen = self.screen
        if not isinstance(screen, BoardScreen):
            return

        screen.refresh_board()
        if task is not None:
            self.notify(f"Task added to {task.status.label}", timeout=2)

    def _board_command(self, token: KeyToken) -> bool:
        """Apply a board command and re-render; ignored off the board screen."""
        screen = self.screen
        if not isinstance(screen, BoardScreen):
            return False

        changed = self.mode_service.handle_key(token)
        if changed:
            screen.refresh_board()
        return changed


def run(settings: Settings | None = None) -> int:
    """Run the taskboard application.

    Returns:
        Process exit code
    """
    app = TaskBoardApp(settings)
    try:
        app.run()
    except Exception as e:
        logger.exception("Terminal failed to start")
        error(f"Could not start the terminal UI: {e}")
        return 1
    return app.return_code or 0
