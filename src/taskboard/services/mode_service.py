"""Service for handing control between the board and the form."""

from __future__ import annotations

import logging
from enum import Enum

from ..models import Board, Mode, ModeSwitch, Task, TaskForm
from .board_service import BoardService
from .form_service import FormService

logger = logging.getLogger(__name__)


class KeyToken(str, Enum):
    """Key commands understood by the board and the form."""

    QUIT = "quit"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    CONFIRM = "confirm"
    NEW_TASK = "new_task"
    OTHER = "other"


class ModeService:
    """Routes commands to the active screen and performs handoffs."""

    def __init__(
        self,
        switch: ModeSwitch | None = None,
        board_service: BoardService | None = None,
        form_service: FormService | None = None,
    ) -> None:
        self.switch = switch or ModeSwitch()
        self.board_service = board_service or BoardService()
        self.form_service = form_service or FormService()

    @property
    def active(self) -> Mode:
        return self.switch.active

    @property
    def board(self) -> Board:
        return self.switch.board

    @property
    def form(self) -> TaskForm:
        return self.switch.form

    def open_form(self) -> TaskForm | None:
        """
        Hand off from the board to a new form targeting the focused column.

        The board stays in its slot untouched.

        Returns:
            The new form, or None if the board cannot hand off yet
        """
        if not self.switch.board_active or not self.board.loaded:
            logger.debug("open_form: ignored (active=%s, loaded=%s)", self.active.value, self.board.loaded)
            return None

        self.switch.form = self.form_service.new_form(self.board.focused)
        self.switch.active = Mode.FORM
        logger.info("Handoff board -> form (target=%s)", self.form.target.value)
        return self.form

    def commit_form(self) -> Task | None:
        """
        Commit the active form.

        On the final commit the new task is delivered to the retained board
        and the board becomes active again.

        Returns:
            The created task, or None if the form is still in progress
        """
        if not self.switch.form_active:
            return None

        task = self.form_service.commit(self.form)
        if task is None:
            return None

        self.board_service.insert_task(self.board, task)
        self.switch.active = Mode.BOARD
        logger.info("Handoff form -> board")
        return task

    def quit(self) -> None:
        """End the session from either screen."""
        self.board_service.quit(self.board)
        logger.info("Quit requested from %s", self.active.value)

    def handle_key(self, token: KeyToken) -> bool:
        """
        Route a key command to the active screen.

        Returns:
            True if the command changed state; False for ignored keys and
            keys left to the focused widget
        """
        if token is KeyToken.QUIT:
            self.quit()
            return True
        if self.switch.form_active:
            return self._handle_form_key(token)
        return self._handle_board_key(token)

    def _handle_board_key(self, token: KeyToken) -> bool:
        board = self.board
        if not board.loaded:
            return False

        if token is KeyToken.LEFT:
            self.board_service.prev_column(board)
            return True
        if token is KeyToken.RIGHT:
            self.board_service.next_column(board)
            return True
        if token is KeyToken.UP:
            return self.board_service.navigate_task(board, -1)
        if token is KeyToken.DOWN:
            return self.board_service.navigate_task(board, 1)
        if token is KeyToken.CONFIRM:
            return self.board_service.promote(board) is not None
        if token is KeyToken.NEW_TASK:
            return self.open_form() is not None
        return False

    def _handle_form_key(self, token: KeyToken) -> bool:
        if token is KeyToken.CONFIRM:
            # Both commits change state: the step or the active mode
            self.commit_form()
            return True
        return False
