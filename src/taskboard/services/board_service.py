"""Service for board state management."""

from __future__ import annotations

import logging

from ..models import Board, Status, Task

logger = logging.getLogger(__name__)

# Rows taken by the header, footer and column borders
CHROME_ROWS = 4


class BoardService:
    """Navigation, promotion and sizing of the board."""

    def resize(self, board: Board, width: int, height: int) -> bool:
        """
        Size the columns from the first resize event.

        Later resizes are left to the widgets.

        Returns:
            True if this call loaded the board
        """
        if board.loaded:
            return False

        board.column_width = width // len(Status)
        board.column_height = max(height - CHROME_ROWS, 0)
        board.loaded = True
        logger.info(
            "Board loaded: %dx%d (column %dx%d)",
            width,
            height,
            board.column_width,
            board.column_height,
        )
        return True

    def next_column(self, board: Board) -> None:
        """Focus the column to the right, wrapping at Done."""
        if not board.loaded:
            return
        board.focused = board.focused.next()
        logger.debug("Focus -> %s", board.focused.value)

    def prev_column(self, board: Board) -> None:
        """Focus the column to the left, wrapping at Todo."""
        if not board.loaded:
            return
        board.focused = board.focused.prev()
        logger.debug("Focus -> %s", board.focused.value)

    def navigate_task(self, board: Board, delta: int) -> bool:
        """
        Move the cursor of the focused column.

        Args:
            board: Board to update
            delta: -1 to move up, 1 to move down

        Returns:
            True if the cursor moved
        """
        if not board.loaded:
            return False

        count = board.item_count(board.focused)
        if count == 0:
            return False

        current = board.selected[board.focused]
        new_index = max(0, min(current + delta, count - 1))
        if new_index == current:
            return False

        board.selected[board.focused] = new_index
        return True

    def promote(self, board: Board) -> Task | None:
        """
        Move the selected task of the focused column to the next column.

        The task is removed at its cursor position, its status advanced and
        it is appended to the bottom of the destination column, all in one
        call.

        Returns:
            The moved task, or None if there was nothing to move
        """
        if not board.loaded:
            logger.debug("promote: board not loaded")
            return None

        task = board.selected_task()
        if task is None:
            logger.debug("promote: nothing selected in %s", board.focused.value)
            return None

        source = board.focused
        index = board.selected[source]
        del board.columns[source][index]
        task.advance()
        board.columns[task.status].append(task)
        self._clamp_selection(board, source)

        logger.info("Task promoted: %r (%s -> %s)", task.title, source.value, task.status.value)
        return task

    def insert_task(self, board: Board, task: Task) -> None:
        """Append a task to the bottom of the column named by its status."""
        board.columns[task.status].append(task)
        logger.info("Task added: %r -> %s", task.title, task.status.value)

    def quit(self, board: Board) -> None:
        """Mark the board as shutting down."""
        board.quitting = True

    def _clamp_selection(self, board: Board, status: Status) -> None:
        """Pull a column's cursor back inside the column."""
        count = board.item_count(status)
        board.selected[status] = min(board.selected[status], max(count - 1, 0))
