"""Unit tests for the data models."""

import pytest

from taskboard.models import Board, FormStep, Mode, ModeSwitch, Status, Task, TaskForm


class TestStatusCycle:
    """Tests for the Todo -> In Progress -> Done cycle."""

    @pytest.mark.parametrize("status", list(Status))
    def test_next_cycle_closes(self, status: Status):
        """Three steps right return to the start."""
        assert status.next().next().next() is status

    @pytest.mark.parametrize("status", list(Status))
    def test_prev_cycle_closes(self, status: Status):
        """Three steps left return to the start."""
        assert status.prev().prev().prev() is status

    def test_next_order(self):
        assert Status.TODO.next() is Status.IN_PROGRESS
        assert Status.IN_PROGRESS.next() is Status.DONE
        assert Status.DONE.next() is Status.TODO

    def test_prev_order(self):
        assert Status.TODO.prev() is Status.DONE
        assert Status.DONE.prev() is Status.IN_PROGRESS

    def test_display_order(self):
        """Enum order is the column display order."""
        assert list(Status) == [Status.TODO, Status.IN_PROGRESS, Status.DONE]

    def test_labels(self):
        assert [s.label for s in Status] == ["To Do", "In Progress", "Done"]


class TestTask:
    """Tests for Task."""

    def test_advance_moves_right(self):
        task = Task(status=Status.TODO, title="a")
        task.advance()
        assert task.status is Status.IN_PROGRESS

    def test_advance_wraps_from_done(self):
        """Advancing a Done task wraps to Todo."""
        task = Task(status=Status.DONE, title="a")
        task.advance()
        assert task.status is Status.TODO

    def test_empty_title_accepted(self):
        task = Task(status=Status.TODO, title="", description="")
        assert task.title == ""
        assert task.display_title == "(untitled)"


class TestBoard:
    """Tests for Board helpers."""

    def test_new_board_is_empty_and_unloaded(self):
        board = Board()
        assert all(board.item_count(s) == 0 for s in Status)
        assert board.focused is Status.TODO
        assert not board.loaded
        assert not board.quitting

    def test_sample_board(self):
        board = Board.sample()
        assert board.titles(Status.TODO) == ["create X", "create Y", "create Z"]
        assert board.titles(Status.IN_PROGRESS) == ["write code"]
        assert board.titles(Status.DONE) == ["stay cool"]

    def test_sample_tasks_match_their_column(self):
        board = Board.sample()
        for status in Status:
            assert all(task.status is status for task in board.get_column(status))

    def test_selected_task_on_empty_column_is_none(self):
        board = Board()
        assert board.selected_task() is None

    def test_selected_task_is_positional(self):
        """Two equal tasks are told apart by cursor position."""
        board = Board()
        first = Task(status=Status.TODO, title="same")
        second = Task(status=Status.TODO, title="same")
        board.columns[Status.TODO] = [first, second]
        board.selected[Status.TODO] = 1
        assert board.selected_task() is second


class TestModeSwitch:
    """Tests for the mode switch model."""

    def test_defaults(self):
        switch = ModeSwitch()
        assert switch.active is Mode.BOARD
        assert switch.board_active
        assert not switch.form_active
        assert switch.form.target is Status.TODO
        assert switch.form.step is FormStep.TITLE

    def test_form_defaults(self):
        form = TaskForm(target=Status.DONE)
        assert form.title == ""
        assert form.description == ""
        assert form.step is FormStep.TITLE
