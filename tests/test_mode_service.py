"""Tests for ModeService handoffs and key routing."""

from taskboard.models import Board, FormStep, Mode, ModeSwitch, Status, Task
from taskboard.services import KeyToken, ModeService


def make_service(todo: list[str], focused: Status = Status.TODO) -> ModeService:
    """Loaded board with the given Todo titles and nothing elsewhere."""
    board = Board(focused=focused)
    board.columns[Status.TODO] = [Task(status=Status.TODO, title=t) for t in todo]
    service = ModeService(ModeSwitch(board=board))
    service.board_service.resize(board, 90, 30)
    return service


def fill_form(service: ModeService, title: str, description: str) -> Task | None:
    """Type and commit both fields of the active form."""
    service.form_service.enter_text(service.form, title)
    assert service.commit_form() is None
    service.form_service.enter_text(service.form, description)
    return service.commit_form()


class TestHandoff:
    """Tests for board <-> form handoffs."""

    def test_open_form_targets_focused_column(self, mode_service: ModeService):
        mode_service.board.focused = Status.DONE

        form = mode_service.open_form()

        assert form is not None
        assert form.target is Status.DONE
        assert mode_service.active is Mode.FORM

    def test_open_form_before_loaded_is_noop(self):
        service = ModeService(ModeSwitch(board=Board.sample()))
        assert service.open_form() is None
        assert service.active is Mode.BOARD

    def test_open_form_on_empty_column(self):
        """Creating a task does not need a selection."""
        service = make_service([], focused=Status.IN_PROGRESS)
        assert service.open_form() is not None

    def test_open_form_while_form_active_is_noop(self, mode_service: ModeService):
        form = mode_service.open_form()
        assert mode_service.open_form() is None
        assert mode_service.form is form

    def test_round_trip_appends_to_target_column(self):
        service = make_service(["a", "b"], focused=Status.IN_PROGRESS)

        service.open_form()
        task = fill_form(service, "x", "y")

        board = service.board
        assert service.active is Mode.BOARD
        assert board.titles(Status.TODO) == ["a", "b"]
        assert board.get_column(Status.IN_PROGRESS) == [
            Task(status=Status.IN_PROGRESS, title="x", description="y")
        ]
        assert board.get_column(Status.IN_PROGRESS)[-1] is task
        assert board.get_column(Status.DONE) == []

    def test_round_trip_from_todo(self):
        service = make_service(["a", "b"])

        service.open_form()
        fill_form(service, "x", "y")

        assert service.board.titles(Status.TODO) == ["a", "b", "x"]
        assert service.board.get_column(Status.IN_PROGRESS) == []

    def test_dormant_board_survives_round_trip(self, mode_service: ModeService):
        mode_service.handle_key(KeyToken.RIGHT)
        mode_service.handle_key(KeyToken.DOWN)
        board = mode_service.board
        before = board.model_copy(deep=True)

        mode_service.open_form()
        assert mode_service.board is board
        assert board == before
        fill_form(mode_service, "x", "y")

        assert mode_service.board is board
        assert board.focused == before.focused
        assert board.selected == before.selected
        for status in Status:
            expected = before.titles(status) + (["x"] if status is before.focused else [])
            assert board.titles(status) == expected

    def test_first_commit_stays_in_form(self, mode_service: ModeService):
        mode_service.open_form()
        assert mode_service.commit_form() is None
        assert mode_service.active is Mode.FORM
        assert mode_service.form.step is FormStep.DESCRIPTION

    def test_commit_form_while_board_active_is_noop(self, mode_service: ModeService):
        assert mode_service.commit_form() is None
        assert mode_service.active is Mode.BOARD

    def test_form_slot_kept_after_completion(self, mode_service: ModeService):
        form = mode_service.open_form()
        fill_form(mode_service, "x", "y")
        assert mode_service.form is form


class TestHandleKey:
    """Tests for key routing."""

    def test_scenario_right_right_enter(self, mode_service: ModeService):
        mode_service.handle_key(KeyToken.RIGHT)
        assert mode_service.board.focused is Status.IN_PROGRESS
        mode_service.handle_key(KeyToken.RIGHT)
        assert mode_service.board.focused is Status.DONE

        assert mode_service.handle_key(KeyToken.CONFIRM)

        board = mode_service.board
        assert board.titles(Status.TODO) == ["create X", "create Y", "create Z", "stay cool"]
        assert board.titles(Status.IN_PROGRESS) == ["write code"]
        assert board.titles(Status.DONE) == []

    def test_left_wraps(self, mode_service: ModeService):
        mode_service.handle_key(KeyToken.LEFT)
        assert mode_service.board.focused is Status.DONE

    def test_confirm_on_empty_column_reports_no_change(self, mode_service: ModeService):
        mode_service.handle_key(KeyToken.LEFT)
        mode_service.handle_key(KeyToken.CONFIRM)
        before = mode_service.board.model_copy(deep=True)

        assert mode_service.handle_key(KeyToken.CONFIRM) is False
        assert mode_service.board == before

    def test_board_keys_ignored_before_loaded(self):
        service = ModeService(ModeSwitch(board=Board.sample()))
        for token in (KeyToken.RIGHT, KeyToken.DOWN, KeyToken.CONFIRM, KeyToken.NEW_TASK):
            assert service.handle_key(token) is False
        assert service.board.focused is Status.TODO
        assert service.active is Mode.BOARD

    def test_new_task_key_opens_form(self, mode_service: ModeService):
        assert mode_service.handle_key(KeyToken.NEW_TASK)
        assert mode_service.active is Mode.FORM

    def test_navigation_keys_pass_through_in_form(self, mode_service: ModeService):
        mode_service.handle_key(KeyToken.NEW_TASK)
        for token in (KeyToken.LEFT, KeyToken.RIGHT, KeyToken.NEW_TASK, KeyToken.OTHER):
            assert mode_service.handle_key(token) is False
        assert mode_service.board.focused is Status.TODO
        assert mode_service.active is Mode.FORM

    def test_confirm_keys_complete_form(self, mode_service: ModeService):
        mode_service.handle_key(KeyToken.NEW_TASK)
        mode_service.form_service.enter_text(mode_service.form, "x")
        mode_service.handle_key(KeyToken.CONFIRM)
        mode_service.form_service.enter_text(mode_service.form, "y")
        mode_service.handle_key(KeyToken.CONFIRM)

        assert mode_service.active is Mode.BOARD
        assert mode_service.board.titles(Status.TODO)[-1] == "x"

    def test_quit_from_board(self, mode_service: ModeService):
        assert mode_service.handle_key(KeyToken.QUIT)
        assert mode_service.board.quitting

    def test_quit_from_form_skips_handoff(self, mode_service: ModeService):
        mode_service.handle_key(KeyToken.NEW_TASK)
        mode_service.form_service.enter_text(mode_service.form, "x")

        mode_service.handle_key(KeyToken.QUIT)

        assert mode_service.board.quitting
        assert mode_service.active is Mode.FORM
        assert "x" not in mode_service.board.titles(Status.TODO)

    def test_quit_before_loaded(self):
        service = ModeService(ModeSwitch(board=Board.sample()))
        assert service.handle_key(KeyToken.QUIT)
        assert service.board.quitting

    def test_exactly_one_mode_active(self, mode_service: ModeService):
        tokens = [KeyToken.RIGHT, KeyToken.NEW_TASK, KeyToken.CONFIRM, KeyToken.CONFIRM, KeyToken.LEFT]
        for token in tokens:
            mode_service.handle_key(token)
            assert mode_service.switch.board_active != mode_service.switch.form_active
