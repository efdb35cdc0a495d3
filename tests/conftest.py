"""Shared fixtures."""

import pytest

from taskboard.models import Board, ModeSwitch
from taskboard.services import BoardService, FormService, ModeService


@pytest.fixture
def board_service() -> BoardService:
    return BoardService()


@pytest.fixture
def form_service() -> FormService:
    return FormService()


@pytest.fixture
def board(board_service: BoardService) -> Board:
    """Sample board, already sized by a first resize."""
    board = Board.sample()
    board_service.resize(board, 120, 40)
    return board


@pytest.fixture
def mode_service(board: Board) -> ModeService:
    """Mode service wrapping the loaded sample board."""
    return ModeService(ModeSwitch(board=board))
