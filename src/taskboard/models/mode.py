"""Board/form mode switch."""

from enum import Enum

from pydantic import BaseModel, Field

from .board import Board
from .form import TaskForm


class Mode(str, Enum):
    """The two mutually exclusive screens."""

    BOARD = "board"
    FORM = "form"


class ModeSwitch(BaseModel):
    """Holds the last-known board and form; exactly one is active.

    The inactive slot is left untouched so that switching back resumes
    exactly where it left off.
    """

    board: Board = Field(default_factory=Board)
    form: TaskForm = Field(default_factory=TaskForm)
    active: Mode = Mode.BOARD

    @property
    def board_active(self) -> bool:
        return self.active is Mode.BOARD

    @property
    def form_active(self) -> bool:
        return self.active is Mode.FORM
