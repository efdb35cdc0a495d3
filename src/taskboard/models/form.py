"""Task creation form model."""

from enum import Enum

from pydantic import BaseModel

from .status import Status


class FormStep(str, Enum):
    """Which field of the form currently holds focus."""

    TITLE = "title"
    DESCRIPTION = "description"


class TaskForm(BaseModel):
    """Two-step entry of a new task bound to a target column."""

    target: Status = Status.TODO
    title: str = ""
    description: str = ""
    step: FormStep = FormStep.TITLE
