"""Task domain model."""

from pydantic import BaseModel

from .status import Status


class Task(BaseModel):
    """A single card on the board.

    Tasks carry no identity of their own: a task is addressed by its
    position in the column that holds it.
    """

    status: Status = Status.TODO
    title: str = ""
    description: str = ""

    @property
    def display_title(self) -> str:
        """Title for display - placeholder when the title is empty."""
        return self.title or "(untitled)"

    def advance(self) -> None:
        """Move the status one column to the right, wrapping at Done."""
        self.status = self.status.next()
