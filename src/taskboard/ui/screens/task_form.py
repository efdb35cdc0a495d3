"""New task form screen."""

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Footer, Header, Input, Label

from ...models import FormStep, Task, TaskForm
from ..widgets.description_area import DescriptionArea


class TaskFormScreen(Screen[Task]):
    """Title then description; dismisses with the created task."""

    def __init__(self, form: TaskForm) -> None:
        super().__init__()
        self._form = form

    @property
    def form(self) -> TaskForm:
        return self._form

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="task-form"):
            yield Label(f"New task in [b]{self._form.target.label}[/]", id="form-heading")
            yield Input(value=self._form.title, placeholder="Title", id="title-input")
            yield DescriptionArea(self._form.description, id="description-input", disabled=True)
        yield Footer()

    def on_mount(self) -> None:
        """Focus the title field."""
        self.query_one("#title-input", Input).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Route title edits into the form."""
        if event.input.id == "title-input" and self._form.step is FormStep.TITLE:
            self.app.form_service.enter_text(self._form, event.value)  # pyrefly: ignore[missing-attribute]

    def on_text_area_changed(self, event: DescriptionArea.Changed) -> None:
        """Route description edits into the form."""
        if self._form.step is FormStep.DESCRIPTION:
            self.app.form_service.enter_text(self._form, event.text_area.text)  # pyrefly: ignore[missing-attribute]

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Commit the title and move on to the description."""
        event.stop()
        self._commit()

    def on_description_area_submitted(self, event: DescriptionArea.Submitted) -> None:
        """Commit the description, which finishes the form."""
        event.stop()
        self._commit()

    def _commit(self) -> None:
        task = self.app.mode_service.commit_form()  # pyrefly: ignore[missing-attribute]
        if task is not None:
            self.dismiss(task)
            return

        if self._form.step is FormStep.DESCRIPTION:
            title = self.query_one("#title-input", Input)
            description = self.query_one("#description-input", DescriptionArea)
            title.disabled = True
            description.disabled = False
            description.focus()
