"""Service for the task creation form."""

import logging

from ..models import FormStep, Status, Task, TaskForm

logger = logging.getLogger(__name__)


class FormService:
    """Two-step entry: title, then description."""

    def new_form(self, target: Status) -> TaskForm:
        """Create an empty form for a column."""
        return TaskForm(target=target)

    def enter_text(self, form: TaskForm, value: str) -> None:
        """Store the value of whichever field currently holds focus."""
        if form.step is FormStep.TITLE:
            form.title = value
        else:
            form.description = value

    def commit(self, form: TaskForm) -> Task | None:
        """
        Handle the commit key.

        From the title field focus moves to the description; from the
        description the task is created. Values are taken verbatim, empty
        ones included.

        Returns:
            The new task on the final commit, otherwise None
        """
        if form.step is FormStep.TITLE:
            form.step = FormStep.DESCRIPTION
            logger.debug("Form: title committed (%r)", form.title)
            return None
        return self.create_task(form)

    def create_task(self, form: TaskForm) -> Task:
        """Build the task described by the form."""
        return Task(status=form.target, title=form.title, description=form.description)
