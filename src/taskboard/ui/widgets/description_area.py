"""Multi-line description field."""

from __future__ import annotations

from dataclasses import dataclass

from textual import events
from textual.message import Message
from textual.widgets import TextArea


class DescriptionArea(TextArea):
    """Text area that commits on enter instead of inserting a newline.

    Pasted text keeps its line breaks.
    """

    @dataclass
    class Submitted(Message):
        """Posted when enter is pressed in the description."""

        text_area: DescriptionArea

        @property
        def control(self) -> DescriptionArea:
            return self.text_area

    def _on_key(self, event: events.Key) -> None:
        if event.key == "enter":
            event.prevent_default()
            event.stop()
            self.post_message(self.Submitted(self))
