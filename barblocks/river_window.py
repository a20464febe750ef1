"""Label showing the title of the focused river view on this bar's output."""

from __future__ import annotations

from typing import Any, Hashable

_MARKUP_ESCAPES = {"&": "&amp;", "<": "&lt;", ">": "&gt;", "'": "&#39;", '"': "&quot;"}


def _escape_markup(text: str) -> str:
    return "".join(_MARKUP_ESCAPES.get(char, char) for char in text)


class RiverWindow:
    """Follows river's seat status for the output ``output`` this bar sits on."""

    def __init__(self, config: dict[str, Any], output: Hashable) -> None:
        self.config = config
        fmt = config.get("format")
        self.format = fmt if isinstance(fmt, str) else "{}"
        self.output = output
        self.focused_output: Hashable | None = None
        self.text = ""
        self.visible = False
        self.classes: set[str] = set()

    def handle_focused_view(self, title: str) -> None:
        """Show ``title``; views focused on other outputs leave the label as it is."""
        if self.focused_output != self.output:
            return
        if title == "" or not self.format:
            self.visible = False
        else:
            self.visible = True
            self.text = self.format.format(_escape_markup(title))

    def handle_focused_output(self, output: Hashable) -> None:
        if output == self.output:
            self.classes.add("focused")
        self.focused_output = output

    def handle_unfocused_output(self, output: Hashable) -> None:
        if output == self.output:
            self.classes.discard("focused")