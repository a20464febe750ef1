"""Label showing the current river binding mode."""

from __future__ import annotations

from typing import Any

_MARKUP_ESCAPES = {"&": "&amp;", "<": "&lt;", ">": "&gt;", "'": "&#39;", '"': "&quot;"}


def _escape_markup(text: str) -> str:
    return "".join(_MARKUP_ESCAPES.get(char, char) for char in text)


class RiverMode:
    """Shows the mode reported by river, with the mode name as a style class."""

    def __init__(self, config: dict[str, Any]) -> None:
        self.config = config
        fmt = config.get("format")
        self.format = fmt if isinstance(fmt, str) else "{}"
        self.mode = ""
        self.text = ""
        self.visible = False
        self.classes: set[str] = set()

    def handle_mode(self, mode: str) -> None:
        if not self.format:
            self.visible = False
        else:
            if self.mode:
                self.classes.discard(self.mode)
            self.classes.add(mode)
            self.text = self.format.format(_escape_markup(mode))
            self.visible = True
        self.mode = mode