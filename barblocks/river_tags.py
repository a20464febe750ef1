"""Buttons for river's tags, showing which are focused, occupied or urgent."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable

DEFAULT_TAG_COUNT = 9
MAX_TAG_COUNT = 32
RIGHT_BUTTON = 3


def _as_string(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _is_uint(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def tag_labels(config: dict[str, Any]) -> list[str]:
    """Labels of the tag buttons: numbers from 1, overridden by ``tag-labels``."""
    count = config.get("num-tags")
    count = min(MAX_TAG_COUNT, count) if _is_uint(count) else DEFAULT_TAG_COUNT
    labels = [str(tag + 1) for tag in range(count)]
    custom = config.get("tag-labels")
    if isinstance(custom, list) and custom:
        for index, label in enumerate(custom[:count]):
            labels[index] = _as_string(label)
    return labels


@dataclass
class TagButton:
    label: str
    tag: int
    classes: set[str] = field(default_factory=set)


class RiverTags:
    """Tracks river's tag state; clicks run river commands through ``run_command``."""

    def __init__(
        self, config: dict[str, Any], run_command: Callable[[list[str]], Any]
    ) -> None:
        self.config = config
        self._run_command = run_command
        self.click_enabled = not bool(config.get("disable-click"))
        self.buttons = [
            TagButton(label=label, tag=1 << index)
            for index, label in enumerate(tag_labels(config))
        ]

    def _mark(self, class_name: str, tags: int) -> None:
        for button in self.buttons:
            if button.tag & tags:
                button.classes.add(class_name)
            else:
                button.classes.discard(class_name)

    def handle_focused_tags(self, tags: int) -> None:
        self._mark("focused", tags)

    def handle_view_tags(self, view_tags: Iterable[int]) -> None:
        """Mark the tags that hold at least one view as occupied."""
        for button in self.buttons:
            button.classes.discard("occupied")
        for tags in view_tags:
            for button in self.buttons:
                if tags & button.tag:
                    button.classes.add("occupied")

    def handle_urgent_tags(self, tags: int) -> None:
        self._mark("urgent", tags)

    def handle_primary_clicked(self, tag: int) -> None:
        """Focus exactly the tags in ``tag``."""
        if not self.click_enabled:
            return
        self._run_command(["set-focused-tags", str(tag)])

    def handle_button_press(self, button: int, tag: int) -> bool:
        """Toggle the tags in ``tag`` on a right click."""
        if self.click_enabled and button == RIGHT_BUTTON:
            self._run_command(["toggle-focused-tags", str(tag)])
        return True