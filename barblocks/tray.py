"""Container of status notifier tray items."""

from __future__ import annotations

from typing import Any


class Tray:
    """Keeps tray items in display order and is visible only when it has items."""

    def __init__(self, config: dict[str, Any]) -> None:
        self.config = config
        spacing = config.get("spacing")
        self.spacing = (
            spacing
            if isinstance(spacing, int) and not isinstance(spacing, bool) and spacing >= 0
            else 0
        )
        reverse = config.get("reverse-direction")
        self.reverse = reverse if isinstance(reverse, bool) else False
        self.items: list[Any] = []
        self.visible = False

    def on_add(self, item: Any) -> None:
        if self.reverse:
            self.items.insert(0, item)
        else:
            self.items.append(item)

    def on_remove(self, item: Any) -> None:
        if item in self.items:
            self.items.remove(item)

    def update(self) -> None:
        self.visible = bool(self.items)