"""Volume label for the sndio output level control."""

from __future__ import annotations

from typing import Any, Callable


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class SndioVolume:
    """Tracks the ``output.level`` control and changes it on scroll and click."""

    def __init__(self, config: dict[str, Any], set_value: Callable[[int, int], Any]) -> None:
        self.config = config
        self._set_value = set_value
        fmt = config.get("format")
        self.format = fmt if isinstance(fmt, str) else "{volume}%"
        self.connected = True
        self.addr = 0
        self.volume = 0
        self.old_volume = 0
        self.maxval = 0
        self.muted = False
        self.classes: set[str] = set()
        self.text = ""

    def set_desc(
        self, func: str, node_name: str, numeric: bool, addr: int, maxval: int, value: int
    ) -> None:
        """Record a control description; only the numeric output level is kept."""
        if func == "level" and node_name == "output" and numeric:
            self.addr = addr
            self.maxval = maxval
            self.volume = value

    def put_val(self, addr: int, value: int) -> None:
        if addr == self.addr:
            self.volume = value

    def handle_scroll(self, direction: str | None) -> bool:
        """Step the volume; False leaves the scroll to user commands."""
        if isinstance(self.config.get("on-scroll-up"), str) or isinstance(
            self.config.get("on-scroll-down"), str
        ):
            return False
        if not self.connected:
            return True
        if direction not in ("up", "down", "left", "right"):
            return True
        step = self.config.get("scroll-step")
        step = step if _is_int(step) else 5
        new_volume = self.old_volume if self.muted else self.volume
        if direction == "up":
            new_volume += step
        elif direction == "down":
            new_volume -= step
        new_volume = min(max(new_volume, 0), self.maxval)
        self.muted = False
        self._set_value(self.addr, new_volume)
        return True

    def handle_toggle(self) -> bool:
        """Toggle mute; False leaves the click to a user command."""
        if isinstance(self.config.get("on-click"), str):
            return False
        if not self.connected:
            return True
        self.muted = not self.muted
        if self.muted:
            self.old_volume = self.volume
            self._set_value(self.addr, 0)
        else:
            self._set_value(self.addr, self.old_volume)
        return True

    def update(self) -> str:
        percent = int(100.0 * self.volume / self.maxval) if self.maxval else 0
        if self.volume == 0:
            self.classes.add("muted")
        else:
            self.classes.discard("muted")
        self.text = self.format.format(volume=percent, raw_value=self.volume)
        return self.text