"""A clock label refreshed on interval boundaries."""

from __future__ import annotations

from datetime import datetime
from typing import Any


def next_tick_delay(now: float | datetime, interval: float) -> float:
    """Seconds until the next multiple of ``interval`` since the epoch."""
    if isinstance(now, datetime):
        now = now.timestamp()
    return interval - (now % interval)


class SimpleClock:
    """Formats the local time with the configured format."""

    def __init__(self, config: dict[str, Any]) -> None:
        self.config = config
        fmt = config.get("format")
        self.format = fmt if isinstance(fmt, str) else "{:%H:%M}"
        interval = config.get("interval")
        self.interval = interval if isinstance(interval, (int, float)) else 60
        tooltip = config.get("tooltip")
        self.tooltip_enabled = tooltip if isinstance(tooltip, bool) else True
        self.text = ""
        self.tooltip: str | None = None

    def update(self, now: datetime | None = None) -> str:
        """Render the label for ``now`` (the current local time by default)."""
        if now is None:
            now = datetime.now().astimezone()
        self.text = self.format.format(now)
        if self.tooltip_enabled:
            tooltip_format = self.config.get("tooltip-format")
            if isinstance(tooltip_format, str):
                self.tooltip = tooltip_format.format(now)
            else:
                self.tooltip = self.text
        return self.text