"""Battery label driven by the UPower display device and its peripherals."""

from __future__ import annotations

import enum
import threading
from typing import Any, Callable, Mapping

from barblocks.upower_tooltip import (
    MISSING_ICON,
    Device,
    DeviceKind,
    TooltipRow,
    percent_string,
    tooltip_rows,
)

_DEFAULT_FORMAT = "{percentage}"
_DEFAULT_FORMAT_ALT = "{percentage} {time}"


class DeviceState(enum.IntEnum):
    UNKNOWN = 0
    CHARGING = 1
    DISCHARGING = 2
    EMPTY = 3
    FULLY_CHARGED = 4
    PENDING_CHARGE = 5
    PENDING_DISCHARGE = 6


_CHARGING = (DeviceState.CHARGING, DeviceState.PENDING_CHARGE)
_DISCHARGING = (DeviceState.DISCHARGING, DeviceState.PENDING_DISCHARGE)


def device_status(state: DeviceState | int) -> str:
    """Style class name for a device state."""
    if state in _CHARGING:
        return "charging"
    if state in _DISCHARGING:
        return "discharging"
    if state == DeviceState.FULLY_CHARGED:
        return "full"
    if state == DeviceState.EMPTY:
        return "empty"
    return "unknown-status"


def _short_number(value: float) -> str:
    return str(int(value)) if value.is_integer() else repr(value)


def time_to_string(seconds: int) -> str:
    """Hours with one decimal, or minutes below an hour; empty for zero."""
    if seconds == 0:
        return ""
    hours = seconds / 3600
    hours_fixed = int(hours * 10) / 10
    minutes = int(hours * 60 * 10) / 10
    if hours_fixed >= 1:
        return f"{_short_number(hours_fixed)} h"
    return f"{_short_number(minutes)} min"


def _is_uint(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


class UPower:
    """Holds the power devices and renders the display device's charge."""

    def __init__(self, config: dict[str, Any]) -> None:
        self.config = config
        icon_size = config.get("icon-size")
        self.icon_size = icon_size if _is_uint(icon_size) else 20
        hide = config.get("hide-if-empty")
        self.hide_if_empty = hide if isinstance(hide, bool) else True
        fmt = config.get("format")
        self.format = fmt if isinstance(fmt, str) else _DEFAULT_FORMAT
        fmt_alt = config.get("format-alt")
        self.format_alt = fmt_alt if isinstance(fmt_alt, str) else _DEFAULT_FORMAT_ALT
        spacing = config.get("tooltip-spacing")
        self.tooltip_spacing = spacing if _is_uint(spacing) else 4
        padding = config.get("tooltip-padding")
        self.tooltip_padding = padding if _is_uint(padding) else 4
        tooltip = config.get("tooltip")
        self.tooltip_enabled = tooltip if isinstance(tooltip, bool) else True
        self.has_tooltip = self.tooltip_enabled

        self.has_icon: Callable[[str], bool] = lambda name: True
        self.devices: dict[str, Device] = {}
        self.display_device: Device | None = None
        self.running = False
        self.show_alt_text = False
        self.last_status = ""
        self.classes: set[str] = set()
        self.visible = False
        self.text = ""
        self.icon_name = ""
        self.tooltip_rows: list[TooltipRow] = []
        self._lock = threading.Lock()

    def add_device(self, path: str, device: Device | None) -> None:
        """Add or replace the device at ``path``."""
        if device is None:
            return
        with self._lock:
            self.devices[path] = device

    def remove_device(self, path: str) -> None:
        with self._lock:
            self.devices.pop(path, None)

    def reset_devices(self, devices: Mapping[str, Device | None]) -> None:
        """Replace all devices with ``devices``."""
        with self._lock:
            self.devices.clear()
        for path, device in devices.items():
            self.add_device(path, device)

    def set_display_device(self, device: Device | None) -> None:
        with self._lock:
            self.display_device = device

    def set_running(self, running: bool) -> None:
        """Record whether the UPower service is present; the label follows it."""
        with self._lock:
            self.running = running
            self.visible = running

    def handle_toggle(self) -> bool:
        """Switch between the main and alternative format; return the new choice."""
        with self._lock:
            self.show_alt_text = not self.show_alt_text
            return self.show_alt_text

    def update(self) -> None:
        with self._lock:
            if not self.running:
                return
            display = self.display_device or Device()
            valid = display.kind in (DeviceKind.BATTERY, DeviceKind.UPS)

            status = device_status(display.state)
            if self.last_status:
                self.classes.discard(self.last_status)
            self.classes.add(status)
            self.last_status = status

            if not self.devices and not valid and self.hide_if_empty:
                self.visible = False
                return
            self.visible = True

            if self.tooltip_enabled:
                self.tooltip_rows = tooltip_rows(self.devices, self.has_icon)
                self.has_tooltip = bool(self.devices) and bool(self.tooltip_rows)

            percentage = percent_string(display.percentage) if valid else ""
            if display.state in _CHARGING:
                time_format = time_to_string(display.time_to_full)
            elif display.state in _DISCHARGING:
                time_format = time_to_string(display.time_to_empty)
            else:
                time_format = ""
            fmt = self.format_alt if self.show_alt_text else self.format
            label = fmt.format(percentage=percentage, time=time_format)
            self.text = "" if not label.strip(" ") else label

            icon = display.icon_name
            if not icon or not self.has_icon(icon):
                icon = MISSING_ICON
            self.icon_name = icon