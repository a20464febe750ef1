"""Label showing a temperature read from a thermal sensor file."""

from __future__ import annotations

import math
import os
import re
from typing import Any

_DEFAULT_FORMAT = "{temperatureC}°C"
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _round(value: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def resolve_sensor_path(config: dict[str, Any]) -> str:
    """Path of the file holding the temperature in millidegrees Celsius."""
    hwmon_path = config.get("hwmon-path")
    if isinstance(hwmon_path, str):
        return hwmon_path
    abs_path = config.get("hwmon-path-abs")
    filename = config.get("input-filename")
    if isinstance(abs_path, str) and isinstance(filename, str):
        entries = sorted(os.scandir(abs_path), key=lambda entry: entry.name)
        if not entries:
            raise FileNotFoundError(f"No entries in {abs_path}")
        return f"{entries[0].path}/{filename}"
    zone = config.get("thermal-zone")
    zone = zone if _is_int(zone) else 0
    return f"/sys/class/thermal/thermal_zone{zone}/temp"


def read_temperature(path: str) -> float:
    """Read the first line of ``path`` as millidegrees and return degrees Celsius."""
    try:
        with open(path, encoding="utf-8", errors="replace") as sensor:
            line = sensor.readline()
    except OSError as exc:
        raise RuntimeError(f"Can't open {path}") from exc
    match = _LEADING_INT.match(line)
    millidegrees = int(match.group(1)) if match else 0
    return millidegrees / 1000.0


def _pick_icon(icons: Any, value: int, maximum: int) -> str:
    if isinstance(icons, dict):
        icons = icons.get("default")
    if isinstance(icons, list) and icons:
        step = (maximum or 100) // len(icons)
        index = len(icons) - 1 if step == 0 else min(max(value // step, 0), len(icons) - 1)
        icons = icons[index]
    return icons if isinstance(icons, str) else ""


class Temperature:
    """Formats the sensor's temperature and flags it when above the threshold."""

    def __init__(self, config: dict[str, Any]) -> None:
        self.config = config
        fmt = config.get("format")
        self.format = fmt if isinstance(fmt, str) else _DEFAULT_FORMAT
        interval = config.get("interval")
        self.interval = interval if isinstance(interval, (int, float)) else 10
        tooltip = config.get("tooltip")
        self.tooltip_enabled = tooltip if isinstance(tooltip, bool) else True
        self.path = resolve_sensor_path(config)
        try:
            with open(self.path, "rb"):
                pass
        except OSError as exc:
            raise RuntimeError(f"Can't open {self.path}") from exc
        self.text = ""
        self.tooltip: str | None = None
        self.visible = True
        self.classes: set[str] = set()

    def is_critical(self, celsius: int) -> bool:
        threshold = self.config.get("critical-threshold")
        return _is_int(threshold) and celsius >= threshold

    def update(self) -> None:
        temperature = read_temperature(self.path)
        celsius = _round(temperature)
        fahrenheit = _round(temperature * 1.8 + 32)
        kelvin = _round(temperature + 273.15)

        fmt = self.format
        if self.is_critical(celsius):
            critical_format = self.config.get("format-critical")
            if isinstance(critical_format, str):
                fmt = critical_format
            self.classes.add("critical")
        else:
            self.classes.discard("critical")

        if not fmt:
            self.visible = False
            return
        self.visible = True

        threshold = self.config.get("critical-threshold")
        max_temp = threshold if _is_int(threshold) else 0
        values = {
            "temperatureC": celsius,
            "temperatureF": fahrenheit,
            "temperatureK": kelvin,
        }
        icon = _pick_icon(self.config.get("format-icons"), celsius, max_temp)
        self.text = fmt.format(icon=icon, **values)
        if self.tooltip_enabled:
            tooltip_format = self.config.get("tooltip-format")
            if not isinstance(tooltip_format, str):
                tooltip_format = _DEFAULT_FORMAT
            self.tooltip = tooltip_format.format(**values)