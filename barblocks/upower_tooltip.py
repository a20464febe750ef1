"""Rows of the UPower tooltip, one per battery-powered peripheral."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Mapping

MISSING_ICON = "battery-missing-symbolic"


class DeviceKind(enum.IntEnum):
    UNKNOWN = 0
    LINE_POWER = 1
    BATTERY = 2
    UPS = 3
    MONITOR = 4
    MOUSE = 5
    KEYBOARD = 6
    PDA = 7
    PHONE = 8
    MEDIA_PLAYER = 9
    TABLET = 10
    COMPUTER = 11
    GAMING_INPUT = 12
    PEN = 13
    TOUCHPAD = 14
    MODEM = 15
    NETWORK = 16
    HEADSET = 17
    SPEAKERS = 18
    HEADPHONES = 19
    VIDEO = 20
    OTHER_AUDIO = 21
    REMOTE_CONTROL = 22
    PRINTER = 23
    SCANNER = 24
    CAMERA = 25
    WEARABLE = 26
    TOY = 27
    BLUETOOTH_GENERIC = 28
    LAST = 29


@dataclass
class Device:
    """The properties of a power device that the bar uses."""

    kind: DeviceKind = DeviceKind.UNKNOWN
    percentage: float = 0.0
    native_path: str | None = None
    model: str | None = None
    icon_name: str | None = None
    state: int = 0
    time_to_empty: int = 0
    time_to_full: int = 0


@dataclass(frozen=True)
class TooltipRow:
    device_icon: str
    model: str
    icon: str
    percentage: str


_KIND_ICONS = {
    DeviceKind.LINE_POWER: "ac-adapter-symbolic",
    DeviceKind.BATTERY: "battery",
    DeviceKind.UPS: "uninterruptible-power-supply-symbolic",
    DeviceKind.MONITOR: "video-display-symbolic",
    DeviceKind.MOUSE: "input-mouse-symbolic",
    DeviceKind.KEYBOARD: "input-keyboard-symbolic",
    DeviceKind.PDA: "pda-symbolic",
    DeviceKind.PHONE: "phone-symbolic",
    DeviceKind.MEDIA_PLAYER: "multimedia-player-symbolic",
    DeviceKind.TABLET: "computer-apple-ipad-symbolic",
    DeviceKind.COMPUTER: "computer-symbolic",
    DeviceKind.GAMING_INPUT: "input-gaming-symbolic",
    DeviceKind.PEN: "input-tablet-symbolic",
    DeviceKind.TOUCHPAD: "input-touchpad-symbolic",
    DeviceKind.MODEM: "modem-symbolic",
    DeviceKind.NETWORK: "network-wired-symbolic",
    DeviceKind.HEADSET: "audio-headset-symbolic",
    DeviceKind.HEADPHONES: "audio-headphones-symbolic",
    DeviceKind.OTHER_AUDIO: "audio-speakers-symbolic",
    DeviceKind.SPEAKERS: "audio-speakers-symbolic",
    DeviceKind.VIDEO: "camera-web-symbolic",
    DeviceKind.PRINTER: "printer-symbolic",
    DeviceKind.SCANNER: "scanner-symbolic",
    DeviceKind.CAMERA: "camera-photo-symbolic",
    DeviceKind.BLUETOOTH_GENERIC: "bluetooth-active-symbolic",
}


def device_icon(kind: DeviceKind | int) -> str:
    """Icon name representing a kind of device."""
    try:
        kind = DeviceKind(kind)
    except ValueError:
        return "battery-symbolic"
    return _KIND_ICONS.get(kind, "battery-symbolic")


def percent_string(percentage: float) -> str:
    return f"{int(percentage + 0.5)}%"


def tooltip_rows(
    devices: Mapping[str, Device | None], has_icon: Callable[[str], bool]
) -> list[TooltipRow]:
    """One row per device worth showing; line power and the main battery are left out."""
    rows: list[TooltipRow] = []
    for device in devices.values():
        if device is None:
            continue
        if (
            device.kind == DeviceKind.LINE_POWER
            or not device.native_path
            or device.native_path == "BAT0"
        ):
            continue
        kind_icon = device_icon(device.kind)
        if not has_icon(kind_icon):
            kind_icon = MISSING_ICON
        icon = device.icon_name
        if not icon or not has_icon(icon):
            icon = MISSING_ICON
        rows.append(
            TooltipRow(
                device_icon=kind_icon,
                model=device.model or "",
                icon=icon,
                percentage=percent_string(device.percentage),
            )
        )
    return rows