"""Status notifier host: keeps the tray items the watcher has registered."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable

DEFAULT_ITEM_PATH = "/StatusNotifierItem"


def split_service(service: str) -> tuple[str, str]:
    """Split a registered service into bus name and object path."""
    index = service.find("/")
    if index != -1:
        return service[:index], service[index:]
    return service, DEFAULT_ITEM_PATH


@dataclass(frozen=True)
class TrayItemRef:
    bus_name: str
    object_path: str


class StatusNotifierHost:
    """Adds and removes tray items as services register and unregister."""

    def __init__(
        self,
        host_id: int,
        on_add: Callable[[TrayItemRef], object],
        on_remove: Callable[[TrayItemRef], object],
        pid: int | None = None,
    ) -> None:
        if pid is None:
            pid = os.getpid()
        self.bus_name = f"org.kde.StatusNotifierHost-{pid}-{host_id}"
        self.object_path = f"/StatusNotifierHost/{host_id}"
        self._on_add = on_add
        self._on_remove = on_remove
        self.items: list[TrayItemRef] = []

    def add_registered_item(self, service: str) -> TrayItemRef | None:
        """Add the item for ``service`` unless it is already known; return the new item."""
        item = TrayItemRef(*split_service(service))
        if item in self.items:
            return None
        self.items.append(item)
        self._on_add(item)
        return item

    def item_unregistered(self, service: str) -> bool:
        """Remove the item for ``service``; return whether one was removed."""
        item = TrayItemRef(*split_service(service))
        if item not in self.items:
            return False
        self._on_remove(item)
        self.items.remove(item)
        return True

    def name_vanished(self) -> None:
        """Forget all items once the watcher has gone away."""
        self.items.clear()