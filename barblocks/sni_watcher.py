"""Status notifier watcher: the registry of tray hosts and items."""

from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger(__name__)

HOST_PATH = "/StatusNotifierHost"
ITEM_PATH = "/StatusNotifierItem"
_MAX_NAME_LENGTH = 255
_WELL_KNOWN_ELEMENT = re.compile(r"[A-Za-z_-][A-Za-z0-9_-]*")
_UNIQUE_ELEMENT = re.compile(r"[A-Za-z0-9_-]+")


class WatcherError(Exception):
    """A registration request was rejected."""


def is_valid_bus_name(name: str) -> bool:
    """Whether ``name`` is a valid D-Bus bus name, unique or well-known."""
    if not name or len(name) > _MAX_NAME_LENGTH:
        return False
    unique = name.startswith(":")
    elements = (name[1:] if unique else name).split(".")
    if len(elements) < 2:
        return False
    pattern = _UNIQUE_ELEMENT if unique else _WELL_KNOWN_ELEMENT
    return all(pattern.fullmatch(element) for element in elements)


class _WatchType(enum.Enum):
    HOST = "host"
    ITEM = "item"


@dataclass(eq=False)
class _Watch:
    type: _WatchType
    service: str
    bus_name: str
    object_path: str

    @property
    def key(self) -> str:
        return f"{self.bus_name}{self.object_path}"


def _resolve(service: str, sender: str, default_path: str) -> tuple[str, str]:
    if service.startswith("/"):
        return sender, service
    return service, default_path


class StatusNotifierWatcher:
    """Tracks registered hosts and items and reports changes through callbacks."""

    def __init__(
        self,
        on_item_registered: Callable[[str], object] | None = None,
        on_item_unregistered: Callable[[str], object] | None = None,
        on_host_registered: Callable[[], object] | None = None,
    ) -> None:
        self._on_item_registered = on_item_registered
        self._on_item_unregistered = on_item_unregistered
        self._on_host_registered = on_host_registered
        self.hosts: list[_Watch] = []
        self.items: list[_Watch] = []
        self.is_host_registered = False

    @staticmethod
    def _find(watches: list[_Watch], bus_name: str, object_path: str) -> _Watch | None:
        return next(
            (
                w
                for w in watches
                if w.bus_name == bus_name and w.object_path == object_path
            ),
            None,
        )

    def register_host(self, service: str, sender: str) -> None:
        """Register a host; raise WatcherError for a bad name or a duplicate."""
        bus_name, object_path = _resolve(service, sender, HOST_PATH)
        if not is_valid_bus_name(bus_name):
            raise WatcherError(f"D-Bus bus name '{bus_name}' is not valid")
        if self._find(self.hosts, bus_name, object_path) is not None:
            raise WatcherError(
                f"Status Notifier Host with bus name '{bus_name}' and object path "
                f"'{object_path}' is already registered"
            )
        self.hosts.insert(0, _Watch(_WatchType.HOST, service, bus_name, object_path))
        if not self.is_host_registered:
            self.is_host_registered = True
            if self._on_host_registered is not None:
                self._on_host_registered()

    def register_item(self, service: str, sender: str) -> None:
        """Register an item; raise WatcherError for a bad name, ignore duplicates."""
        bus_name, object_path = _resolve(service, sender, ITEM_PATH)
        if not is_valid_bus_name(bus_name):
            raise WatcherError(f"D-Bus bus name '{bus_name}' is not valid")
        if self._find(self.items, bus_name, object_path) is not None:
            logger.warning(
                "Status Notifier Item with bus name '%s' and object path '%s' "
                "is already registered",
                bus_name,
                object_path,
            )
            return
        watch = _Watch(_WatchType.ITEM, service, bus_name, object_path)
        self.items.insert(0, watch)
        if self._on_item_registered is not None:
            self._on_item_registered(watch.key)

    def name_vanished(self, bus_name: str) -> None:
        """Drop every host and item owned by ``bus_name``."""
        for watch in [w for w in self.hosts if w.bus_name == bus_name]:
            self.hosts.remove(watch)
            if not self.hosts:
                self.is_host_registered = False
                if self._on_host_registered is not None:
                    self._on_host_registered()
        for watch in [w for w in self.items if w.bus_name == bus_name]:
            self.items.remove(watch)
            if self._on_item_unregistered is not None:
                self._on_item_unregistered(watch.key)

    def registered_items(self) -> list[str]:
        """Registered items as bus name followed by object path, newest first."""
        return [watch.key for watch in self.items]