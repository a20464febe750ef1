from barblocks.sni_host import StatusNotifierHost, TrayItemRef, split_service


def make():
    added, removed = [], []
    host = StatusNotifierHost(0, added.append, removed.append, pid=42)
    return host, added, removed


def test_split_service_with_path():
    assert split_service(":1.5/org/ayatana/Item") == (":1.5", "/org/ayatana/Item")


def test_split_service_without_path_uses_default():
    assert split_service("org.example.App") == ("org.example.App", "/StatusNotifierItem")


def test_split_round_trip():
    service = ":1.7/path/x"
    bus, path = split_service(service)
    assert bus + path == service


def test_host_names():
    host, _, _ = make()
    assert host.bus_name == "org.kde.StatusNotifierHost-42-0"
    assert host.object_path == "/StatusNotifierHost/0"


def test_add_item_once():
    host, added, _ = make()
    item = host.add_registered_item(":1.5/Item")
    assert item == TrayItemRef(":1.5", "/Item")
    assert host.add_registered_item(":1.5/Item") is None
    assert added == [item]
    assert host.items == [item]


def test_unregister_removes_and_notifies():
    host, _, removed = make()
    host.add_registered_item("org.example.A")
    host.add_registered_item("org.example.B")
    assert host.item_unregistered("org.example.A") is True
    assert removed == [TrayItemRef("org.example.A", "/StatusNotifierItem")]
    assert host.items == [TrayItemRef("org.example.B", "/StatusNotifierItem")]


def test_unregister_unknown_item():
    host, _, removed = make()
    assert host.item_unregistered("org.example.A") is False
    assert removed == []


def test_name_vanished_clears_items():
    host, _, removed = make()
    host.add_registered_item("org.example.A")
    host.name_vanished()
    assert host.items == []
    assert removed == []