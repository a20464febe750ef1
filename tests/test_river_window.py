from barblocks.river_window import RiverWindow


def _window(config=None):
    return RiverWindow(config or {}, "DP-1")


def test_hidden_until_populated():
    window = _window()
    assert window.visible is False
    assert window.text == ""


def test_title_ignored_when_other_output_focused():
    window = _window()
    window.handle_focused_output("HDMI-1")
    window.handle_focused_view("Editor")
    assert window.text == ""
    assert window.visible is False


def test_title_shown_and_escaped():
    window = _window({"format": "[{}]"})
    window.handle_focused_output("DP-1")
    window.handle_focused_view("a & b")
    assert window.visible is True
    assert window.text == "[a &amp; b]"


def test_empty_title_hides_but_keeps_text():
    window = _window()
    window.handle_focused_output("DP-1")
    window.handle_focused_view("Editor")
    window.handle_focused_view("")
    assert window.visible is False
    assert window.text == "Editor"


def test_empty_format_hides():
    window = _window({"format": ""})
    window.handle_focused_output("DP-1")
    window.handle_focused_view("Editor")
    assert window.visible is False


def test_focused_class_follows_output():
    window = _window()
    window.handle_focused_output("DP-1")
    assert "focused" in window.classes
    window.handle_unfocused_output("HDMI-1")
    assert "focused" in window.classes
    window.handle_unfocused_output("DP-1")
    assert "focused" not in window.classes


def test_focusing_other_output_does_not_add_class():
    window = _window()
    window.handle_focused_output("HDMI-1")
    assert window.classes == set()
    assert window.focused_output == "HDMI-1"