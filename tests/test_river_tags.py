import pytest

from barblocks.river_tags import RiverTags, tag_labels


def make(config=None):
    calls = []
    return RiverTags(config or {}, calls.append), calls


def test_default_labels_are_numbers_from_one():
    labels = tag_labels({})
    assert len(labels) == 9
    assert labels == [str(n) for n in range(1, 10)]


def test_tag_count_is_capped():
    assert len(tag_labels({"num-tags": 40})) == 32


@pytest.mark.parametrize("value", [-1, True, "5", 2.5])
def test_invalid_tag_count_falls_back_to_default(value):
    assert len(tag_labels({"num-tags": value})) == 9


def test_custom_labels_override_first_tags():
    assert tag_labels({"num-tags": 3, "tag-labels": ["a", "b"]}) == ["a", "b", "3"]


def test_custom_labels_beyond_count_are_ignored():
    assert tag_labels({"num-tags": 2, "tag-labels": ["a", "b", "c"]}) == ["a", "b"]


def test_buttons_carry_bit_masks():
    tags, _ = make({"num-tags": 4})
    assert [b.tag for b in tags.buttons] == [1, 2, 4, 8]


def test_focused_tags_set_and_clear():
    tags, _ = make()
    tags.handle_focused_tags(0b101)
    focused = [i for i, b in enumerate(tags.buttons) if "focused" in b.classes]
    assert focused == [0, 2]
    tags.handle_focused_tags(0b10)
    focused = [i for i, b in enumerate(tags.buttons) if "focused" in b.classes]
    assert focused == [1]


def test_view_tags_replace_occupied_state():
    tags, _ = make()
    tags.handle_view_tags([1, 4])
    assert [i for i, b in enumerate(tags.buttons) if "occupied" in b.classes] == [0, 2]
    tags.handle_view_tags([])
    assert all("occupied" not in b.classes for b in tags.buttons)


def test_urgent_tags():
    tags, _ = make()
    tags.handle_urgent_tags(1 << 8)
    assert [i for i, b in enumerate(tags.buttons) if "urgent" in b.classes] == [8]


def test_primary_click_focuses_tag():
    tags, calls = make()
    tags.handle_primary_clicked(4)
    assert calls == [["set-focused-tags", "4"]]


def test_right_click_toggles_tag():
    tags, calls = make()
    assert tags.handle_button_press(1, 2) is True
    assert calls == []
    assert tags.handle_button_press(3, 2) is True
    assert calls == [["toggle-focused-tags", "2"]]


def test_disable_click_sends_nothing():
    tags, calls = make({"disable-click": True})
    tags.handle_primary_clicked(1)
    tags.handle_button_press(3, 1)
    assert calls == []