import pytest

from barblocks.jsonparse import parse_json


def test_empty_string_is_empty_object():
    assert parse_json("") == {}


def test_empty_bytes_is_empty_object():
    assert parse_json(b"") == {}


def test_object_is_parsed():
    assert parse_json('{"success": true, "id": "bar-0"}') == {"success": True, "id": "bar-0"}


def test_array_is_parsed():
    assert parse_json('[{"name": "1"}, {"name": "2"}]') == [{"name": "1"}, {"name": "2"}]


def test_bytes_are_accepted():
    assert parse_json(b'{"change": "default"}') == {"change": "default"}


@pytest.mark.parametrize("text", ["{", "not json", '{"a": }'])
def test_invalid_document_raises(text):
    with pytest.raises(ValueError):
        parse_json(text)