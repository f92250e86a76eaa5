"""Tests for the reference text storages."""

from __future__ import annotations

import pytest

from styledtext.core.ranges import TextRange
from styledtext.errors import StorageBoundaryError
from styledtext.storage import (
    EditableTextStorage,
    TextBuffer,
    TextStorage,
    TextView,
    Utf8TextBuffer,
    is_editable,
    is_empty,
)


def test_plain_str_is_read_only_storage() -> None:
    assert isinstance("hello", TextStorage)
    assert not is_editable("hello")
    assert is_empty("")
    assert not is_empty("x")


def test_text_buffer_replace_range() -> None:
    buffer = TextBuffer("Hello World")

    buffer.replace_range(TextRange(5, 11), "")
    assert buffer == "Hello"

    buffer.replace_range(TextRange(0, 0), ">> ")
    assert str(buffer) == ">> Hello"
    assert len(buffer) == 8
    assert isinstance(buffer, EditableTextStorage)


def test_text_buffer_rejects_out_of_bounds_range() -> None:
    buffer = TextBuffer("abc")

    with pytest.raises(StorageBoundaryError) as excinfo:
        buffer.replace_range(TextRange(1, 4), "")

    assert excinfo.value.details()["length"] == 3
    assert buffer == "abc"


def test_text_buffer_rejects_inverted_range() -> None:
    buffer = TextBuffer("abc")

    with pytest.raises(StorageBoundaryError):
        buffer.replace_range(TextRange(2, 1), "")


def test_utf8_buffer_indexes_by_byte() -> None:
    buffer = Utf8TextBuffer("héllo")

    assert len(buffer) == 6
    buffer.replace_range(TextRange(1, 3), "e")
    assert buffer == "hello"
    assert bytes(buffer) == b"hello"


def test_utf8_buffer_rejects_split_character() -> None:
    buffer = Utf8TextBuffer("héllo")

    assert not buffer.is_char_boundary(2)
    with pytest.raises(StorageBoundaryError):
        buffer.replace_range(TextRange(2, 3), "")
    assert buffer == "héllo"


def test_utf8_buffer_validates_bytes_input() -> None:
    assert Utf8TextBuffer(b"abc") == "abc"
    with pytest.raises(UnicodeDecodeError):
        Utf8TextBuffer(b"\xff")


def test_text_view_is_not_editable() -> None:
    shared = "shared text"
    first = TextView(shared)
    second = TextView(shared)

    assert first == second
    assert len(first) == 11
    assert not first.is_empty()
    assert TextView("").is_empty()
    assert not isinstance(first, EditableTextStorage)
