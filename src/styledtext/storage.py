"""Text storage capabilities consumed by :class:`~styledtext.AttributedText`.

A storage only needs to report its length. Editable storages additionally
replace a range of their content in place; deletion on an attributed text is
only available when its storage is editable.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from .core.ranges import TextRange
from .errors import StorageBoundaryError


@runtime_checkable
class TextStorage(Protocol):
    """A block of text wrapped by an attributed text.

    A plain ``str`` satisfies this protocol.
    """

    def __len__(self) -> int:
        ...


@runtime_checkable
class EditableTextStorage(TextStorage, Protocol):
    """A text storage that supports in-place range replacement."""

    def replace_range(self, text_range: TextRange, replacement: str) -> None:
        """Replace ``text_range`` with ``replacement``.

        ``replacement`` may differ in length from the range. Implementations
        raise :class:`~styledtext.errors.StorageBoundaryError` when the range
        falls outside the content or splits an indivisible unit.
        """
        ...


def is_empty(storage: TextStorage) -> bool:
    """Return ``True`` when ``storage`` holds no content."""

    return len(storage) == 0


def is_editable(storage: Any) -> bool:
    return isinstance(storage, EditableTextStorage)


def _check_range(text_range: TextRange, length: int) -> None:
    if text_range.start > text_range.end or text_range.end > length:
        raise StorageBoundaryError(
            f"Range {text_range.start}..{text_range.end} is outside 0..{length}",
            start=text_range.start,
            end=text_range.end,
            length=length,
        )


class TextBuffer:
    """Owned, growable text indexed by code point."""

    __slots__ = ("_text",)

    def __init__(self, text: str = "") -> None:
        if not isinstance(text, str):
            raise TypeError("TextBuffer content must be a str")
        self._text = text

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"TextBuffer({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TextBuffer):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def is_empty(self) -> bool:
        return not self._text

    def replace_range(self, text_range: TextRange, replacement: str) -> None:
        _check_range(text_range, len(self._text))
        self._text = self._text[: text_range.start] + replacement + self._text[text_range.end :]


class Utf8TextBuffer:
    """Owned, growable UTF-8 text indexed by byte offset."""

    __slots__ = ("_data",)

    def __init__(self, text: str | bytes = "") -> None:
        if isinstance(text, str):
            self._data = bytearray(text.encode("utf-8"))
        else:
            # Validates the input; raises UnicodeDecodeError on bad data.
            bytes(text).decode("utf-8")
            self._data = bytearray(text)

    def __len__(self) -> int:
        return len(self._data)

    def __str__(self) -> str:
        return self._data.decode("utf-8")

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __repr__(self) -> str:
        return f"Utf8TextBuffer({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Utf8TextBuffer):
            return self._data == other._data
        if isinstance(other, str):
            return str(self) == other
        if isinstance(other, (bytes, bytearray)):
            return self._data == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def is_empty(self) -> bool:
        return not self._data

    def is_char_boundary(self, index: int) -> bool:
        """Return ``True`` when ``index`` does not fall inside a multi-byte character."""

        if index == 0 or index == len(self._data):
            return True
        if index < 0 or index > len(self._data):
            return False
        # UTF-8 continuation bytes look like 0b10xxxxxx.
        return (self._data[index] & 0xC0) != 0x80

    def replace_range(self, text_range: TextRange, replacement: str) -> None:
        _check_range(text_range, len(self._data))
        for index in (text_range.start, text_range.end):
            if not self.is_char_boundary(index):
                raise StorageBoundaryError(
                    f"Byte index {index} is not on a UTF-8 character boundary",
                    start=text_range.start,
                    end=text_range.end,
                    length=len(self._data),
                )
        self._data[text_range.start : text_range.end] = replacement.encode("utf-8")


class TextView:
    """Read-only view over an immutable string that may be shared freely."""

    __slots__ = ("_text",)

    def __init__(self, text: str) -> None:
        if not isinstance(text, str):
            raise TypeError("TextView content must be a str")
        self._text = text

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"TextView({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TextView):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)

    def is_empty(self) -> bool:
        return not self._text


__all__ = [
    "TextStorage",
    "EditableTextStorage",
    "TextBuffer",
    "Utf8TextBuffer",
    "TextView",
    "is_empty",
    "is_editable",
]
