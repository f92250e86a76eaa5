"""Structured helpers for representing attribute spans and their bounds."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Iterator


@dataclass(slots=True, frozen=True)
class TextRange(Sequence[int]):
    """Resolved half-open ``[start, end)`` range over a text's index space.

    Values are stored exactly as given. An inverted range is representable
    and behaves as an empty range: it contains no index and overlaps nothing.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", self._coerce_index(self.start, "start"))
        object.__setattr__(self, "end", self._coerce_index(self.end, "end"))

    @staticmethod
    def _coerce_index(value: Any, label: str) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"TextRange {label} must be an integer")
        if value < 0:
            raise ValueError(f"TextRange {label} must not be negative")
        return int(value)

    def __len__(self) -> int:
        return 2

    def __getitem__(self, index: int | slice) -> int | tuple[int, ...]:
        if isinstance(index, slice):
            return self.to_tuple()[index]
        if index in (0, -2):
            return self.start
        if index in (1, -1):
            return self.end
        raise IndexError("TextRange index out of range")

    def __iter__(self) -> Iterator[int]:
        yield self.start
        yield self.end

    @property
    def length(self) -> int:
        """Return the width of the range, ``0`` for empty or inverted ranges."""

        return max(0, self.end - self.start)

    @property
    def is_empty(self) -> bool:
        return self.end <= self.start

    def contains(self, index: int) -> bool:
        """Return ``True`` when ``start <= index < end``."""

        return self.start <= index < self.end

    def overlaps(self, other: TextRange) -> bool:
        """Return ``True`` when the two ranges share at least one index.

        Abutting ranges do not overlap, and an empty or inverted range
        overlaps nothing.
        """

        if self.is_empty or other.is_empty:
            return False
        return self.start < other.end and self.end > other.start

    def shift(self, delta: int) -> TextRange:
        """Return a copy translated by ``delta``."""

        return TextRange(self.start + delta, self.end + delta)

    def to_tuple(self) -> tuple[int, int]:
        return (self.start, self.end)

    def to_slice(self) -> slice:
        return slice(self.start, self.end)

    def to_dict(self) -> dict[str, int]:
        return {"start": self.start, "end": self.end}

    @classmethod
    def from_value(cls, value: Any) -> TextRange:
        """Coerce ``value`` into a :class:`TextRange`.

        Accepts ranges, step-1 ``range`` objects, slices with integer bounds,
        ``(start, end)`` sequences and mappings with ``start``/``end`` keys.
        """

        if isinstance(value, TextRange):
            return value
        if isinstance(value, range):
            if value.step != 1:
                raise ValueError("TextRange cannot be built from a stepped range")
            return cls(value.start, value.stop)
        if isinstance(value, slice):
            if value.step not in (None, 1):
                raise ValueError("TextRange cannot be built from a stepped slice")
            if value.start is None or value.stop is None:
                raise ValueError("TextRange slices require explicit start and stop")
            return cls(value.start, value.stop)
        if isinstance(value, Mapping):
            start = value.get("start")
            end = value.get("end")
            if start is None or end is None:
                raise ValueError("TextRange mappings require start and end keys")
            return cls(start, end)
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            seq = list(value)
            if len(seq) != 2:
                raise ValueError("TextRange sequences must have exactly two entries")
            return cls(seq[0], seq[1])
        raise TypeError(f"Unsupported TextRange input: {type(value).__name__}")


class BoundKind(Enum):
    """How a single range endpoint is interpreted."""

    INCLUDED = auto()
    EXCLUDED = auto()
    UNBOUNDED = auto()


@dataclass(slots=True, frozen=True)
class Bound:
    """One endpoint of a bounds-generic span."""

    kind: BoundKind
    value: int | None = None

    def __post_init__(self) -> None:
        if self.kind is BoundKind.UNBOUNDED:
            if self.value is not None:
                raise ValueError("Unbounded bounds do not carry a value")
            return
        value = self.value
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValueError(f"{self.kind.name.lower()} bound requires a non-negative integer")
        object.__setattr__(self, "value", int(value))

    @classmethod
    def included(cls, value: int) -> Bound:
        return cls(BoundKind.INCLUDED, value)

    @classmethod
    def excluded(cls, value: int) -> Bound:
        return cls(BoundKind.EXCLUDED, value)

    @classmethod
    def unbounded(cls) -> Bound:
        return cls(BoundKind.UNBOUNDED)

    @property
    def is_unbounded(self) -> bool:
        return self.kind is BoundKind.UNBOUNDED

    def resolve_start(self) -> int:
        """Resolve this bound, used as a start, to an inclusive index."""

        if self.kind is BoundKind.INCLUDED:
            return self.value  # type: ignore[return-value]
        if self.kind is BoundKind.EXCLUDED:
            return self.value + 1  # type: ignore[operator]
        return 0

    def resolve_end(self, length: int) -> int:
        """Resolve this bound, used as an end, to an exclusive index."""

        if self.kind is BoundKind.INCLUDED:
            return self.value + 1  # type: ignore[operator]
        if self.kind is BoundKind.EXCLUDED:
            return self.value  # type: ignore[return-value]
        return length


@dataclass(slots=True, frozen=True)
class SpanBounds:
    """Start/end bounds of a span, resolved lazily against the text length."""

    start: Bound
    end: Bound

    def resolve(self, length: int) -> TextRange:
        """Return the concrete ``[start, end)`` range for a text of ``length``."""

        return TextRange(self.start.resolve_start(), self.end.resolve_end(length))

    @classmethod
    def from_range(cls, text_range: TextRange) -> SpanBounds:
        return cls(Bound.included(text_range.start), Bound.excluded(text_range.end))

    @classmethod
    def full(cls) -> SpanBounds:
        """Return bounds covering the whole text, whatever its length."""

        return cls(Bound.unbounded(), Bound.unbounded())

    @staticmethod
    def is_bounds_form(value: Any) -> bool:
        """Return ``True`` for bounds-generic inputs rather than fixed ranges.

        :class:`SpanBounds`, ``(Bound, Bound)`` pairs and slices are
        bounds-generic; everything :meth:`TextRange.from_value` accepts is a
        fixed half-open range.
        """

        if isinstance(value, (SpanBounds, slice)):
            return True
        return (
            isinstance(value, tuple)
            and len(value) == 2
            and isinstance(value[0], Bound)
            and isinstance(value[1], Bound)
        )

    @classmethod
    def from_value(cls, value: Any) -> SpanBounds:
        """Coerce ``value`` into :class:`SpanBounds`.

        Slices map ``None`` endpoints to unbounded ones; every other accepted
        input is treated as a fixed half-open range.
        """

        if isinstance(value, SpanBounds):
            return value
        if isinstance(value, tuple) and cls.is_bounds_form(value):
            return cls(value[0], value[1])
        if isinstance(value, slice):
            if value.step not in (None, 1):
                raise ValueError("SpanBounds cannot be built from a stepped slice")
            start = Bound.unbounded() if value.start is None else Bound.included(value.start)
            end = Bound.unbounded() if value.stop is None else Bound.excluded(value.stop)
            return cls(start, end)
        return cls.from_range(TextRange.from_value(value))


__all__ = ["TextRange", "BoundKind", "Bound", "SpanBounds"]
