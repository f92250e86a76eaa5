"""Text with attributes applied to ranges of an underlying storage."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Generic, Iterator, TypeVar

from .core.ranges import Bound, SpanBounds, TextRange
from .edit_behavior import SpanEditAction, edit_action_for
from .errors import InvalidBoundsError, InvalidRangeError
from .settings import Settings
from .storage import TextStorage, is_editable

LOGGER = logging.getLogger(__name__)

T = TypeVar("T", bound=TextStorage)
A = TypeVar("A")


@dataclass(slots=True, frozen=True)
class RangedAttribute(Generic[A]):
    """An attribute and the bounds of the range it was applied to."""

    bounds: SpanBounds
    attribute: A

    def resolve(self, length: int) -> TextRange:
        return self.bounds.resolve(length)


class AttributedText(Generic[T, A]):
    """A block of text with attributes applied to ranges within it.

    Attributes are kept in the order they were applied. Overlapping spans,
    including identical ones, are never merged; queries report every match
    and leave priority to the caller.
    """

    __slots__ = ("_text", "_attributes", "_settings")

    def __init__(self, text: T, *, settings: Settings | None = None) -> None:
        if not isinstance(text, TextStorage):
            raise TypeError(f"{type(text).__name__} does not implement TextStorage")
        self._text = text
        self._attributes: list[RangedAttribute[A]] = []
        self._settings = settings or Settings()

    def __repr__(self) -> str:
        return f"AttributedText(text={self._text!r}, attributes={len(self._attributes)})"

    def __len__(self) -> int:
        return len(self._text)

    @property
    def text(self) -> T:
        return self._text

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def ranged_attributes(self) -> tuple[RangedAttribute[A], ...]:
        return tuple(self._attributes)

    @property
    def attribute_count(self) -> int:
        return len(self._attributes)

    def is_empty(self) -> bool:
        return len(self._text) == 0

    def clear_attributes(self) -> None:
        self._attributes.clear()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def apply_attribute(self, span: Any, attribute: A) -> None:
        """Apply ``attribute`` to ``span``.

        ``span`` may be a :class:`SpanBounds`, a ``(Bound, Bound)`` pair, a
        slice (``None`` meaning unbounded) or any fixed half-open range form
        accepted by :meth:`TextRange.from_value`. Raises
        :class:`InvalidBoundsError` without changing anything when the
        resolved end lies past the end of the text. Fixed half-open ranges
        must also start within the text; bounds-generic spans only have
        their end checked.
        """

        check_start = not SpanBounds.is_bounds_form(span)
        try:
            bounds = SpanBounds.from_value(span)
        except ValueError as exc:
            raise InvalidBoundsError(str(exc)) from exc
        text_len = len(self._text)
        resolved = bounds.resolve(text_len)
        if resolved.end > text_len or (check_start and resolved.start > text_len):
            LOGGER.debug(
                "Rejected attribute bounds %s..%s for text of length %s",
                resolved.start,
                resolved.end,
                text_len,
            )
            raise InvalidBoundsError(
                f"Bounds {resolved.start}..{resolved.end} exceed text length {text_len}",
                start=resolved.start,
                end=resolved.end,
                length=text_len,
            )
        self._attributes.append(RangedAttribute(bounds, attribute))

    def delete(self, span: Any) -> None:
        """Delete ``span`` from the text and rebase every attribute span.

        Spans before the deletion are untouched and spans after it shift
        left. Spans touched by the deletion are removed when their attribute
        asks for :attr:`SpanEditAction.REMOVE`; otherwise a span surrounding
        the deletion shrinks, and any other touched span is truncated to the
        part that lay before the deletion. Spans left empty are dropped.
        """

        if not is_editable(self._text):
            raise TypeError(f"{type(self._text).__name__} does not support editing")
        text_len = len(self._text)
        deletion = self._resolve_deletion(span, text_len)
        if deletion.start > deletion.end or deletion.end > text_len:
            raise InvalidRangeError(
                f"Deletion range {deletion.start}..{deletion.end} is invalid for text of length {text_len}",
                start=deletion.start,
                end=deletion.end,
                length=text_len,
            )

        deleted_len = deletion.end - deletion.start
        new_len = text_len - deleted_len
        retained: list[RangedAttribute[A]] = []
        for entry in self._attributes:
            rebased = self._rebase(entry, deletion, deleted_len, text_len, new_len)
            if rebased is not None:
                retained.append(rebased)

        # Storage rejects invalid boundaries before anything is committed.
        self._text.replace_range(deletion, "")  # type: ignore[attr-defined]
        dropped = len(self._attributes) - len(retained)
        self._attributes = retained
        LOGGER.debug(
            "Deleted %s..%s (%s units); %s spans kept, %s dropped",
            deletion.start,
            deletion.end,
            deleted_len,
            len(retained),
            dropped,
        )

    @staticmethod
    def _resolve_deletion(span: Any, text_len: int) -> TextRange:
        if isinstance(span, TextRange):
            return span
        try:
            bounds = SpanBounds.from_value(span)
        except ValueError as exc:
            raise InvalidRangeError(str(exc)) from exc
        return bounds.resolve(text_len)

    def _rebase(
        self,
        entry: RangedAttribute[A],
        deletion: TextRange,
        deleted_len: int,
        old_len: int,
        new_len: int,
    ) -> RangedAttribute[A] | None:
        current = entry.resolve(old_len)
        if current.end <= deletion.start:
            self._trace("before", current, current.to_tuple(), entry.attribute)
            return entry
        if current.start >= deletion.end:
            if deleted_len == 0:
                return None if current.is_empty else entry
            start, end = current.start - deleted_len, current.end - deleted_len
            self._trace("after", current, (start, end), entry.attribute)
            return self._with_range(entry, start, end, new_len)

        action = edit_action_for(entry.attribute)
        if action is SpanEditAction.REMOVE:
            self._trace("remove", current, None, entry.attribute)
            return None
        if current.start < deletion.start and current.end > deletion.end:
            start, end = current.start, current.end - deleted_len
        else:
            # Only the part before the deletion survives, even when the
            # span continued past the deletion's end.
            start = min(current.start, deletion.start)
            end = min(current.end, deletion.start)
        self._trace("keep", current, (start, end), entry.attribute)
        return self._with_range(entry, start, end, new_len)

    @staticmethod
    def _with_range(entry: RangedAttribute[A], start: int, end: int, new_len: int) -> RangedAttribute[A] | None:
        if end <= start:
            return None
        start_bound = entry.bounds.start
        if not (start_bound.is_unbounded and start == 0):
            start_bound = Bound.included(start)
        end_bound = entry.bounds.end
        if not (end_bound.is_unbounded and end == new_len):
            end_bound = Bound.excluded(end)
        return RangedAttribute(SpanBounds(start_bound, end_bound), entry.attribute)

    def _trace(
        self,
        decision: str,
        before: TextRange,
        after: tuple[int, int] | None,
        attribute: A,
    ) -> None:
        if not self._settings.trace_rebase:
            return
        LOGGER.debug("rebase %s: %r %s -> %s", decision, attribute, before.to_tuple(), after)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def spans(self) -> Iterator[tuple[TextRange, A]]:
        """Yield every ``(range, attribute)`` pair, resolved against the current text."""

        text_len = len(self._text)
        for entry in self._attributes:
            yield entry.resolve(text_len), entry.attribute

    def spans_at(self, index: int) -> Iterator[tuple[TextRange, A]]:
        """Yield ``(range, attribute)`` pairs whose range contains ``index``."""

        for resolved, attribute in self.spans():
            if resolved.contains(index):
                yield resolved, attribute

    def spans_for_range(self, span: Any) -> Iterator[tuple[TextRange, A]]:
        """Yield ``(range, attribute)`` pairs whose range overlaps ``span``."""

        query = SpanBounds.from_value(span).resolve(len(self._text))
        for resolved, attribute in self.spans():
            if resolved.overlaps(query):
                yield resolved, attribute

    def attributes_at(self, index: int) -> Iterator[A]:
        """Yield the attributes that apply at ``index``.

        Conflicting attributes are not resolved; everything is reported in
        the order it was applied.
        """

        for _, attribute in self.spans_at(index):
            yield attribute

    def attributes_for_range(self, span: Any) -> Iterator[A]:
        """Yield the attributes whose span overlaps ``span``.

        Spans that merely touch the query's edges do not overlap it, and a
        zero-width query matches nothing; use :meth:`attributes_at` for
        point lookups.
        """

        for _, attribute in self.spans_for_range(span):
            yield attribute


__all__ = ["AttributedText", "RangedAttribute"]
