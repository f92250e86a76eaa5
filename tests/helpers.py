"""Shared attribute types used across the test suite."""

from __future__ import annotations

from dataclasses import dataclass

from styledtext import EditBehavior, SpanEditAction


@dataclass(frozen=True)
class Style(EditBehavior):
    """Presentation attribute that survives edits (bold, italic, ...)."""

    name: str

    def on_edit(self) -> SpanEditAction:
        return SpanEditAction.KEEP


@dataclass(frozen=True)
class Diagnostic(EditBehavior):
    """Annotation tied to the exact text it covers (spelling, lint, ...)."""

    message: str

    def on_edit(self) -> SpanEditAction:
        return SpanEditAction.REMOVE


@dataclass(frozen=True)
class Plain:
    """Attribute that does not declare an edit policy."""

    label: str
