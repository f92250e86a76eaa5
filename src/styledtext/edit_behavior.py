"""Per-attribute policy deciding what happens to a span when its text is edited."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable


class SpanEditAction(Enum):
    """Result of handling an edit that touches a span."""

    KEEP = "keep"
    """Keep the span, rebasing its endpoints.

    Typical for style-oriented attributes such as bold or italic.
    """

    REMOVE = "remove"
    """Discard the span.

    Typical for attributes whose meaning depends on the exact text they
    cover, like spelling-error markers or compiler diagnostics.
    """


class EditBehavior:
    """Mixin for attribute types that declare an edit policy.

    Subclasses override :meth:`on_edit`; the default keeps the span.
    """

    __slots__ = ()

    def on_edit(self) -> SpanEditAction:
        return SpanEditAction.KEEP


def edit_action_for(attribute: Any, default: SpanEditAction = SpanEditAction.KEEP) -> SpanEditAction:
    """Return the edit policy for ``attribute``.

    Attributes without an ``on_edit`` method fall back to ``default``.
    """

    hook: Callable[[], Any] | None = getattr(attribute, "on_edit", None)
    if hook is None or not callable(hook):
        return default
    action = hook()
    if not isinstance(action, SpanEditAction):
        raise TypeError(
            f"{type(attribute).__name__}.on_edit() must return SpanEditAction, got {action!r}"
        )
    return action


__all__ = ["SpanEditAction", "EditBehavior", "edit_action_for"]
