"""Text with out-of-band attributes applied to ranges of a text storage."""

from .attributed_text import AttributedText, RangedAttribute
from .core.ranges import Bound, BoundKind, SpanBounds, TextRange
from .edit_behavior import EditBehavior, SpanEditAction, edit_action_for
from .errors import (
    ApplyAttributeError,
    DeleteError,
    InvalidBoundsError,
    InvalidRangeError,
    StorageBoundaryError,
    StyledTextError,
)
from .settings import Settings, load_settings
from .storage import EditableTextStorage, TextBuffer, TextStorage, TextView, Utf8TextBuffer

__version__ = "0.1.0"

__all__ = [
    "AttributedText",
    "RangedAttribute",
    "Bound",
    "BoundKind",
    "SpanBounds",
    "TextRange",
    "EditBehavior",
    "SpanEditAction",
    "edit_action_for",
    "StyledTextError",
    "ApplyAttributeError",
    "InvalidBoundsError",
    "DeleteError",
    "InvalidRangeError",
    "StorageBoundaryError",
    "Settings",
    "load_settings",
    "TextStorage",
    "EditableTextStorage",
    "TextBuffer",
    "Utf8TextBuffer",
    "TextView",
]
