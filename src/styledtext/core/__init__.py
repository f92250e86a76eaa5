"""Core range types shared by storages and the attributed text container."""

from .ranges import Bound, BoundKind, SpanBounds, TextRange

__all__ = ["Bound", "BoundKind", "SpanBounds", "TextRange"]
