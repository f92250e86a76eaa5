"""Exceptions raised when a styled-text operation rejects its input."""

from __future__ import annotations


class StyledTextError(Exception):
    """Base class for rejected preconditions in :mod:`styledtext`."""

    default_reason = "invalid_input"

    def __init__(
        self,
        message: str,
        *,
        reason: str | None = None,
        start: int | None = None,
        end: int | None = None,
        length: int | None = None,
    ) -> None:
        super().__init__(message)
        self.reason = reason or self.default_reason
        self.start = start
        self.end = end
        self.length = length

    def details(self) -> dict[str, str | int | None]:
        return {
            "reason": self.reason,
            "start": self.start,
            "end": self.end,
            "length": self.length,
        }


class ApplyAttributeError(StyledTextError):
    """Raised when an attribute cannot be applied."""


class InvalidBoundsError(ApplyAttributeError):
    """The bounds given to ``apply_attribute`` fall outside the text."""

    default_reason = "invalid_bounds"


class DeleteError(StyledTextError):
    """Raised when a deletion cannot be performed."""


class InvalidRangeError(DeleteError):
    """The deletion range is inverted or extends past the end of the text."""

    default_reason = "invalid_range"


class StorageBoundaryError(StyledTextError, ValueError):
    """A storage was asked to edit outside its content or mid-character."""

    default_reason = "storage_boundary"


__all__ = [
    "StyledTextError",
    "ApplyAttributeError",
    "InvalidBoundsError",
    "DeleteError",
    "InvalidRangeError",
    "StorageBoundaryError",
]
