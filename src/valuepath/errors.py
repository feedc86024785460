"""Exception types raised by valuepath."""

from __future__ import annotations


class ValuePathError(Exception):
    """Base class for all valuepath errors."""


class InvalidPathError(ValuePathError, ValueError):
    """Raised when a string is not a valid value path.

    ``offset`` is the character index in ``subject`` where the problem was
    detected, or ``None`` when the failure is not tied to a position.
    """

    def __init__(self, subject: str, reason: str, offset: int | None = None):
        self.subject = subject
        self.reason = reason
        self.offset = offset
        if offset is None:
            message = f"invalid path {subject!r}: {reason}"
        else:
            message = f"invalid path {subject!r} at offset {offset}: {reason}"
        super().__init__(message)


__all__ = ["InvalidPathError", "ValuePathError"]
