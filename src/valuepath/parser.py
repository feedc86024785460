"""Parser for dotted value-path notation.

Grammar::

    path       := segment ("." segment)*
    segment    := identifier accessor*
    accessor   := "[" (index | quotedKey) "]"
    identifier := 1+ chars, none of ".", "[", "]", "'"
    index      := 1+ ASCII digits
    quotedKey  := "'" (any char except unescaped "'")* "'"

Examples:

- ``"Publisher.Name"`` selects a scalar field of a nested struct.
- ``"Publisher.Addresses[0].City"`` selects a field of the first list element.
- ``"Books['Gone With the Wind']"`` selects a map entry; keys are
  case-sensitive. Inside a quoted key ``\\'`` stands for a quote and ``\\\\``
  for a backslash.
"""

from __future__ import annotations

from .config import VALUEPATH_CONFIG
from .errors import InvalidPathError
from .path import Path
from .runtime.logging import get_logger
from .segments import ElementSegment, FieldSegment, KeySegment, Segment

_DIGITS = frozenset("0123456789")
_ESCAPABLE = frozenset("'\\")


class _Scanner:
    """Single left-to-right pass over a subject string, no backtracking."""

    def __init__(self, subject: str) -> None:
        self.subject = subject
        self.length = len(subject)
        self.cursor = 0
        self.parts: list[Segment] = []
        # Start of the identifier being accumulated, if any.
        self.field_start: int | None = None

    def _error(self, reason: str, offset: int | None = None) -> InvalidPathError:
        return InvalidPathError(
            self.subject, reason, self.cursor if offset is None else offset
        )

    def _flush_field(self) -> None:
        assert self.field_start is not None
        name = self.subject[self.field_start : self.cursor]
        self.parts.append(FieldSegment(name=name))
        self.field_start = None

    def scan(self) -> list[Segment]:
        after_accessor = False
        expect_segment = True

        while self.cursor < self.length:
            char = self.subject[self.cursor]
            if char == ".":
                if self.field_start is not None:
                    self._flush_field()
                elif not after_accessor:
                    raise self._error("empty segment before '.'")
                after_accessor = False
                expect_segment = True
                self.cursor += 1
            elif char == "[":
                if self.field_start is not None:
                    self._flush_field()
                elif not after_accessor:
                    raise self._error("accessor has no preceding field name")
                self.cursor = self._scan_accessor(self.cursor)
                after_accessor = True
                expect_segment = False
            elif char in "]'":
                raise self._error(f"unexpected {char!r} outside an accessor")
            else:
                if after_accessor:
                    raise self._error("expected '.' or '[' after ']'")
                if self.field_start is None:
                    self.field_start = self.cursor
                expect_segment = False
                self.cursor += 1

        if self.field_start is not None:
            self._flush_field()
        elif expect_segment and self.length:
            raise self._error("trailing '.'", self.length - 1)
        return self.parts

    def _scan_accessor(self, open_at: int) -> int:
        """Consume one accessor starting at ``open_at``; return the offset past ``]``."""
        pos = open_at + 1
        if pos >= self.length:
            raise self._error("unterminated accessor", open_at)

        char = self.subject[pos]
        if char in _DIGITS:
            return self._scan_index(open_at, pos)
        if char == "'":
            return self._scan_key(open_at, pos + 1)
        if char == "[":
            raise self._error("nested '[' inside accessor", pos)
        if char == "]":
            raise self._error("empty accessor", pos)
        raise self._error(
            f"accessor must start with a digit or a quote, got {char!r}", pos
        )

    def _scan_index(self, open_at: int, start: int) -> int:
        pos = start
        while pos < self.length and self.subject[pos] in _DIGITS:
            pos += 1
        if pos >= self.length:
            raise self._error("unterminated element accessor", open_at)
        if self.subject[pos] != "]":
            raise self._error(
                f"unexpected {self.subject[pos]!r} in element index", pos
            )
        digits = self.subject[start:pos]
        try:
            index = int(digits)
        except ValueError as exc:
            raise self._error(f"element index is not representable: {exc}", start) from exc
        self.parts.append(ElementSegment(index=index))
        return pos + 1

    def _scan_key(self, open_at: int, start: int) -> int:
        chars: list[str] = []
        pos = start
        while True:
            if pos >= self.length:
                raise self._error("unterminated quoted key", open_at)
            char = self.subject[pos]
            if (
                char == "\\"
                and pos + 1 < self.length
                and self.subject[pos + 1] in _ESCAPABLE
            ):
                chars.append(self.subject[pos + 1])
                pos += 2
                continue
            if char == "'":
                break
            chars.append(char)
            pos += 1

        pos += 1
        if pos >= self.length:
            raise self._error("missing ']' after quoted key", open_at)
        if self.subject[pos] != "]":
            raise self._error("expected ']' after quoted key", pos)
        self.parts.append(KeySegment(key="".join(chars)))
        return pos + 1


def parse(subject: str) -> Path:
    """Parse ``subject`` into a :class:`Path`.

    An empty string yields an empty Path. Any grammar violation raises
    :class:`InvalidPathError`; no partial Path is ever returned.
    """
    if not isinstance(subject, str):
        raise TypeError(f"path subject must be a str, got {type(subject).__name__}")

    logger = get_logger()
    try:
        parts = _Scanner(subject).scan()
    except InvalidPathError as exc:
        logger.debug(
            "rejected %r: %s",
            subject,
            exc.reason,
            extra={"valuepath_action_color": "red"},
        )
        raise

    limit = VALUEPATH_CONFIG.max_segments
    if len(parts) > limit:
        raise InvalidPathError(
            subject, f"path has {len(parts)} segments; max allowed is {limit}"
        )

    logger.debug(
        "parsed %r into %d segments",
        subject,
        len(parts),
        extra={"valuepath_action_color": "green"},
    )
    return Path(parts)


__all__ = ["parse"]
