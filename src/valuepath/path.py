"""The Path value: an ordered sequence of segments, root to leaf."""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from typing import Any

from pydantic import TypeAdapter

from .segments import ElementSegment, FieldSegment, KeySegment, Segment

_PARTS_ADAPTER: TypeAdapter[list[Segment]] = TypeAdapter(list[Segment])
_SEGMENT_TYPES = (FieldSegment, ElementSegment, KeySegment)


def _check_segment(segment: object) -> Segment:
    if not isinstance(segment, _SEGMENT_TYPES):
        raise TypeError(
            "path segments must be FieldSegment, ElementSegment or KeySegment, "
            f"got {type(segment).__name__}"
        )
    return segment


class Path:
    """A JSONPath-like route to a single value nested within a resource.

    A Path is built either by parsing dotted notation (see
    :func:`valuepath.parse`) or incrementally with :meth:`push_back`. Every
    positional accessor is total: a missing segment is reported as ``None``
    rather than raised.

    Given a Path for ``"Publisher.Addresses[0].City"``::

        >>> path = Path.from_string("Publisher.Addresses[0].City")
        >>> str(path)
        'Publisher.Addresses.City'
        >>> path.to_bracket_string()
        'Publisher.Addresses[0].City'
    """

    __slots__ = ("_parts",)

    def __init__(self, segments: Iterable[Segment] | None = None) -> None:
        if isinstance(segments, str):
            raise TypeError(
                "Path() takes segments, not a string; use Path.from_string() to parse"
            )
        self._parts: list[Segment] = (
            [_check_segment(part) for part in segments] if segments is not None else []
        )

    @classmethod
    def from_string(cls, subject: str) -> Path:
        """Parse dotted notation; raises ``InvalidPathError`` when malformed."""
        from .parser import parse

        return parse(subject)

    def string(self) -> str:
        """Dotted notation of the field names only.

        Element and key segments are dropped, so this is not an inverse of
        parsing for bracketed paths. Use :meth:`to_bracket_string` for that.
        """
        return ".".join(
            part.name for part in self._parts if isinstance(part, FieldSegment)
        )

    def to_bracket_string(self) -> str:
        """Render every segment, reconstructing ``[index]`` and ``['key']``."""
        rendered: list[str] = []
        for part in self._parts:
            if isinstance(part, FieldSegment) and rendered:
                rendered.append(".")
            rendered.append(part.render())
        return "".join(rendered)

    def pop(self) -> Segment | None:
        """Remove and return the last segment."""
        if not self._parts:
            return None
        return self._parts.pop()

    def pop_front(self) -> Segment | None:
        """Remove and return the first segment."""
        if not self._parts:
            return None
        return self._parts.pop(0)

    def at(self, index: int) -> Segment | None:
        if index < 0 or index >= len(self._parts):
            return None
        return self._parts[index]

    def front(self) -> Segment | None:
        return self._parts[0] if self._parts else None

    def back(self) -> Segment | None:
        return self._parts[-1] if self._parts else None

    def push_back(self, segment: Segment) -> None:
        self._parts.append(_check_segment(segment))

    def copy(self) -> Path:
        """Return an independent duplicate.

        Segments are immutable, so only the sequence itself is duplicated.
        """
        return Path(self._parts)

    def copy_at(self, index: int) -> Path | None:
        """Return an independent duplicate of segments ``0`` through ``index``.

        e.g. given a Path for ``"X.Y"``, ``copy_at(0)`` holds just ``X`` and
        ``copy_at(1)`` holds ``X.Y``. Returns ``None`` when ``index`` is out of
        range.
        """
        if index < 0 or index >= len(self._parts):
            return None
        return Path(self._parts[: index + 1])

    def is_empty(self) -> bool:
        return not self._parts

    def size(self) -> int:
        return len(self._parts)

    def has_prefix(self, subject: str) -> bool:
        """Whether ``subject``, split on ``.``, matches the leading segments.

        If the Path represents ``"A.B"``: ``"A"`` and ``"A.B"`` match, while
        ``"A.B.C"``, ``"B"`` and ``"A.C"`` do not.
        """
        return self._match_prefix(subject, fold=False)

    def has_prefix_fold(self, subject: str) -> bool:
        """Same as :meth:`has_prefix` but compares case-insensitively.

        Each character is lowercased on its own, so ``"ß"`` does not match
        ``"SS"``.
        """
        return self._match_prefix(subject, fold=True)

    def _match_prefix(self, subject: str, *, fold: bool) -> bool:
        candidates = subject.split(".")
        if len(candidates) > len(self._parts):
            return False
        for part, candidate in zip(self._parts, candidates):
            identifier = part.identifier
            if fold:
                identifier, candidate = identifier.lower(), candidate.lower()
            if identifier != candidate:
                return False
        return True

    def to_dict(self) -> dict[str, Any]:
        return {"parts": _PARTS_ADAPTER.dump_python(self._parts, mode="json")}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Path:
        if not isinstance(data, dict) or "parts" not in data:
            raise TypeError(f"path data must be a dict with 'parts', got {data!r}")
        return cls(_PARTS_ADAPTER.validate_python(data["parts"]))

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, payload: str | bytes) -> Path:
        return cls.from_dict(json.loads(payload))

    def __len__(self) -> int:
        return len(self._parts)

    def __iter__(self) -> Iterator[Segment]:
        return iter(tuple(self._parts))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._parts == other._parts

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Path({self.to_bracket_string()!r})"

    def __str__(self) -> str:
        return self.string()


__all__ = ["Path"]
