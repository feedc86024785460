from __future__ import annotations

from dataclasses import dataclass

from .path import Path
from .segments import ElementSegment, FieldSegment, KeySegment, Segment


@dataclass(frozen=True)
class PathRef:
    segments: tuple[Segment, ...] = ()

    def __getattr__(self, name: str) -> PathRef:
        if name.startswith("_"):
            raise AttributeError(name)
        return PathRef(segments=(*self.segments, FieldSegment(name=name)))

    def __getitem__(self, key: int | str) -> PathRef:
        if not self.segments:
            raise ValueError("Accessors need a preceding field name")
        if isinstance(key, bool):
            raise TypeError("Path accessors must be int or str, got bool")
        if isinstance(key, int):
            if key < 0:
                raise ValueError("Negative indices are not supported in value paths")
            return PathRef(segments=(*self.segments, ElementSegment(index=key)))
        if isinstance(key, str):
            return PathRef(segments=(*self.segments, KeySegment(key=key)))
        raise TypeError(
            f"Path accessors must be int or str, got {type(key).__name__}"
        )

    def field(self, name: str) -> PathRef:
        """Append a field whose name is not a valid Python attribute."""
        return PathRef(segments=(*self.segments, FieldSegment(name=name)))

    def to_path(self) -> Path:
        return Path(self.segments)

    def __str__(self) -> str:
        return self.to_path().to_bracket_string()


P = PathRef()


__all__ = ["P", "PathRef"]
