from __future__ import annotations

from .config import VALUEPATH_CONFIG
from .errors import InvalidPathError
from .path import Path
from .segments import FieldSegment


def validate_path(
    path: Path,
    *,
    max_segments: int | None = None,
    require_field_root: bool = True,
) -> None:
    """Check a programmatically built Path against the parser's constraints.

    Parsed paths always pass. Paths assembled with ``push_back`` may not: an
    accessor with no field before it has no dotted-notation rendering that
    parses back.
    """
    subject = path.to_bracket_string()
    limit = VALUEPATH_CONFIG.max_segments if max_segments is None else max_segments
    if path.size() > limit:
        raise InvalidPathError(
            subject, f"path has {path.size()} segments; max allowed is {limit}"
        )
    if require_field_root and not path.is_empty():
        if not isinstance(path.front(), FieldSegment):
            raise InvalidPathError(
                subject, "path must start with a field segment", offset=0
            )


__all__ = ["validate_path"]
