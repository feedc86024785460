"""Segment models: one step of a value path."""

from __future__ import annotations

from typing import Annotated, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Characters that delimit path syntax and so may not appear in a field name.
RESERVED_CHARS = frozenset(".[]'")


class _SegmentBase(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def identifier(self) -> str:
        """Plain-text form of the segment, as used for prefix matching."""
        raise NotImplementedError

    def render(self) -> str:
        """Bracket-notation fragment for this segment."""
        raise NotImplementedError


class FieldSegment(_SegmentBase):
    """A struct-like member, addressed by name."""

    kind: Literal["field"] = "field"
    name: str

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not value:
            raise ValueError("field name must be non-empty")
        reserved = sorted(RESERVED_CHARS.intersection(value))
        if reserved:
            raise ValueError(
                f"field name {value!r} contains reserved characters {''.join(reserved)!r}"
            )
        return value

    @property
    def identifier(self) -> str:
        return self.name

    def render(self) -> str:
        return self.name


class ElementSegment(_SegmentBase):
    """A position in a list field."""

    kind: Literal["element"] = "element"
    index: int = Field(ge=0)

    @property
    def identifier(self) -> str:
        return str(self.index)

    def render(self) -> str:
        return f"[{self.index}]"


class KeySegment(_SegmentBase):
    """An entry in a map field; matching is exact and case-sensitive."""

    kind: Literal["key"] = "key"
    key: str

    @property
    def identifier(self) -> str:
        return self.key

    def render(self) -> str:
        return f"['{escape_key(self.key)}']"


Segment: TypeAlias = Annotated[
    FieldSegment | ElementSegment | KeySegment,
    Field(discriminator="kind"),
]


def escape_key(key: str) -> str:
    """Escape ``key`` for use between single quotes in an accessor."""

    return key.replace("\\", "\\\\").replace("'", "\\'")


__all__ = [
    "RESERVED_CHARS",
    "ElementSegment",
    "FieldSegment",
    "KeySegment",
    "Segment",
    "escape_key",
]
