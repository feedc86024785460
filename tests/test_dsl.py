"""Tests for the fluent path builder."""

import pytest
from pydantic import ValidationError

from valuepath import P, parse


def test_attribute_and_item_access_build_segments() -> None:
    assert P.Publisher.Addresses[0].City.to_path() == parse("Publisher.Addresses[0].City")
    assert P.Books["Gone With the Wind"].to_path() == parse("Books['Gone With the Wind']")


def test_field_helper_reaches_reserved_attribute_names() -> None:
    assert P.field("to_path").Name.to_path() == parse("to_path.Name")


def test_str_renders_bracket_form() -> None:
    assert str(P.Books["it's"].Title) == "Books['it\\'s'].Title"


def test_to_path_returns_independent_paths() -> None:
    ref = P.A.B
    first = ref.to_path()
    first.pop()

    assert ref.to_path().string() == "A.B"


def test_rejects_negative_indices() -> None:
    with pytest.raises(ValueError, match="Negative indices"):
        P.Items[-1]


def test_rejects_accessor_without_field() -> None:
    with pytest.raises(ValueError, match="preceding field"):
        P[0]


def test_rejects_unsupported_key_types() -> None:
    with pytest.raises(TypeError):
        P.Items[1.5]  # type: ignore[index]
    with pytest.raises(TypeError):
        P.Items[True]


def test_rejects_invalid_field_names() -> None:
    with pytest.raises(ValidationError):
        P.field("a.b")


def test_private_attributes_are_not_segments() -> None:
    with pytest.raises(AttributeError):
        P._hidden
