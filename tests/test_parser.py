"""Tests for the dotted value-path parser."""

import pytest

from valuepath import InvalidPathError, parse
from valuepath.segments import ElementSegment, FieldSegment, KeySegment


@pytest.mark.parametrize(
    "subject",
    ["LastName", "Publisher.Name", "Publisher.Addresses", "Author.Publisher.Name"],
)
def test_simple_dotted_paths_round_trip_through_string(subject: str) -> None:
    assert parse(subject).string() == subject


def test_list_element_accessor() -> None:
    path = parse("Publisher.Addresses[0].City")

    assert list(path) == [
        FieldSegment(name="Publisher"),
        FieldSegment(name="Addresses"),
        ElementSegment(index=0),
        FieldSegment(name="City"),
    ]


def test_map_key_accessor() -> None:
    path = parse("Books['Gone With the Wind']")

    assert list(path) == [
        FieldSegment(name="Books"),
        KeySegment(key="Gone With the Wind"),
    ]


def test_empty_subject_is_empty_path() -> None:
    path = parse("")

    assert path.size() == 0
    assert path.is_empty()


def test_chained_accessors() -> None:
    path = parse("Grid[1][2]['x'].Value")

    assert list(path) == [
        FieldSegment(name="Grid"),
        ElementSegment(index=1),
        ElementSegment(index=2),
        KeySegment(key="x"),
        FieldSegment(name="Value"),
    ]


def test_multi_digit_and_zero_padded_indices() -> None:
    assert parse("A[2089].Name").at(1) == ElementSegment(index=2089)
    assert parse("A[007]").back() == ElementSegment(index=7)


def test_quoted_keys_keep_reserved_characters_and_case() -> None:
    assert parse("M['a.b[c]']").back() == KeySegment(key="a.b[c]")
    assert parse("M['Key']").back() != KeySegment(key="key")
    assert parse("M['']").back() == KeySegment(key="")


def test_quoted_key_escapes() -> None:
    assert parse("M['it\\'s']").back() == KeySegment(key="it's")
    assert parse("M['a\\\\b']").back() == KeySegment(key="a\\b")
    assert parse("M['a\\nb']").back() == KeySegment(key="a\\nb")


def test_identifiers_may_contain_spaces_and_symbols() -> None:
    assert parse("my field.x-y").string() == "my field.x-y"


@pytest.mark.parametrize(
    "subject",
    [
        "A..B",
        ".A",
        "A.",
        "A[",
        "A[1",
        "A[x]",
        "A['b",
        "A[['0']]",
        "A[]",
        "[0]",
        "A.[0]",
        "A[0]B",
        "A['b'x]",
        "A['b'",
        "A]",
        "A'b",
        "A[1a]",
        "A[-1]",
        ".",
    ],
)
def test_invalid_paths_raise(subject: str) -> None:
    with pytest.raises(InvalidPathError) as exc_info:
        parse(subject)

    assert exc_info.value.subject == subject


def test_invalid_path_error_is_a_value_error() -> None:
    with pytest.raises(ValueError, match="invalid path"):
        parse("A..B")


@pytest.mark.parametrize(
    ("subject", "offset"),
    [
        (".A", 0),
        ("A..B", 2),
        ("A.", 1),
        ("A[x]", 2),
        ("A[1", 1),
        ("A['b'x]", 5),
        ("A[['0']]", 2),
        ("A[0]B", 4),
    ],
)
def test_invalid_path_reports_offset(subject: str, offset: int) -> None:
    with pytest.raises(InvalidPathError) as exc_info:
        parse(subject)

    assert exc_info.value.offset == offset
    assert f"at offset {offset}" in str(exc_info.value)


def test_parse_rejects_non_string_subject() -> None:
    with pytest.raises(TypeError, match="must be a str"):
        parse(None)  # type: ignore[arg-type]


def test_parse_enforces_segment_limit(valuepath_config) -> None:
    valuepath_config.max_segments = 3

    assert parse("A.B[0]").size() == 3
    with pytest.raises(InvalidPathError, match="max allowed is 3"):
        parse("A.B.C.D")


def test_from_string_matches_parse() -> None:
    from valuepath import Path

    assert Path.from_string("A[0].B") == parse("A[0].B")


def test_parse_logs_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("DEBUG", logger="valuepath"):
        parse("A.B")
        with pytest.raises(InvalidPathError):
            parse("A..B")

    messages = [record.getMessage() for record in caplog.records]
    assert "parsed 'A.B' into 2 segments" in messages
    assert any(message.startswith("rejected 'A..B'") for message in messages)
