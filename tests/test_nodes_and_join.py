import pytest
from hypothesis import given
from hypothesis import strategies as st

from error_transformer.errors import ShapeMismatchError, format_path
from error_transformer.tree.join import create_string, unique_leaves
from error_transformer.tree.nodes import NodeKind, classify, has_map


_MESSAGES = st.text(min_size=1, max_size=20).filter(lambda value: value.strip() == value and ". " not in value)


def test_classify_shapes() -> None:
    assert classify({"a": "b"}) is NodeKind.MAPPING
    assert classify({}) is NodeKind.MAPPING
    assert classify(["a"]) is NodeKind.SEQUENCE
    assert classify(("a",)) is NodeKind.SEQUENCE
    assert classify("Required") is NodeKind.LEAF


@pytest.mark.parametrize("value", [None, 3, 1.5, b"bytes", {"a"}])
def test_classify_rejects_other_values(value: object) -> None:
    with pytest.raises(ShapeMismatchError, match="expected mapping, sequence or string at <root>"):
        _ = classify(value)


def test_shape_mismatch_is_a_type_error_with_path() -> None:
    with pytest.raises(TypeError) as excinfo:
        _ = classify(None, ("name", "first", 0))
    assert isinstance(excinfo.value, ShapeMismatchError)
    assert excinfo.value.path == ("name", "first", 0)
    assert excinfo.value.value is None
    assert "name.first[0]" in str(excinfo.value)


def test_format_path() -> None:
    assert format_path(()) == "<root>"
    assert format_path(("name",)) == "name"
    assert format_path(("name", 2, "first")) == "name[2].first"
    assert format_path((0, "a")) == "[0].a"


def test_has_map_checks_one_level_only() -> None:
    assert has_map({})
    assert has_map({"a": ["x"]})
    assert has_map(["x", {"a": "y"}])
    assert has_map([{}])
    assert not has_map([])
    assert not has_map(["x", "y"])
    assert not has_map([["x"], [{"a": "y"}]])
    assert not has_map("x")


def test_create_string_deduplicates() -> None:
    result = create_string(["Required", "Required", "Too short"])
    assert set(result.split(". ")) == {"Required", "Too short"}
    assert result.count("Required") == 1


def test_create_string_keeps_first_seen_order() -> None:
    assert create_string(["b", "a", "b", "c"]) == "b. a. c"


def test_create_string_empty_input() -> None:
    assert create_string([]) == ""
    assert create_string(["", ""]) == ""


def test_create_string_single_value_has_no_trailing_separator() -> None:
    assert create_string(["Invalid", "Invalid"]) == "Invalid"


def test_create_string_custom_separator() -> None:
    assert create_string(["a", "b"], separator="; ") == "a; b"
    assert create_string(["a", "b"], separator="\n") == "a\nb"


def test_create_string_walks_nested_sequences() -> None:
    assert create_string([["a", "b"], ("b", ["c"])]) == "a. b. c"


def test_create_string_collects_mapping_values() -> None:
    assert create_string(["a", {"b": "c", "d": ["a", "e"]}]) == "a. c. e"


def test_create_string_rejects_non_strings() -> None:
    with pytest.raises(ShapeMismatchError, match=r"at \[1\]\.b"):
        _ = create_string(["a", {"b": None}])
    with pytest.raises(ShapeMismatchError, match=r"at errors\[0\]"):
        _ = create_string([42], path=("errors",))


def test_unique_leaves_drops_empty_strings() -> None:
    assert unique_leaves(["", "a", "a", "", "b"]) == ["a", "b"]


def test_unique_leaves_drops_blank_strings() -> None:
    assert unique_leaves(["   ", "a", "\t\n"]) == ["a"]
    assert create_string(["   "]) == ""
    assert create_string(["  ", "Required"]) == "Required"


@given(st.lists(_MESSAGES, unique=True, max_size=8))
def test_create_string_on_unique_input_is_plain_join(messages: list[str]) -> None:
    assert create_string(messages) == ". ".join(messages).strip()
