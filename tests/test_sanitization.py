"""
Tests for recursive input sanitization.

Pure functions only. No app or IO required.
"""

import copy

import pytest

from contract_api.shared.sanitization import (
    RequestInputs,
    normalize_text,
    sanitize,
    sanitize_inputs,
)

SAMPLES = [
    "  Jane\n\tDoe  ",
    "already clean",
    "",
    "\r\n\t",
    42,
    3.5,
    True,
    None,
    ["  a  ", ["\tb\n", 1], {"k": " v "}],
    {"name": "  x  y ", "tags": [" t1 ", " t2"], "nested": {"deep": {"s": "a\r\nb"}}},
    [],
    {},
]


def _shape(value):
    if isinstance(value, list):
        return ["list", len(value), [_shape(item) for item in value]]
    if isinstance(value, dict):
        return ["dict", sorted(value), {key: _shape(item) for key, item in value.items()}]
    return "scalar"


class TestNormalizeText:
    """Tests for normalize_text."""

    def test_control_whitespace_becomes_single_space(self) -> None:
        assert normalize_text("Jane\n\tDoe") == "Jane Doe"

    def test_whitespace_runs_collapse(self) -> None:
        assert normalize_text("a    b \t  c") == "a b c"

    def test_trims_both_ends(self) -> None:
        assert normalize_text("  hello  ") == "hello"

    def test_whitespace_only_becomes_empty(self) -> None:
        assert normalize_text(" \r\n\t ") == ""


class TestSanitize:
    """Tests for the recursive sanitize function."""

    def test_name_example(self) -> None:
        """The classic body example is normalized."""
        assert sanitize({"name": "  Jane\n\tDoe  "}) == {"name": "Jane Doe"}

    @pytest.mark.parametrize("value", [42, 3.5, True, False, None])
    def test_non_strings_unchanged(self, value) -> None:
        assert sanitize(value) is value

    def test_unsupported_types_pass_through(self) -> None:
        """Tuples and other objects are not traversed."""
        value = (" a ", " b ")
        assert sanitize(value) is value

    def test_list_order_and_length_preserved(self) -> None:
        assert sanitize([" b ", " a ", 3]) == ["b", "a", 3]

    def test_dict_keys_preserved(self) -> None:
        """Keys are kept as-is, including ones with whitespace."""
        result = sanitize({" key ": " value "})
        assert result == {" key ": "value"}

    def test_input_not_mutated(self) -> None:
        value = {"a": [" x "], "b": {"c": " y "}}
        original = copy.deepcopy(value)
        sanitize(value)
        assert value == original

    @pytest.mark.parametrize("value", SAMPLES)
    def test_idempotent(self, value) -> None:
        once = sanitize(value)
        assert sanitize(once) == once

    @pytest.mark.parametrize("value", SAMPLES)
    def test_shape_preserved(self, value) -> None:
        assert _shape(sanitize(value)) == _shape(value)


class TestSanitizeInputs:
    """Tests for sanitize_inputs over body, query and path parameters."""

    def test_each_input_sanitized(self) -> None:
        inputs = RequestInputs(
            body={"name": " Jane\nDoe "},
            query={"q": [" a  b ", "c\t"]},
            path_params={"slug": " my  slug "},
        )
        result = sanitize_inputs(inputs)
        assert result.body == {"name": "Jane Doe"}
        assert result.query == {"q": ["a b", "c"]}
        assert result.path_params == {"slug": "my slug"}

    def test_absent_body_skipped(self) -> None:
        result = sanitize_inputs(RequestInputs(query={"page": [" 1 "]}))
        assert result.body is None
        assert result.query == {"page": ["1"]}

    def test_returns_new_object(self) -> None:
        inputs = RequestInputs(body={"a": " b "})
        result = sanitize_inputs(inputs)
        assert result is not inputs
        assert inputs.body == {"a": " b "}
