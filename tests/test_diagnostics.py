"""Tests for the mismatch message builders.

The wording is asserted on by callers, so these tests pin it down exactly.
"""

from __future__ import annotations

from json_element_validator import diagnostics
from json_element_validator.tree.builder import TreeBuilder
from json_element_validator.tree.nodes import ArrayValue, NullValue, ScalarValue
from json_element_validator.tree.path import ROOT

_build = TreeBuilder().build


class TestBaseShapes:
    def test_value_mismatch(self) -> None:
        assert diagnostics.value_mismatch("Base", "e", "a") == "Base, expected 'e' but was 'a'"

    def test_value_not_in_collection(self) -> None:
        assert (
            diagnostics.value_not_in_collection("Base", "v", "[a]")
            == "Base, expected 'v' to be in '[a]'"
        )


class TestRendering:
    def test_as_text(self) -> None:
        assert diagnostics.as_text(ScalarValue("x")) == "x"
        assert diagnostics.as_text(ScalarValue(5)) == "5"
        assert diagnostics.as_text(ScalarValue(True)) == "true"
        assert diagnostics.as_text(NullValue()) is None
        assert diagnostics.as_text(None) is None
        assert diagnostics.as_text(_build({"a": [1, "ü"]})) == '{"a":[1,"ü"]}'

    def test_describe(self) -> None:
        assert diagnostics.describe("raw") == "raw"
        assert diagnostics.describe(NullValue()) == "null"
        assert diagnostics.describe(ArrayValue()) == "[]"

    def test_describe_keys(self) -> None:
        assert diagnostics.describe_keys(["a", "b"]) == "[a, b]"
        assert diagnostics.describe_keys([]) == "[]"


class TestCanonicalMessages:
    def test_type_mismatch(self) -> None:
        assert diagnostics.type_mismatch(ROOT.key("a"), "object", "array") == (
            "Type mismatch for JSON entry '$.a', expected 'object' but was 'array'"
        )

    def test_values_not_equal(self) -> None:
        assert diagnostics.values_not_equal(
            ROOT.key("a"), ScalarValue("x"), ScalarValue("y")
        ) == ("Values not equal for entry: '$.a', expected 'x' but was 'y'")

    def test_entry_count_mismatch(self) -> None:
        assert diagnostics.entry_count_mismatch(ROOT, "[a]", "[a, b]") == (
            "Number of entries is not equal in element: '$', expected '[a]' but was '[a, b]'"
        )

    def test_missing_entry(self) -> None:
        assert diagnostics.missing_entry("b", ["a"]) == (
            "Missing JSON entry, expected 'b' to be in '[a]'"
        )

    def test_missing_item(self) -> None:
        assert diagnostics.missing_item(
            ROOT.key("list"), ScalarValue(3), ArrayValue((ScalarValue(1),))
        ) == ("An item in '$.list' is missing, expected '3' to be in '[1]'")

    def test_matcher_failure(self) -> None:
        assert diagnostics.matcher_failure("Contains", "$.a", None, ["x", "y"]) == (
            "Contains failed for field '$.a': Received value is 'null', "
            "control value is 'x, y'"
        )

    def test_empty_content(self) -> None:
        assert "expected message contents" in diagnostics.empty_content()
        assert diagnostics.empty_content().endswith("received empty message!")
