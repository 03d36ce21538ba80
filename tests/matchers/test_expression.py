"""Tests for matcher-expression recognition and control-value extraction."""

from __future__ import annotations

import pytest

from json_element_validator.errors import MatcherSyntaxError
from json_element_validator.matchers.expression import (
    MatcherExpression,
    extract_control_values,
    is_ignore_placeholder,
    is_matcher_expression,
    parse_matcher_expression,
)

# ---------------------------------------------------------------------------
# Recognition
# ---------------------------------------------------------------------------


class TestRecognition:
    @pytest.mark.parametrize(
        "text", ["@Contains('x')@", "@Ignore@", "@@", "@my:Name()@"]
    )
    def test_envelope_present(self, text: str) -> None:
        assert is_matcher_expression(text) is True

    @pytest.mark.parametrize("text", ["", "@", "plain", "@open", "close@", "a@b@"])
    def test_envelope_absent(self, text: str) -> None:
        assert is_matcher_expression(text) is False

    def test_plain_text_parses_to_none(self) -> None:
        assert parse_matcher_expression("user@example.com") is None

    def test_ignore_placeholder(self) -> None:
        assert is_ignore_placeholder("@Ignore@") is True
        assert is_ignore_placeholder(" @Ignore@\n") is True
        assert is_ignore_placeholder("@Ignore()@") is False


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class TestParse:
    def test_single_argument(self) -> None:
        assert parse_matcher_expression("@EqualsIgnoreCase('lorem')@") == (
            MatcherExpression(
                name="EqualsIgnoreCase",
                control_values=("lorem",),
                source="@EqualsIgnoreCase('lorem')@",
            )
        )

    def test_no_arguments(self) -> None:
        expression = parse_matcher_expression("@IsNumber()@")
        assert expression is not None
        assert expression.name == "IsNumber"
        assert expression.control_values == ()

    def test_bare_ignore_shorthand(self) -> None:
        expression = parse_matcher_expression("@Ignore@")
        assert expression is not None
        assert expression.name == "Ignore"
        assert expression.control_values == ()

    def test_prefix(self) -> None:
        expression = parse_matcher_expression("@my:IsUpper()@")
        assert expression is not None
        assert expression.prefix == "my"
        assert expression.name == "IsUpper"
        assert expression.qualified_name == "my:IsUpper"

    def test_nested_expression_survives(self) -> None:
        expression = parse_matcher_expression("@Not('@Contains('x')@')@")
        assert expression is not None
        assert expression.name == "Not"
        assert expression.control_values == ("@Contains('x')@",)

    @pytest.mark.parametrize(
        "text", ["@Contains@", "@Contains('x'@", "@('x')@", "@1abc('x')@", "@A('x') tail@"]
    )
    def test_malformed_raises(self, text: str) -> None:
        with pytest.raises(MatcherSyntaxError):
            parse_matcher_expression(text)


# ---------------------------------------------------------------------------
# Control values
# ---------------------------------------------------------------------------


class TestControlValues:
    @pytest.mark.parametrize(
        ("body", "expected"),
        [
            ("", []),
            ("   ", []),
            ("'a'", ["a"]),
            ("'a', 'b'", ["a", "b"]),
            ("'a','b'", ["a", "b"]),
            ("'a' 'b'", ["a", "b"]),
            ("'it's'", ["it's"]),
            ("''", [""]),
            ("5", ["5"]),
            ("'a, b'", ["a, b"]),
        ],
    )
    def test_extraction(self, body: str, expected: list[str]) -> None:
        assert extract_control_values(body) == expected

    def test_unclosed_quote_raises(self) -> None:
        with pytest.raises(MatcherSyntaxError, match="No matching delimiter"):
            extract_control_values("'abc")

    def test_custom_delimiter(self) -> None:
        assert extract_control_values('"a", "b"', delimiter='"') == ["a", "b"]
