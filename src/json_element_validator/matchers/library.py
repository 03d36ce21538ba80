"""Built-in matchers and the default registry.

Every matcher satisfies the ``ValidationMatcher`` Protocol structurally.
String matchers reject ``null`` (value None) instead of raising; numeric
matchers reject values that are not numbers.  Unusable control values raise
``MatcherConfigurationError``.

| Expression                        | Passes when                                   |
|-----------------------------------|-----------------------------------------------|
| ``@Ignore@`` / ``@Ignore()@``     | always                                        |
| ``@EqualsIgnoreCase('x')@``       | value equals x, case-insensitively            |
| ``@Contains('x')@``               | value contains x                              |
| ``@ContainsIgnoreCase('x')@``     | value contains x, case-insensitively          |
| ``@StartsWith('x')@``             | value starts with x                           |
| ``@EndsWith('x')@``               | value ends with x                             |
| ``@Matches('re')@``               | the whole value matches the regex             |
| ``@GreaterThan('n')@``            | value is a number > n                         |
| ``@LowerThan('n')@``              | value is a number < n                         |
| ``@IsNumber()@``                  | value is a number                             |
| ``@Trim('x')@``                   | value equals x after trimming both            |
| ``@TrimAllWhitespaces('x')@``     | value equals x with all whitespace removed    |
| ``@IgnoreNewLine('x')@``          | value equals x with line breaks removed       |
| ``@Empty()@`` / ``@NotEmpty()@``  | value is (not) "", ``[]`` or ``{}``           |
| ``@Null()@`` / ``@NotNull()@``    | value is (not) ``null``                       |
| ``@Not('@Expr(...)@')@``          | the nested expression fails                   |
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, ClassVar

from json_element_validator.errors import MatcherConfigurationError
from json_element_validator.matchers.registry import MatcherLibrary, MatcherRegistry

if TYPE_CHECKING:
    from json_element_validator.matchers.dispatcher import MatcherContext

__all__ = [
    "ContainsIgnoreCaseMatcher",
    "ContainsMatcher",
    "EmptyMatcher",
    "EndsWithMatcher",
    "EqualsIgnoreCaseMatcher",
    "GreaterThanMatcher",
    "IgnoreMatcher",
    "IgnoreNewLineMatcher",
    "IsNumberMatcher",
    "LowerThanMatcher",
    "MatchesMatcher",
    "NotEmptyMatcher",
    "NotMatcher",
    "NotNullMatcher",
    "NullMatcher",
    "StartsWithMatcher",
    "TrimAllWhitespacesMatcher",
    "TrimMatcher",
    "default_library",
    "default_registry",
]

_EMPTY_FORMS = frozenset({"", "[]", "{}"})
_WHITESPACE = re.compile(r"\s+")
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


# ---------------------------------------------------------------------------
# Control-value helpers
# ---------------------------------------------------------------------------


def _single(matcher: str, control_values: list[str]) -> str:
    if len(control_values) != 1:
        raise MatcherConfigurationError(
            f"{matcher} expects exactly one control value, got {len(control_values)}"
        )
    return control_values[0]


def _none(matcher: str, control_values: list[str]) -> None:
    if control_values:
        raise MatcherConfigurationError(
            f"{matcher} takes no control values, got {control_values!r}"
        )


def _to_number(text: str) -> Decimal | None:
    try:
        number = Decimal(text.strip())
    except InvalidOperation:
        return None
    return None if not number.is_finite() else number


def _threshold(matcher: str, control_values: list[str]) -> Decimal:
    raw = _single(matcher, control_values)
    number = _to_number(raw)
    if number is None:
        raise MatcherConfigurationError(
            f"{matcher} control value must be a number, got '{raw}'"
        )
    return number


# ---------------------------------------------------------------------------
# Matchers
# ---------------------------------------------------------------------------


class IgnoreMatcher:
    """Accepts any value, including ``null``."""

    def validate(
        self,
        field_path: str,
        value: str | None,
        control_values: list[str],
        context: MatcherContext,
    ) -> bool:
        return True


class _SingleValueMatcher:
    """Compares a non-null value against exactly one control value."""

    name: ClassVar[str]

    def validate(
        self,
        field_path: str,
        value: str | None,
        control_values: list[str],
        context: MatcherContext,
    ) -> bool:
        control = _single(self.name, control_values)
        return value is not None and self.compare(value, control)

    def compare(self, value: str, control: str) -> bool:
        raise NotImplementedError


class _NoValueMatcher:
    """Checks the value alone; control values are rejected."""

    name: ClassVar[str]

    def validate(
        self,
        field_path: str,
        value: str | None,
        control_values: list[str],
        context: MatcherContext,
    ) -> bool:
        _none(self.name, control_values)
        return self.check(value)

    def check(self, value: str | None) -> bool:
        raise NotImplementedError


class EqualsIgnoreCaseMatcher(_SingleValueMatcher):
    name = "EqualsIgnoreCase"

    def compare(self, value: str, control: str) -> bool:
        return value.casefold() == control.casefold()


class ContainsMatcher(_SingleValueMatcher):
    name = "Contains"

    def compare(self, value: str, control: str) -> bool:
        return control in value


class ContainsIgnoreCaseMatcher(_SingleValueMatcher):
    name = "ContainsIgnoreCase"

    def compare(self, value: str, control: str) -> bool:
        return control.casefold() in value.casefold()


class StartsWithMatcher(_SingleValueMatcher):
    name = "StartsWith"

    def compare(self, value: str, control: str) -> bool:
        return value.startswith(control)


class EndsWithMatcher(_SingleValueMatcher):
    name = "EndsWith"

    def compare(self, value: str, control: str) -> bool:
        return value.endswith(control)


class MatchesMatcher(_SingleValueMatcher):
    """Full-string regular expression match (``re.fullmatch``)."""

    name = "Matches"

    def validate(
        self,
        field_path: str,
        value: str | None,
        control_values: list[str],
        context: MatcherContext,
    ) -> bool:
        # An invalid pattern is a configuration error even when value is null
        control = _single(self.name, control_values)
        _compile(control)
        return super().validate(field_path, value, control_values, context)

    def compare(self, value: str, control: str) -> bool:
        return _compile(control).fullmatch(value) is not None


def _compile(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise MatcherConfigurationError(
            f"Matches control value is not a valid regular expression: '{pattern}'"
        ) from exc


class GreaterThanMatcher(_SingleValueMatcher):
    name = "GreaterThan"

    def validate(
        self,
        field_path: str,
        value: str | None,
        control_values: list[str],
        context: MatcherContext,
    ) -> bool:
        threshold = _threshold(self.name, control_values)
        number = None if value is None else _to_number(value)
        return number is not None and number > threshold


class LowerThanMatcher(_SingleValueMatcher):
    name = "LowerThan"

    def validate(
        self,
        field_path: str,
        value: str | None,
        control_values: list[str],
        context: MatcherContext,
    ) -> bool:
        threshold = _threshold(self.name, control_values)
        number = None if value is None else _to_number(value)
        return number is not None and number < threshold


class TrimMatcher(_SingleValueMatcher):
    name = "Trim"

    def compare(self, value: str, control: str) -> bool:
        return value.strip() == control.strip()


class TrimAllWhitespacesMatcher(_SingleValueMatcher):
    name = "TrimAllWhitespaces"

    def compare(self, value: str, control: str) -> bool:
        return _WHITESPACE.sub("", value) == _WHITESPACE.sub("", control)


class IgnoreNewLineMatcher(_SingleValueMatcher):
    name = "IgnoreNewLine"

    def compare(self, value: str, control: str) -> bool:
        return _LINE_BREAK.sub("", value) == _LINE_BREAK.sub("", control)


class IsNumberMatcher(_NoValueMatcher):
    name = "IsNumber"

    def check(self, value: str | None) -> bool:
        return value is not None and _to_number(value) is not None


class EmptyMatcher(_NoValueMatcher):
    """Passes for ``""``, ``[]`` and ``{}``; ``null`` is not empty."""

    name = "Empty"

    def check(self, value: str | None) -> bool:
        return value is not None and value.strip() in _EMPTY_FORMS


class NotEmptyMatcher(_NoValueMatcher):
    name = "NotEmpty"

    def check(self, value: str | None) -> bool:
        return value is not None and value.strip() not in _EMPTY_FORMS


class NullMatcher(_NoValueMatcher):
    name = "Null"

    def check(self, value: str | None) -> bool:
        return value is None


class NotNullMatcher(_NoValueMatcher):
    name = "NotNull"

    def check(self, value: str | None) -> bool:
        return value is not None


class NotMatcher:
    """Negates a nested matcher expression: ``@Not('@Contains('x')@')@``."""

    def validate(
        self,
        field_path: str,
        value: str | None,
        control_values: list[str],
        context: MatcherContext,
    ) -> bool:
        nested = _single("Not", control_values)
        return not context.evaluate(nested, field_path, value)


# ---------------------------------------------------------------------------
# Default library / registry
# ---------------------------------------------------------------------------


def default_library() -> MatcherLibrary:
    """Return a fresh library holding every built-in matcher under prefix ``""``."""
    return MatcherLibrary(
        name="default",
        prefix="",
        matchers={
            "Ignore": IgnoreMatcher(),
            "EqualsIgnoreCase": EqualsIgnoreCaseMatcher(),
            "Contains": ContainsMatcher(),
            "ContainsIgnoreCase": ContainsIgnoreCaseMatcher(),
            "StartsWith": StartsWithMatcher(),
            "EndsWith": EndsWithMatcher(),
            "Matches": MatchesMatcher(),
            "GreaterThan": GreaterThanMatcher(),
            "LowerThan": LowerThanMatcher(),
            "IsNumber": IsNumberMatcher(),
            "Trim": TrimMatcher(),
            "TrimAllWhitespaces": TrimAllWhitespacesMatcher(),
            "IgnoreNewLine": IgnoreNewLineMatcher(),
            "Empty": EmptyMatcher(),
            "NotEmpty": NotEmptyMatcher(),
            "Null": NullMatcher(),
            "NotNull": NotNullMatcher(),
            "Not": NotMatcher(),
        },
    )


def default_registry() -> MatcherRegistry:
    """Return a fresh registry containing only the default library."""
    return MatcherRegistry([default_library()])
