"""Recognition and parsing of ``@Name(args)@`` matcher expressions.

Grammar::

    expression    := "@" [ prefix ":" ] name "(" body ")" "@"
    body          := control-value { ("," | whitespace) control-value }
    control-value := "'" text "'"

A closing quote is a quote followed by a comma, whitespace or the end of the
body, so quotes inside a value survive as long as they are not followed by
one of those characters.  This is what lets a composed matcher carry a
nested expression: ``@Not('@Contains('x')@')@``.  A non-empty body without
any quotes is taken as one control value.

The bare form ``@Ignore@`` is accepted as shorthand for ``@Ignore()@``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from json_element_validator.errors import MatcherSyntaxError

__all__ = [
    "CONTROL_VALUE_DELIMITER",
    "IGNORE_PLACEHOLDER",
    "MATCHER_PREFIX",
    "MATCHER_SUFFIX",
    "MatcherExpression",
    "extract_control_values",
    "is_ignore_placeholder",
    "is_matcher_expression",
    "parse_matcher_expression",
]

MATCHER_PREFIX = "@"
MATCHER_SUFFIX = "@"
IGNORE_PLACEHOLDER = "@Ignore@"
CONTROL_VALUE_DELIMITER = "'"

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


@dataclass(frozen=True, slots=True)
class MatcherExpression:
    """A parsed matcher expression.

    Attributes:
        name: Case-sensitive matcher name, e.g. ``"EqualsIgnoreCase"``.
        prefix: Library prefix without the colon; empty for the default library.
        control_values: Arguments with their quotes removed.
        source: The original leaf text.
    """

    name: str
    prefix: str = ""
    control_values: tuple[str, ...] = ()
    source: str = ""

    @property
    def qualified_name(self) -> str:
        return f"{self.prefix}:{self.name}" if self.prefix else self.name


def is_matcher_expression(text: str) -> bool:
    """Return True when ``text`` carries the ``@...@`` envelope."""
    return (
        len(text) >= len(MATCHER_PREFIX) + len(MATCHER_SUFFIX)
        and text.startswith(MATCHER_PREFIX)
        and text.endswith(MATCHER_SUFFIX)
    )


def is_ignore_placeholder(text: str) -> bool:
    return text.strip() == IGNORE_PLACEHOLDER


def parse_matcher_expression(text: str) -> MatcherExpression | None:
    """Parse a leaf value into a MatcherExpression.

    Args:
        text: The expected leaf value.

    Returns:
        None when ``text`` is not wrapped in ``@...@``; the parsed expression
        otherwise.

    Raises:
        MatcherSyntaxError: If the envelope is present but its content is not
            a valid ``[prefix:]Name(args)`` call.
    """
    if not is_matcher_expression(text):
        return None

    expression = text[len(MATCHER_PREFIX) : len(text) - len(MATCHER_SUFFIX)].strip()
    if expression.lower() == "ignore":
        expression += "()"

    body_start = expression.find("(")
    body_end = expression.rfind(")")
    if body_start < 0 or body_end < body_start:
        raise MatcherSyntaxError(
            "Illegal syntax for validation matcher expression - missing validation "
            f"value in '()' function body: {text!r}"
        )
    if expression[body_end + 1 :].strip():
        raise MatcherSyntaxError(
            f"Unexpected text after matcher function body: {text!r}"
        )

    head = expression[:body_start].strip()
    prefix, _, name = head.rpartition(":")
    if not _IDENTIFIER.fullmatch(name) or (prefix and not _IDENTIFIER.fullmatch(prefix)):
        raise MatcherSyntaxError(f"Invalid matcher name {head!r} in {text!r}")

    return MatcherExpression(
        name=name,
        prefix=prefix,
        control_values=tuple(
            extract_control_values(expression[body_start + 1 : body_end])
        ),
        source=text,
    )


def extract_control_values(
    body: str, delimiter: str = CONTROL_VALUE_DELIMITER
) -> list[str]:
    """Split a matcher body into its control values.

    Args:
        body: Text between the parentheses, e.g. ``"'a', 'b'"``.
        delimiter: Quote character around each value.

    Returns:
        The unquoted values.  An empty or blank body yields ``[]``; a body
        with text but no quotes yields ``[body]``.

    Raises:
        MatcherSyntaxError: If an opening quote has no closing quote.
    """
    values: list[str] = []
    if not body.strip():
        return values

    search_from = 0
    while search_from < len(body):
        start = body.find(delimiter, search_from)
        if start == -1:
            break
        end = _find_closing_delimiter(body, delimiter, start)
        if end == -1:
            raise MatcherSyntaxError(
                f"No matching delimiter ({delimiter}) found after position "
                f"'{start}' in control expression: {body}"
            )
        values.append(body[start + 1 : end])
        search_from = end + 1
        while search_from < len(body) and (
            body[search_from] == "," or body[search_from].isspace()
        ):
            search_from += 1

    if not values:
        values.append(body)
    return values


def _find_closing_delimiter(body: str, delimiter: str, start: int) -> int:
    search_from = start + 1
    while search_from < len(body):
        candidate = body.find(delimiter, search_from)
        if candidate == -1:
            return -1
        after = candidate + 1
        if after >= len(body) or body[after] == "," or body[after].isspace():
            return candidate
        search_from = after
    return -1
