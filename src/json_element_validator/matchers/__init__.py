"""Matcher expressions, the matcher registry and the built-in library."""

from __future__ import annotations

from json_element_validator.matchers.dispatcher import MatcherContext, MatcherDispatcher
from json_element_validator.matchers.expression import (
    IGNORE_PLACEHOLDER,
    MatcherExpression,
    extract_control_values,
    is_ignore_placeholder,
    is_matcher_expression,
    parse_matcher_expression,
)
from json_element_validator.matchers.library import default_library, default_registry
from json_element_validator.matchers.registry import MatcherLibrary, MatcherRegistry

__all__ = [
    "IGNORE_PLACEHOLDER",
    "MatcherContext",
    "MatcherDispatcher",
    "MatcherExpression",
    "MatcherLibrary",
    "MatcherRegistry",
    "default_library",
    "default_registry",
    "extract_control_values",
    "is_ignore_placeholder",
    "is_matcher_expression",
    "parse_matcher_expression",
]
