"""Public API functions for json-element-validator.

This module provides the three user-facing functions: validate, assert_valid
and is_valid.  Each call creates a fresh ElementValidator to guarantee zero
global state mutation between calls.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from json_element_validator.algorithm.config import ValidationConfig
from json_element_validator.errors import ValidationFailure
from json_element_validator.matchers.registry import MatcherRegistry
from json_element_validator.result import ValidationResult
from json_element_validator.validator import ElementValidator

__all__ = ["assert_valid", "is_valid", "validate"]


def validate(
    actual: Any,
    expected: Any,
    strict: bool = True,
    ignore_paths: Iterable[str] = (),
    matchers: MatcherRegistry | None = None,
) -> ValidationResult:
    """Validate an actual JSON value against an expected one.

    Creates a fresh ``ElementValidator`` per call.

    Args:
        actual:       The received JSON value (dict, list, str, int, float,
                      bool, None) or a pre-built TreeValue.
        expected:     The control JSON value.  String leaves of the form
                      ``@Name(args)@`` are evaluated as matchers.
        strict:       Require exact key sets and array lengths.  Defaults to True.
        ignore_paths: Path patterns whose subtrees are not compared, e.g.
                      ``["$.meta", "$..timestamp"]``.
        matchers:     Matcher registry.  Defaults to the built-in library.

    Returns:
        A ``ValidationResult``; on failure it names the path and describes
        the first mismatch.

    Raises:
        ConfigurationError: For unknown matchers, malformed matcher
            expressions or malformed ignore paths.
    """
    config = ValidationConfig(
        strict=strict, ignore_paths=ignore_paths  # type: ignore[arg-type]
    )
    return ElementValidator(config=config, registry=matchers).validate(actual, expected)


def assert_valid(
    actual: Any,
    expected: Any,
    strict: bool = True,
    ignore_paths: Iterable[str] = (),
    matchers: MatcherRegistry | None = None,
) -> None:
    """Like validate(), but raise instead of returning a failed result.

    Raises:
        ValidationFailure: When the documents do not match.  It is an
            ``AssertionError`` carrying ``path`` and ``message``.
        ConfigurationError: See validate().
    """
    result = validate(actual, expected, strict, ignore_paths, matchers)
    if not result.passed:
        raise ValidationFailure(result.path or "$", result.message or "")


def is_valid(
    actual: Any,
    expected: Any,
    strict: bool = True,
    ignore_paths: Iterable[str] = (),
    matchers: MatcherRegistry | None = None,
) -> bool:
    """Return True if ``actual`` satisfies ``expected``.

    Configuration errors still raise; only content mismatches yield False.
    """
    return validate(actual, expected, strict, ignore_paths, matchers).passed
