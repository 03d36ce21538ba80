"""Mismatch message builders.

Callers assert on substrings of these messages, so the wording below is part
of the public contract.  Every failure message is composed from one of two
shapes:

- ``"<headline>, expected '<X>' but was '<Y>'"``
- ``"<headline>, expected '<X>' to be in '<collection>'"``
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Sequence

from json_element_validator.tree.nodes import (
    ArrayValue,
    NullValue,
    ObjectValue,
    ScalarValue,
    TreeValue,
)
from json_element_validator.tree.path import ElementPath

__all__ = [
    "as_text",
    "describe",
    "describe_keys",
    "empty_content",
    "entry_count_mismatch",
    "matcher_failure",
    "missing_entry",
    "missing_item",
    "type_mismatch",
    "value_mismatch",
    "value_not_in_collection",
    "values_not_equal",
]


def value_mismatch(base: str, expected: object, actual: object) -> str:
    """Return ``"<base>, expected '<expected>' but was '<actual>'"``."""
    return f"{base}, expected '{expected}' but was '{actual}'"


def value_not_in_collection(base: str, value: object, collection: object) -> str:
    """Return ``"<base>, expected '<value>' to be in '<collection>'"``."""
    return f"{base}, expected '{value}' to be in '{collection}'"


def _to_json(value: TreeValue) -> str:
    return json.dumps(value.to_python(), separators=(",", ":"), ensure_ascii=False)


def as_text(value: TreeValue | None) -> str | None:
    """Return the natural string form of a node, as handed to matchers.

    Strings are returned as-is, numbers and booleans in JSON notation,
    objects and arrays as compact JSON.  ``null`` (and an absent node) map
    to None so that matchers can tell "no value" from the text ``"null"``.
    """
    match value:
        case None | NullValue():
            return None
        case ScalarValue(value=str() as text):
            return text
        case ScalarValue() | ObjectValue() | ArrayValue():
            return _to_json(value)


def describe(value: TreeValue | str | None) -> str:
    """Render a node (or a matcher's string form) for a diagnostic."""
    if isinstance(value, str):
        return value
    text = as_text(value)
    return "null" if text is None else text


def describe_keys(keys: Iterable[str]) -> str:
    """Render object keys as ``[a, b, c]``."""
    return "[" + ", ".join(keys) + "]"


# ---------------------------------------------------------------------------
# Canonical messages
# ---------------------------------------------------------------------------


def type_mismatch(path: ElementPath, expected_type: str, actual_type: str) -> str:
    return value_mismatch(
        f"Type mismatch for JSON entry '{path}'", expected_type, actual_type
    )


def values_not_equal(
    path: ElementPath, expected: TreeValue | str | None, actual: TreeValue | str | None
) -> str:
    return value_mismatch(
        f"Values not equal for entry: '{path}'", describe(expected), describe(actual)
    )


def entry_count_mismatch(path: ElementPath, expected: str, actual: str) -> str:
    """Collection sizes differ; ``expected``/``actual`` are pre-rendered."""
    return value_mismatch(
        f"Number of entries is not equal in element: '{path}'", expected, actual
    )


def missing_entry(key: str, actual_keys: Sequence[str]) -> str:
    return value_not_in_collection("Missing JSON entry", key, describe_keys(actual_keys))


def missing_item(path: ElementPath, expected: TreeValue, actual: ArrayValue) -> str:
    return value_not_in_collection(
        f"An item in '{path}' is missing", describe(expected), describe(actual)
    )


def matcher_failure(
    name: str, field_path: str, actual: str | None, control_values: Sequence[str]
) -> str:
    received = "null" if actual is None else actual
    return (
        f"{name} failed for field '{field_path}': "
        f"Received value is '{received}', control value is '{', '.join(control_values)}'"
    )


def empty_content() -> str:
    return "Validation failed - expected message contents, but received empty message!"
