"""TreeBuilder: converts plain Python JSON values into TreeValue variants.

The engine never parses text.  Callers hand it either TreeValues or the
values produced by any JSON parser (``dict``, ``list``, ``str``, ``int``,
``float``, ``bool``, ``None``); this module performs the one-time
conversion into the immutable tree representation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from json_element_validator.tree.nodes import (
    ArrayValue,
    NullValue,
    ObjectValue,
    ScalarValue,
    TreeValue,
)

__all__ = ["JsonValue", "TreeBuilder"]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None

_TREE_TYPES = (ObjectValue, ArrayValue, ScalarValue, NullValue)


@dataclass
class TreeBuilder:
    """Converts any valid JSON value into a TreeValue tree.

    The dispatch order matters: bool MUST be checked before int because bool
    is a subclass of int in Python (``isinstance(True, int)`` is True).
    Values that already are TreeValues are returned unchanged, so callers may
    mix pre-built subtrees with plain values.

    Example::

        builder = TreeBuilder()
        tree = builder.build({"id": 42, "tags": ["a", "b"]})
        # ObjectValue(entries=(("id", ScalarValue(42)),
        #                      ("tags", ArrayValue((ScalarValue("a"), ScalarValue("b"))))))
    """

    def build(self, value: JsonValue | TreeValue) -> TreeValue:
        """Convert a JSON value to a TreeValue.

        Args:
            value: Any valid JSON value, or an existing TreeValue.

        Returns:
            The equivalent TreeValue.

        Raises:
            TypeError: If value (or any nested value) is not a JSON type, or
                an object key is not a string.
            ValueError: If a number is NaN or infinite.
        """
        if isinstance(value, _TREE_TYPES):
            return value

        # CRITICAL: bool MUST be checked before int; bool subclasses int
        if isinstance(value, bool):
            return ScalarValue(value)

        if isinstance(value, dict):
            return self._build_object(value)

        if isinstance(value, (list, tuple)):
            return ArrayValue(tuple(self.build(item) for item in value))

        if isinstance(value, (str, int, float)):
            return ScalarValue(value)

        if value is None:
            return NullValue()

        raise TypeError(f"Unsupported JSON value type: {type(value)!r}")

    def _build_object(self, obj: dict[Any, Any]) -> ObjectValue:
        entries: list[tuple[str, TreeValue]] = []
        for key, val in obj.items():
            if not isinstance(key, str):
                raise TypeError(f"JSON object keys must be str, got {type(key)!r}")
            entries.append((key, self.build(val)))
        return ObjectValue(tuple(entries))
