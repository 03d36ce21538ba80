"""TreeValue variants and the NodeType StrEnum.

A parsed document is represented as a closed union of four frozen
dataclasses: ``ObjectValue``, ``ArrayValue``, ``ScalarValue`` and
``NullValue``.  Comparison code dispatches with ``match`` over these
variants and ends every dispatch with ``assert_never`` so that a forgotten
variant is a type-checking error rather than a silently skipped node.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

__all__ = [
    "ArrayValue",
    "NodeType",
    "NullValue",
    "ObjectValue",
    "ScalarValue",
    "TreeValue",
]


class NodeType(StrEnum):
    """Concrete kind of a TreeValue node.

    StrEnum values are the lowercased member names and are used verbatim in
    type-mismatch diagnostics (``expected 'object' but was 'array'``).
    """

    OBJECT = auto()
    ARRAY = auto()
    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()


@dataclass(frozen=True, slots=True)
class ObjectValue:
    """A JSON object.

    Attributes:
        entries: ``(key, value)`` pairs in document order.  Keys are unique;
            the order is kept for diagnostics only and carries no meaning
            during comparison.
    """

    entries: tuple[tuple[str, TreeValue], ...] = ()
    _index: dict[str, TreeValue] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        index: dict[str, TreeValue] = {}
        for key, value in self.entries:
            if key in index:
                msg = f"Duplicate object key: {key!r}"
                raise ValueError(msg)
            index[key] = value
        object.__setattr__(self, "_index", index)

    @property
    def node_type(self) -> NodeType:
        return NodeType.OBJECT

    def keys(self) -> list[str]:
        """Return the keys in document order."""
        return [key for key, _ in self.entries]

    def get(self, key: str) -> TreeValue | None:
        """Return the value stored under ``key`` or None when absent."""
        return self._index.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __len__(self) -> int:
        return len(self.entries)

    def to_python(self) -> dict[str, Any]:
        return {key: value.to_python() for key, value in self.entries}


@dataclass(frozen=True, slots=True)
class ArrayValue:
    """A JSON array; item order is significant."""

    items: tuple[TreeValue, ...] = ()

    @property
    def node_type(self) -> NodeType:
        return NodeType.ARRAY

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> TreeValue:
        return self.items[index]

    def to_python(self) -> list[Any]:
        return [item.to_python() for item in self.items]


@dataclass(frozen=True, slots=True)
class ScalarValue:
    """A string, number or boolean leaf.

    ``bool`` is checked before ``int`` everywhere because ``bool`` subclasses
    ``int`` in Python.
    """

    value: str | int | float | bool

    def __post_init__(self) -> None:
        if not isinstance(self.value, (str, int, float)):
            msg = f"Unsupported scalar type: {type(self.value)!r}"
            raise TypeError(msg)
        if isinstance(self.value, float) and not math.isfinite(self.value):
            msg = f"Non-finite numbers are not JSON values: {self.value!r}"
            raise ValueError(msg)

    @property
    def node_type(self) -> NodeType:
        if isinstance(self.value, bool):
            return NodeType.BOOLEAN
        if isinstance(self.value, str):
            return NodeType.STRING
        return NodeType.NUMBER

    def to_python(self) -> str | int | float | bool:
        return self.value


@dataclass(frozen=True, slots=True)
class NullValue:
    """JSON ``null``."""

    @property
    def node_type(self) -> NodeType:
        return NodeType.NULL

    def to_python(self) -> None:
        return None


TreeValue = ObjectValue | ArrayValue | ScalarValue | NullValue
