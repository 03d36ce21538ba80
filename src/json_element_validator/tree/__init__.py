"""Tree subpackage: the value model the validator operates on.

Re-exports the public API for the tree module:
- TreeValue: union of ObjectValue, ArrayValue, ScalarValue and NullValue
- NodeType: StrEnum of the six concrete node kinds
- TreeBuilder: converts plain Python JSON values into TreeValues
- ElementPath: location of a node, rendered as ``$.a.b[2]``
"""

from json_element_validator.tree.builder import TreeBuilder
from json_element_validator.tree.nodes import (
    ArrayValue,
    NodeType,
    NullValue,
    ObjectValue,
    ScalarValue,
    TreeValue,
)
from json_element_validator.tree.path import ROOT, ElementPath

__all__ = [
    "ROOT",
    "ArrayValue",
    "ElementPath",
    "NodeType",
    "NullValue",
    "ObjectValue",
    "ScalarValue",
    "TreeBuilder",
    "TreeValue",
]
