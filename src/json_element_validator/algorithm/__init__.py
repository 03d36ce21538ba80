"""Comparison algorithm: configuration, ignore filtering and the tree walk."""

from __future__ import annotations

from json_element_validator.algorithm.config import STRICT_ENV_VAR, ValidationConfig
from json_element_validator.algorithm.elements import StructuralComparator
from json_element_validator.algorithm.ignore import (
    IgnoreFilter,
    IgnorePattern,
    is_ignored,
    parse_path,
)

__all__ = [
    "STRICT_ENV_VAR",
    "IgnoreFilter",
    "IgnorePattern",
    "StructuralComparator",
    "ValidationConfig",
    "is_ignored",
    "parse_path",
]
