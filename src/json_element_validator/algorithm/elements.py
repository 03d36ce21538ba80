"""StructuralComparator: the recursive strict / non-strict tree walk.

At every node the comparator asks, in order:

1. Is the path ignored, or is the expected leaf the ``@Ignore@`` placeholder?
   Then the whole subtree passes.
2. Is the expected leaf a matcher expression?  Then the matcher decides,
   whatever the actual node's type.
3. Otherwise the variant of the expected node selects the structural rule.

The first mismatch raises ``ValidationFailure`` (fail-fast); nothing is
collected.  Arrays of equal length are compared position by position in both
modes.  A longer actual array is an error in strict mode and a containment
search in non-strict mode: every expected item must validate against a
distinct actual item, taken first-come first-served.
"""

from __future__ import annotations

from typing import assert_never

from json_element_validator import diagnostics
from json_element_validator.algorithm.ignore import IgnoreFilter
from json_element_validator.errors import ValidationFailure
from json_element_validator.matchers.dispatcher import MatcherDispatcher
from json_element_validator.matchers.expression import is_ignore_placeholder
from json_element_validator.tree.nodes import (
    ArrayValue,
    NullValue,
    ObjectValue,
    ScalarValue,
    TreeValue,
)
from json_element_validator.tree.path import ROOT, ElementPath

__all__ = ["StructuralComparator"]


class StructuralComparator:
    """Compares an actual TreeValue against an expected one.

    Args:
        dispatcher: Resolves and runs ``@Name(args)@`` leaves.
        ignore_filter: Paths exempt from comparison.  Defaults to an empty
            filter.
        strict: Exact key sets and array lengths when True.

    Example::

        comparator = StructuralComparator(MatcherDispatcher(), strict=False)
        comparator.compare(TreeBuilder().build({"a": 1, "b": 2}),
                           TreeBuilder().build({"a": 1}))  # passes
    """

    def __init__(
        self,
        dispatcher: MatcherDispatcher,
        ignore_filter: IgnoreFilter | None = None,
        strict: bool = True,
    ) -> None:
        self._dispatcher = dispatcher
        self._ignore = ignore_filter if ignore_filter is not None else IgnoreFilter()
        self._strict = strict

    @property
    def strict(self) -> bool:
        return self._strict

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(
        self, actual: TreeValue, expected: TreeValue, path: ElementPath = ROOT
    ) -> None:
        """Validate ``actual`` against ``expected`` at ``path``.

        Raises:
            ValidationFailure: On the first mismatch found.
            ConfigurationError: If a matcher expression cannot be resolved.
        """
        if self._skipped(expected, path):
            return

        match expected:
            case ScalarValue(value=str() as text) if (
                expression := self._dispatcher.try_resolve(text)
            ) is not None:
                self._dispatcher.dispatch(
                    expression, str(path), diagnostics.as_text(actual)
                )
            case NullValue():
                self._compare_null(actual, path)
            case ScalarValue():
                self._compare_scalar(actual, expected, path)
            case ObjectValue():
                self._compare_object(actual, expected, path)
            case ArrayValue():
                self._compare_array(actual, expected, path)
            case _:
                assert_never(expected)

    def accepts(
        self, actual: TreeValue, expected: TreeValue, path: ElementPath = ROOT
    ) -> bool:
        """Return True when ``compare`` would pass.  Configuration errors still raise."""
        try:
            self.compare(actual, expected, path)
        except ValidationFailure:
            return False
        return True

    # ------------------------------------------------------------------
    # Per-variant rules
    # ------------------------------------------------------------------

    def _skipped(self, expected: TreeValue, path: ElementPath) -> bool:
        if self._ignore and self._ignore.is_ignored(path):
            return True
        return isinstance(expected, ScalarValue) and (
            isinstance(expected.value, str) and is_ignore_placeholder(expected.value)
        )

    def _compare_null(self, actual: TreeValue, path: ElementPath) -> None:
        # An empty string stands in for null
        if isinstance(actual, NullValue) or actual == ScalarValue(""):
            return
        raise ValidationFailure(
            str(path), diagnostics.values_not_equal(path, "null", actual)
        )

    def _compare_scalar(
        self, actual: TreeValue, expected: ScalarValue, path: ElementPath
    ) -> None:
        match actual:
            case NullValue():
                raise ValidationFailure(
                    str(path), diagnostics.values_not_equal(path, expected, actual)
                )
            case ScalarValue() if actual.node_type == expected.node_type:
                # 5 == 5.0; bool never meets a number here since the kinds differ
                if actual.value != expected.value:
                    raise ValidationFailure(
                        str(path),
                        diagnostics.values_not_equal(path, expected, actual),
                    )
            case _:
                raise ValidationFailure(
                    str(path),
                    diagnostics.type_mismatch(
                        path, expected.node_type, actual.node_type
                    ),
                )

    def _compare_object(
        self, actual: TreeValue, expected: ObjectValue, path: ElementPath
    ) -> None:
        if not isinstance(actual, ObjectValue):
            raise ValidationFailure(
                str(path),
                diagnostics.type_mismatch(path, expected.node_type, actual.node_type),
            )
        if self._strict and len(actual) != len(expected):
            raise ValidationFailure(
                str(path),
                diagnostics.entry_count_mismatch(
                    path,
                    diagnostics.describe_keys(expected.keys()),
                    diagnostics.describe_keys(actual.keys()),
                ),
            )

        for key, child in expected.entries:
            child_path = path.key(key)
            if self._ignore and self._ignore.is_ignored(child_path):
                continue
            actual_child = actual.get(key)
            if actual_child is None:
                raise ValidationFailure(
                    str(child_path), diagnostics.missing_entry(key, actual.keys())
                )
            self.compare(actual_child, child, child_path)

    def _compare_array(
        self, actual: TreeValue, expected: ArrayValue, path: ElementPath
    ) -> None:
        if not isinstance(actual, ArrayValue):
            raise ValidationFailure(
                str(path),
                diagnostics.type_mismatch(path, expected.node_type, actual.node_type),
            )

        size, actual_size = len(expected), len(actual)
        if actual_size < size or (actual_size > size and self._strict):
            raise ValidationFailure(
                str(path),
                diagnostics.entry_count_mismatch(
                    path, diagnostics.describe(expected), diagnostics.describe(actual)
                ),
            )

        if actual_size == size:
            for index, (actual_item, expected_item) in enumerate(
                zip(actual.items, expected.items, strict=True)
            ):
                self.compare(actual_item, expected_item, path.index(index))
            return

        self._contains_all(actual, expected, path)

    def _contains_all(
        self, actual: ArrayValue, expected: ArrayValue, path: ElementPath
    ) -> None:
        """Non-strict containment: each expected item consumes one actual item."""
        consumed: set[int] = set()
        for index, expected_item in enumerate(expected.items):
            item_path = path.index(index)
            if self._skipped(expected_item, item_path):
                continue
            for position, candidate in enumerate(actual.items):
                if position in consumed:
                    continue
                if self.accepts(candidate, expected_item, item_path):
                    consumed.add(position)
                    break
            else:
                raise ValidationFailure(
                    str(path), diagnostics.missing_item(path, expected_item, actual)
                )
