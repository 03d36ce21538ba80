"""ElementValidator: orchestrator around StructuralComparator.

This is the wiring layer between the raw comparison walk and the public API.
It converts the walk's fail-fast ``ValidationFailure`` into a
``ValidationResult`` with timing data, and applies the empty-content check
at the document root.

Architecture:
- The constructor compiles ignore paths eagerly, so a malformed pattern
  raises ``IgnorePathSyntaxError`` before anything is compared.
- validate() starts a wall-clock timer, builds both trees, runs the root
  empty-content check, then delegates to ``StructuralComparator.compare()``.
- ``ConfigurationError`` subclasses are never converted into results; they
  propagate to the caller.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from json_element_validator import diagnostics
from json_element_validator.algorithm.config import ValidationConfig
from json_element_validator.algorithm.elements import StructuralComparator
from json_element_validator.algorithm.ignore import IgnoreFilter
from json_element_validator.errors import ValidationFailure
from json_element_validator.matchers.dispatcher import MatcherDispatcher
from json_element_validator.result import ValidationResult
from json_element_validator.tree.builder import TreeBuilder
from json_element_validator.tree.nodes import (
    ArrayValue,
    NullValue,
    ObjectValue,
    ScalarValue,
    TreeValue,
)
from json_element_validator.tree.path import ROOT

if TYPE_CHECKING:
    from json_element_validator.matchers.registry import MatcherRegistry

__all__ = ["ElementValidator"]

logger = logging.getLogger(__name__)


class ElementValidator:
    """Validates actual documents against expected documents.

    One instance can validate any number of document pairs with the same
    configuration.  Each instance owns its own ignore-filter cache; two
    validators never share mutable state.

    Example::

        from json_element_validator import ElementValidator, ValidationConfig

        validator = ElementValidator(ValidationConfig(strict=False))
        result = validator.validate({"id": 42, "extra": True}, {"id": 42})
        print(result.passed)   # True
    """

    def __init__(
        self,
        config: ValidationConfig | None = None,
        registry: MatcherRegistry | None = None,
    ) -> None:
        """Initialise the validator.

        Args:
            config: Strictness, ignore paths and cache sizing.  Defaults to
                ``ValidationConfig()`` (strict, nothing ignored).
            registry: Matcher registry snapshot.  Defaults to the built-in
                library.

        Raises:
            IgnorePathSyntaxError: If an ignore path is malformed.
        """
        self._config: ValidationConfig = (
            config if config is not None else ValidationConfig()
        )
        self._builder = TreeBuilder()
        self._dispatcher = MatcherDispatcher(registry)
        self._comparator = StructuralComparator(
            self._dispatcher,
            IgnoreFilter(
                self._config.ignore_paths, cache_size=self._config.ignore_cache_size
            ),
            strict=self._config.strict,
        )

    @property
    def config(self) -> ValidationConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate(self, actual: Any, expected: Any) -> ValidationResult:
        """Validate ``actual`` against ``expected``.

        Args:
            actual: The received document, as a TreeValue or plain JSON value.
            expected: The control document; may contain matcher expressions.

        Returns:
            A passed ``ValidationResult``, or a failed one carrying the path
            and message of the first mismatch.

        Raises:
            ConfigurationError: If a matcher expression cannot be resolved or
                a matcher rejects its control values.
            TypeError: If either document holds a non-JSON value.
        """
        t0 = time.perf_counter()
        actual_tree = self._builder.build(actual)
        expected_tree = self._builder.build(expected)
        logger.debug(
            "Start JSON element validation (strict=%s, %d ignore paths)",
            self._config.strict,
            len(self._config.ignore_paths),
        )

        try:
            if _is_empty(actual_tree) and _has_content(expected_tree):
                raise ValidationFailure(str(ROOT), diagnostics.empty_content())
            self._comparator.compare(actual_tree, expected_tree, ROOT)
        except ValidationFailure as failure:
            elapsed_ms = (time.perf_counter() - t0) * 1000.0
            logger.debug("JSON element validation failed at '%s'", failure.path)
            return ValidationResult.failure(failure.path, failure.message, elapsed_ms)

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        logger.debug("JSON element validation successful: All values OK")
        return ValidationResult.success(elapsed_ms)


def _has_content(tree: TreeValue) -> bool:
    return isinstance(tree, (ObjectValue, ArrayValue)) and len(tree) > 0


def _is_empty(tree: TreeValue) -> bool:
    """True for null and for an empty object, array or string at the root."""
    match tree:
        case NullValue():
            return True
        case ObjectValue() | ArrayValue():
            return len(tree) == 0
        case ScalarValue(value=str() as text):
            return text == ""
        case _:
            return False
