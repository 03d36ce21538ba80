"""ValidationMatcher Protocol for the matcher extension point.

Defines the structural interface every matcher must satisfy.  Users plug in
custom matchers without inheriting from any base class; any object with a
conformant ``validate`` method passes ``isinstance`` checks.

Example::

    from json_element_validator.protocols import ValidationMatcher

    class IsUpperCase:
        def validate(self, field_path, value, control_values, context):
            return value is not None and value.isupper()

    assert isinstance(IsUpperCase(), ValidationMatcher)  # structural conformance
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from json_element_validator.matchers.dispatcher import MatcherContext


@runtime_checkable
class ValidationMatcher(Protocol):
    """Structural protocol for matchers.

    The ``validate`` method must:
    - Accept the rendered field path, the actual value's string form (None
      for ``null``), the parsed control values and a ``MatcherContext``.
    - Return True when the value satisfies the matcher, False otherwise.
    - Raise ``MatcherConfigurationError`` when the control values themselves
      are unusable (wrong count, non-numeric threshold, invalid regex).
    """

    def validate(
        self,
        field_path: str,
        value: str | None,
        control_values: list[str],
        context: MatcherContext,
    ) -> bool: ...
