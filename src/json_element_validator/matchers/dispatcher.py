"""MatcherDispatcher: routes ``@Name(args)@`` leaves to registered matchers.

The dispatcher's only jobs are name resolution, argument passthrough and
uniform failure wrapping.  Each matcher decides pass/fail on its own; the
dispatcher turns a ``False`` into a ``ValidationFailure`` whose message reads::

    <Name> failed for field '<path>': Received value is '<actual>', control value is '<args>'

Configuration problems (unknown matcher, malformed expression, unusable
control values) propagate as ``ConfigurationError`` subclasses.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from json_element_validator import diagnostics
from json_element_validator.errors import MatcherSyntaxError, ValidationFailure
from json_element_validator.matchers.expression import (
    MatcherExpression,
    parse_matcher_expression,
)
from json_element_validator.matchers.library import default_registry
from json_element_validator.matchers.registry import MatcherRegistry

__all__ = ["MatcherContext", "MatcherDispatcher"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MatcherContext:
    """Context handed to every matcher call.

    Gives composed matchers (``Not``) access to the dispatcher so they can
    evaluate a nested expression against the same value.
    """

    dispatcher: MatcherDispatcher

    def evaluate(self, expression: str, field_path: str, value: str | None) -> bool:
        """Evaluate a nested ``@...@`` expression and return its verdict.

        Raises:
            MatcherSyntaxError: If ``expression`` is not a matcher expression.
        """
        return self.dispatcher.matches(
            self.dispatcher.require(expression), field_path, value
        )


class MatcherDispatcher:
    """Resolves matcher expressions against an immutable MatcherRegistry.

    Args:
        registry: Registry snapshot to resolve names against.  Defaults to
            the built-in library.
    """

    def __init__(self, registry: MatcherRegistry | None = None) -> None:
        self._registry = registry if registry is not None else default_registry()

    @property
    def registry(self) -> MatcherRegistry:
        return self._registry

    def try_resolve(self, text: str) -> MatcherExpression | None:
        """Return the parsed expression, or None for a plain leaf value."""
        return parse_matcher_expression(text)

    def require(self, text: str) -> MatcherExpression:
        expression = parse_matcher_expression(text)
        if expression is None:
            raise MatcherSyntaxError(f"Not a validation matcher expression: {text!r}")
        return expression

    def matches(
        self, expression: MatcherExpression, field_path: str, value: str | None
    ) -> bool:
        """Run the matcher and return its verdict without raising on mismatch."""
        matcher = self._registry.resolve(expression.name, expression.prefix)
        logger.debug(
            "Resolved validation matcher '%s' for field '%s'",
            expression.qualified_name,
            field_path,
        )
        return bool(
            matcher.validate(
                field_path, value, list(expression.control_values), MatcherContext(self)
            )
        )

    def dispatch(
        self,
        expression: MatcherExpression | str,
        field_path: str,
        value: str | None,
    ) -> None:
        """Validate ``value`` with the matcher named by ``expression``.

        Args:
            expression: A parsed expression or the raw ``@...@`` text.
            field_path: Rendered path of the node, used in the failure message.
            value: Natural string form of the actual node; None for ``null``.

        Raises:
            ValidationFailure: If the matcher rejects the value.
            ConfigurationError: If the expression cannot be resolved.
        """
        if isinstance(expression, str):
            expression = self.require(expression)
        if not self.matches(expression, field_path, value):
            raise ValidationFailure(
                field_path,
                diagnostics.matcher_failure(
                    expression.name, field_path, value, expression.control_values
                ),
            )
