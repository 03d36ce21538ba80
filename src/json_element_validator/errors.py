"""Exception types raised by json-element-validator.

Two families are kept strictly apart:

- ``ValidationFailure``: the documents differ.  This is the expected outcome
  of normal use and carries the offending path plus a readable message.
- ``ConfigurationError``: the validation itself is misconfigured (unknown
  matcher, malformed matcher expression, malformed ignore path).  These are
  never reported as content mismatches and always abort the call.
"""

from __future__ import annotations

__all__ = [
    "ConfigurationError",
    "IgnorePathSyntaxError",
    "MatcherConfigurationError",
    "MatcherSyntaxError",
    "UnknownMatcherError",
    "ValidationFailure",
]


class ValidationFailure(AssertionError):
    """The actual document does not satisfy the expected document.

    Subclasses ``AssertionError`` so that ``assert_valid`` reads naturally
    inside test suites.

    Attributes:
        path:    Location of the first mismatch, e.g. ``"$.person.name"``.
        message: Human-readable description, including expected and actual.
    """

    def __init__(self, path: str, message: str) -> None:
        super().__init__(message)
        self.path = path
        self.message = message


class ConfigurationError(Exception):
    """Base class for errors caused by a misconfigured validation."""


class UnknownMatcherError(ConfigurationError, LookupError):
    """A matcher expression references a name or prefix nobody registered."""


class MatcherSyntaxError(ConfigurationError):
    """A ``@...@`` leaf value cannot be parsed as a matcher expression."""


class MatcherConfigurationError(ConfigurationError, ValueError):
    """A matcher received control values it cannot work with."""


class IgnorePathSyntaxError(ConfigurationError, ValueError):
    """An ignore-path pattern is not a valid path expression."""
