"""json-element-validator - structural validation of JSON-like documents."""

from __future__ import annotations

import logging

from json_element_validator.algorithm.config import ValidationConfig
from json_element_validator.api import assert_valid, is_valid, validate
from json_element_validator.errors import (
    ConfigurationError,
    IgnorePathSyntaxError,
    MatcherConfigurationError,
    MatcherSyntaxError,
    UnknownMatcherError,
    ValidationFailure,
)
from json_element_validator.matchers import (
    MatcherLibrary,
    MatcherRegistry,
    default_registry,
)
from json_element_validator.protocols import ValidationMatcher
from json_element_validator.result import ValidationResult
from json_element_validator.validator import ElementValidator

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "ConfigurationError",
    "ElementValidator",
    "IgnorePathSyntaxError",
    "MatcherConfigurationError",
    "MatcherLibrary",
    "MatcherRegistry",
    "MatcherSyntaxError",
    "UnknownMatcherError",
    "ValidationConfig",
    "ValidationFailure",
    "ValidationMatcher",
    "ValidationResult",
    "assert_valid",
    "default_registry",
    "is_valid",
    "validate",
]
