"""ValidationResult dataclass for validation output.

This module provides the result type returned by validate() calls.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ValidationResult"]


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of a validate() call.

    A passed result has neither path nor message.  A failed result carries
    exactly one of each: validation stops at the first mismatch.

    Attributes:
        passed: True when the actual document satisfies the expected one.
        path: Location of the first mismatch (``"$.person.name"``), or None.
        message: Human-readable description of the mismatch, or None.
        computation_time_ms: Wall-clock duration of the validation in milliseconds.
    """

    passed: bool
    path: str | None = None
    message: str | None = None
    computation_time_ms: float = 0.0

    @classmethod
    def success(cls, computation_time_ms: float = 0.0) -> ValidationResult:
        return cls(passed=True, computation_time_ms=computation_time_ms)

    @classmethod
    def failure(
        cls, path: str, message: str, computation_time_ms: float = 0.0
    ) -> ValidationResult:
        return cls(
            passed=False,
            path=path,
            message=message,
            computation_time_ms=computation_time_ms,
        )

    def __bool__(self) -> bool:
        return self.passed
