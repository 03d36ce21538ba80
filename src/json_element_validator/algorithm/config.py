"""ValidationConfig: the two caller-facing tunables plus cache sizing.

ValidationConfig is a frozen (immutable) dataclass so a single instance can
be shared between concurrent validations.  ``from_env`` supports the
``JSON_ELEMENT_VALIDATOR_STRICT`` environment variable for suites that flip
strictness globally.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

__all__ = ["STRICT_ENV_VAR", "ValidationConfig"]

STRICT_ENV_VAR = "JSON_ELEMENT_VALIDATOR_STRICT"

_TRUE_VALUES = frozenset({"true", "1", "yes", "on"})
_FALSE_VALUES = frozenset({"false", "0", "no", "off"})


@dataclass(frozen=True, slots=True)
class ValidationConfig:
    """Immutable configuration for one or more validations.

    Attributes:
        strict: When True, objects must have exactly the expected key set and
            arrays exactly the expected length.  When False, extra object keys
            are ignored and longer arrays are searched for the expected items.
            Defaults to True.
        ignore_paths: Path patterns (``$.a.b``, ``$..index``, ``$.items[*].id``)
            whose subtrees are exempt from comparison.  Any iterable of strings
            is accepted and stored as a frozenset.
        ignore_cache_size: Maximum number of path decisions memoized by each
            validator's ignore filter.  Must be >= 1.
    """

    strict: bool = True
    ignore_paths: frozenset[str] = field(default_factory=frozenset)
    ignore_cache_size: int = 256

    def __post_init__(self) -> None:
        if not isinstance(self.strict, bool):
            msg = f"strict must be a bool, got {type(self.strict)!r}"
            raise TypeError(msg)
        # A bare string would otherwise be split into single-character patterns
        if isinstance(self.ignore_paths, str):
            msg = "ignore_paths must be an iterable of path strings, not a str"
            raise TypeError(msg)
        paths = frozenset(self.ignore_paths)
        for path in paths:
            if not isinstance(path, str):
                msg = f"ignore_paths entries must be str, got {type(path)!r}"
                raise TypeError(msg)
        object.__setattr__(self, "ignore_paths", paths)
        if self.ignore_cache_size < 1:
            msg = f"ignore_cache_size must be >= 1, got {self.ignore_cache_size}"
            raise ValueError(msg)

    @classmethod
    def from_env(
        cls,
        ignore_paths: Iterable[str] = (),
        environ: Mapping[str, str] | None = None,
    ) -> ValidationConfig:
        """Build a config whose ``strict`` flag comes from the environment.

        Args:
            ignore_paths: Forwarded unchanged.
            environ: Mapping to read from.  Defaults to ``os.environ``.

        Returns:
            A ValidationConfig; strict defaults to True when the variable is
            unset or blank.

        Raises:
            ValueError: If the variable holds something other than a boolean
                word (true/false, 1/0, yes/no, on/off).
        """
        env = os.environ if environ is None else environ
        raw = env.get(STRICT_ENV_VAR, "").strip().lower()
        if not raw or raw in _TRUE_VALUES:
            strict = True
        elif raw in _FALSE_VALUES:
            strict = False
        else:
            msg = f"{STRICT_ENV_VAR} must be a boolean, got {raw!r}"
            raise ValueError(msg)
        return cls(
            strict=strict, ignore_paths=ignore_paths  # type: ignore[arg-type]
        )
