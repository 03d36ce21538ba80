"""IgnoreFilter: decides whether a path is exempt from comparison.

Ignore paths use a JSONPath subset:

- ``$``                     the root
- ``.name`` / ``['name']``  an object key (``["name"]`` works too)
- ``[3]``                   an array index
- ``.*`` / ``[*]``          any single key or index
- ``..step``                recursive descent: ``step`` at any depth below
- trailing ``..``           anything beneath the preceding prefix

A pattern must match the *whole* path of a node.  The comparator consults
the filter before descending, so an ignored node's subtree is never visited.

Patterns are compiled once when the filter is built; a malformed pattern
raises ``IgnorePathSyntaxError`` before any comparison starts.  Match
decisions are memoized per filter instance in an ``LRUCache`` because the
non-strict array search re-visits the same expected paths for every
candidate element.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from cachetools import LRUCache

from json_element_validator.errors import IgnorePathSyntaxError
from json_element_validator.tree.path import ElementPath, PathSegment

__all__ = ["IgnoreFilter", "IgnorePattern", "is_ignored", "parse_path"]

_NAME = re.compile(r"[^.\[\]\s]+")
_BRACKET = re.compile(
    r"""\[\s*(?:'(?P<single>(?:[^'\\]|\\.)*)'"""
    r"""|"(?P<double>(?:[^"\\]|\\.)*)\""""
    r"""|(?P<index>\d+)"""
    r"""|(?P<star>\*))\s*\]"""
)
_ESCAPE = re.compile(r"\\(.)")


@dataclass(frozen=True, slots=True)
class _Step:
    """One pattern step.  ``selector`` None is the wildcard."""

    recursive: bool
    selector: PathSegment | None

    def accepts(self, segment: PathSegment) -> bool:
        if self.selector is None:
            return True
        # Keys only match names, indexes only match indexes
        if isinstance(self.selector, int):
            return isinstance(segment, int) and segment == self.selector
        return isinstance(segment, str) and segment == self.selector


@dataclass(frozen=True, slots=True)
class IgnorePattern:
    """A compiled ignore-path pattern.

    Attributes:
        source: The pattern text as supplied by the caller.
        steps: Compiled steps after the leading ``$``.
        open_ended: True when the pattern ends with ``..`` and therefore also
            matches every path below its prefix.
    """

    source: str
    steps: tuple[_Step, ...]
    open_ended: bool = False

    @classmethod
    def compile(cls, pattern: str) -> IgnorePattern:
        """Parse ``pattern`` into an IgnorePattern.

        Raises:
            IgnorePathSyntaxError: If the pattern does not start with ``$`` or
                contains an unparseable step.
        """
        text = pattern.strip()
        if not text.startswith("$"):
            raise IgnorePathSyntaxError(
                f"Ignore path must start with '$': {pattern!r}"
            )

        steps: list[_Step] = []
        open_ended = False
        pos = 1
        while pos < len(text):
            recursive = False
            if text.startswith("..", pos):
                recursive = True
                pos += 2
                if pos == len(text):
                    open_ended = True
                    break
                if text[pos] == "[":
                    selector, pos = _parse_bracket(text, pos, pattern)
                else:
                    selector, pos = _parse_name(text, pos, pattern)
            elif text[pos] == ".":
                selector, pos = _parse_name(text, pos + 1, pattern)
            elif text[pos] == "[":
                selector, pos = _parse_bracket(text, pos, pattern)
            else:
                raise IgnorePathSyntaxError(
                    f"Unexpected character {text[pos]!r} at position {pos} "
                    f"in ignore path {pattern!r}"
                )
            steps.append(_Step(recursive=recursive, selector=selector))

        return cls(source=pattern, steps=tuple(steps), open_ended=open_ended)

    @property
    def is_concrete(self) -> bool:
        """True when the pattern names exactly one path (no wildcards)."""
        return not self.open_ended and all(
            not step.recursive and step.selector is not None for step in self.steps
        )

    def matches(self, path: ElementPath) -> bool:
        """Return True when this pattern matches the whole of ``path``."""
        return self._walk(path.segments, 0, 0)

    def _walk(self, segments: tuple[PathSegment, ...], s: int, p: int) -> bool:
        if s == len(self.steps):
            return p == len(segments) or self.open_ended
        step = self.steps[s]
        if step.recursive:
            # Skip zero or more intermediate segments, then apply the selector
            return any(
                step.accepts(segments[q]) and self._walk(segments, s + 1, q + 1)
                for q in range(p, len(segments))
            )
        return (
            p < len(segments)
            and step.accepts(segments[p])
            and self._walk(segments, s + 1, p + 1)
        )


def _parse_name(text: str, pos: int, pattern: str) -> tuple[PathSegment | None, int]:
    match = _NAME.match(text, pos)
    if match is None:
        raise IgnorePathSyntaxError(
            f"Expected a key name at position {pos} in ignore path {pattern!r}"
        )
    name = match.group(0)
    return (None if name == "*" else name), match.end()


def _parse_bracket(
    text: str, pos: int, pattern: str
) -> tuple[PathSegment | None, int]:
    match = _BRACKET.match(text, pos)
    if match is None:
        raise IgnorePathSyntaxError(
            f"Malformed bracket expression at position {pos} in ignore path {pattern!r}"
        )
    if match.group("star") is not None:
        return None, match.end()
    if match.group("index") is not None:
        return int(match.group("index")), match.end()
    quoted = match.group("single")
    if quoted is None:
        quoted = match.group("double")
    return _ESCAPE.sub(r"\1", quoted), match.end()


def parse_path(text: str) -> ElementPath:
    """Parse a concrete path string such as ``$.a['b c'][2]``.

    Raises:
        IgnorePathSyntaxError: If the text is malformed or contains
            wildcards / recursive descent.
    """
    pattern = IgnorePattern.compile(text)
    if not pattern.is_concrete:
        raise IgnorePathSyntaxError(f"Not a concrete path: {text!r}")
    # is_concrete guarantees every selector is set
    return ElementPath(tuple(step.selector for step in pattern.steps))  # type: ignore[misc]


class IgnoreFilter:
    """Compiled set of ignore patterns with a per-instance decision cache.

    Each instance owns its own ``LRUCache``; two filters never share state.

    Args:
        patterns: Ignore-path pattern strings.
        cache_size: Maximum number of memoized path decisions.  Defaults to
            256.  Eviction is silent.

    Raises:
        IgnorePathSyntaxError: If any pattern is malformed.
    """

    def __init__(self, patterns: Iterable[str] = (), cache_size: int = 256) -> None:
        self._patterns: tuple[IgnorePattern, ...] = tuple(
            IgnorePattern.compile(p) for p in sorted(set(patterns))
        )
        self._cache: LRUCache[tuple[PathSegment, ...], bool] = LRUCache(
            maxsize=cache_size
        )

    @property
    def patterns(self) -> tuple[IgnorePattern, ...]:
        return self._patterns

    def __bool__(self) -> bool:
        return bool(self._patterns)

    def is_ignored(self, path: ElementPath) -> bool:
        """Return True when any pattern matches ``path``."""
        if not self._patterns:
            return False
        key = path.segments
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        result = any(pattern.matches(path) for pattern in self._patterns)
        self._cache[key] = result
        return result


def is_ignored(path: str | ElementPath, patterns: Iterable[str]) -> bool:
    """One-shot check: is ``path`` exempted by any of ``patterns``?

    Args:
        path: An ElementPath or its string form (``"$.object.id"``).
        patterns: Ignore-path pattern strings.
    """
    element_path = parse_path(path) if isinstance(path, str) else path
    return IgnoreFilter(patterns).is_ignored(element_path)
