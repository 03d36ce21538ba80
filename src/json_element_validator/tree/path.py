"""ElementPath: the location of a node inside a document.

Paths are built while the comparator descends and are rendered only when a
diagnostic needs them.  The rendering convention is dotted JSONPath:

- Root is ``$``
- Object keys append ``.key``; keys containing dots, brackets, quotes or
  whitespace append ``['key']`` instead
- Array indexes append ``[i]``

so a mismatch nested at root -> element -> sub-element renders as
``$.root.element.sub-element``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["ROOT", "ElementPath", "PathSegment"]

PathSegment = str | int

# Keys that can be rendered with dot notation
_PLAIN_KEY = re.compile(r"[^.\[\]'\"\s]+")


@dataclass(frozen=True, slots=True)
class ElementPath:
    """Immutable sequence of object keys (str) and array indexes (int)."""

    segments: tuple[PathSegment, ...] = ()

    def key(self, name: str) -> ElementPath:
        """Return the path of the object entry ``name`` below this path."""
        return ElementPath((*self.segments, name))

    def index(self, position: int) -> ElementPath:
        """Return the path of the array item at ``position`` below this path."""
        return ElementPath((*self.segments, position))

    @property
    def depth(self) -> int:
        return len(self.segments)

    def __str__(self) -> str:
        parts = ["$"]
        for segment in self.segments:
            # bool never appears here; segments are built by key()/index() only
            if isinstance(segment, int):
                parts.append(f"[{segment}]")
            elif _PLAIN_KEY.fullmatch(segment):
                parts.append(f".{segment}")
            else:
                escaped = segment.replace("\\", "\\\\").replace("'", "\\'")
                parts.append(f"['{escaped}']")
        return "".join(parts)


ROOT = ElementPath()
