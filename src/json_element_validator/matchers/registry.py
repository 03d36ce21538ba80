"""MatcherLibrary and MatcherRegistry: immutable name -> matcher lookup.

Registration happens in a distinct phase before validation: every
``with_*`` method returns a *new* object and never mutates the receiver, so a
registry handed to concurrent validations is a read-only snapshot.

Lookup rules:

- Names are case-sensitive.
- ``lib:Name`` looks only in the library registered under prefix ``lib``.
- A bare ``Name`` looks in the default library (prefix ``""``) first, then in
  the other libraries in registration order; the first match wins.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from json_element_validator.errors import UnknownMatcherError
from json_element_validator.protocols import ValidationMatcher

__all__ = ["MatcherLibrary", "MatcherRegistry"]

logger = logging.getLogger(__name__)

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


@dataclass(frozen=True, slots=True)
class MatcherLibrary:
    """A named group of matchers sharing one expression prefix.

    Attributes:
        name: Display name used in log and error messages.
        prefix: Expression prefix without the colon; ``""`` is the default
            library that bare ``@Name(...)@`` expressions resolve against.
        matchers: Mapping from case-sensitive matcher name to implementation.
            Stored as a read-only mapping.
    """

    name: str
    prefix: str = ""
    matchers: Mapping[str, ValidationMatcher] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.prefix and not _IDENTIFIER.fullmatch(self.prefix):
            msg = f"Library prefix must be an identifier, got {self.prefix!r}"
            raise ValueError(msg)
        for matcher_name, matcher in self.matchers.items():
            _check_matcher(matcher_name, matcher)
        object.__setattr__(self, "matchers", MappingProxyType(dict(self.matchers)))

    def get(self, name: str) -> ValidationMatcher | None:
        return self.matchers.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self.matchers

    def with_matcher(self, name: str, matcher: ValidationMatcher) -> MatcherLibrary:
        """Return a copy of this library with ``name`` (re)bound to ``matcher``."""
        return MatcherLibrary(
            name=self.name,
            prefix=self.prefix,
            matchers={**self.matchers, name: matcher},
        )


def _check_matcher(name: str, matcher: object) -> None:
    if not _IDENTIFIER.fullmatch(name):
        msg = f"Matcher name must be an identifier, got {name!r}"
        raise ValueError(msg)
    if not isinstance(matcher, ValidationMatcher):
        msg = f"Matcher {name!r} does not implement validate(): {type(matcher)!r}"
        raise TypeError(msg)


class MatcherRegistry:
    """Immutable collection of matcher libraries keyed by prefix.

    Example::

        from json_element_validator.matchers import MatcherLibrary, default_registry

        registry = default_registry().with_library(
            MatcherLibrary(name="custom", prefix="my", matchers={"IsUpper": IsUpper()})
        )
        # "@my:IsUpper()@" now resolves; "@IsUpper()@" resolves too (fallback)
    """

    __slots__ = ("_libraries",)

    def __init__(self, libraries: Iterable[MatcherLibrary] = ()) -> None:
        by_prefix: dict[str, MatcherLibrary] = {}
        for library in libraries:
            if library.prefix in by_prefix:
                msg = f"Duplicate matcher library prefix: {library.prefix!r}"
                raise ValueError(msg)
            by_prefix[library.prefix] = library
        self._libraries: Mapping[str, MatcherLibrary] = MappingProxyType(by_prefix)

    def __iter__(self) -> Iterator[MatcherLibrary]:
        return iter(self._libraries.values())

    def __len__(self) -> int:
        return len(self._libraries)

    def library(self, prefix: str = "") -> MatcherLibrary:
        """Return the library registered under ``prefix``.

        Raises:
            UnknownMatcherError: If no library uses that prefix.
        """
        try:
            return self._libraries[prefix]
        except KeyError:
            raise UnknownMatcherError(
                f"Can not find validation matcher library for prefix '{prefix}'"
            ) from None

    def with_library(self, library: MatcherLibrary) -> MatcherRegistry:
        """Return a new registry that also contains ``library``.

        Raises:
            ValueError: If a library with the same prefix is already present.
        """
        logger.debug(
            "Registering matcher library '%s' (prefix '%s') with %d matchers",
            library.name,
            library.prefix,
            len(library.matchers),
        )
        return MatcherRegistry([*self._libraries.values(), library])

    def with_matcher(
        self, name: str, matcher: ValidationMatcher, prefix: str = ""
    ) -> MatcherRegistry:
        """Return a new registry with ``name`` added to the ``prefix`` library.

        The library is created when the prefix is not registered yet.
        """
        current = self._libraries.get(prefix)
        updated = (
            MatcherLibrary(name=prefix or "default", prefix=prefix, matchers={name: matcher})
            if current is None
            else current.with_matcher(name, matcher)
        )
        libraries = [lib for lib in self._libraries.values() if lib.prefix != prefix]
        return MatcherRegistry([*libraries, updated])

    def resolve(self, name: str, prefix: str = "") -> ValidationMatcher:
        """Look up a matcher by name.

        Args:
            name: Case-sensitive matcher name.
            prefix: Library prefix; ``""`` searches the default library first
                and then every other library in registration order.

        Raises:
            UnknownMatcherError: If the prefix or the name is unknown.
        """
        if prefix:
            matcher = self.library(prefix).get(name)
        else:
            matcher = None
            default = self._libraries.get("")
            candidates = [default] if default is not None else []
            candidates += [lib for lib in self._libraries.values() if lib.prefix]
            for library in candidates:
                matcher = library.get(name)
                if matcher is not None:
                    break

        if matcher is None:
            qualified = f"{prefix}:{name}" if prefix else name
            raise UnknownMatcherError(
                f"Can not find validation matcher '{qualified}' in any registered library"
            )
        return matcher
