"""Tests for MatcherLibrary and MatcherRegistry.

Covers:
- Structural protocol conformance checks at registration time
- Immutability: with_* methods return new objects
- Lookup by prefix, fallback order for unprefixed names, case sensitivity
- UnknownMatcherError for unknown names and prefixes
"""

from __future__ import annotations

from typing import Any

import pytest

from json_element_validator.errors import ConfigurationError, UnknownMatcherError
from json_element_validator.matchers.library import default_library, default_registry
from json_element_validator.matchers.registry import MatcherLibrary, MatcherRegistry
from json_element_validator.protocols import ValidationMatcher

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class _Always:
    def __init__(self, verdict: bool) -> None:
        self.verdict = verdict

    def validate(
        self,
        field_path: str,
        value: str | None,
        control_values: list[str],
        context: Any,
    ) -> bool:
        return self.verdict


class _NoValidate:
    pass


# ---------------------------------------------------------------------------
# Protocol
# ---------------------------------------------------------------------------


class TestProtocol:
    def test_structural_conformance(self) -> None:
        assert isinstance(_Always(True), ValidationMatcher)

    def test_missing_method_is_not_a_matcher(self) -> None:
        assert not isinstance(_NoValidate(), ValidationMatcher)

    def test_builtins_conform(self) -> None:
        for matcher in default_library().matchers.values():
            assert isinstance(matcher, ValidationMatcher)


# ---------------------------------------------------------------------------
# MatcherLibrary
# ---------------------------------------------------------------------------


class TestMatcherLibrary:
    def test_rejects_non_matcher(self) -> None:
        with pytest.raises(TypeError, match="does not implement validate"):
            MatcherLibrary(name="bad", matchers={"X": _NoValidate()})  # type: ignore[dict-item]

    def test_rejects_bad_name(self) -> None:
        with pytest.raises(ValueError, match="identifier"):
            MatcherLibrary(name="bad", matchers={"has space": _Always(True)})

    def test_rejects_bad_prefix(self) -> None:
        with pytest.raises(ValueError, match="prefix"):
            MatcherLibrary(name="bad", prefix="a:b")

    def test_matchers_are_read_only(self) -> None:
        library = MatcherLibrary(name="lib", matchers={"X": _Always(True)})
        with pytest.raises(TypeError):
            library.matchers["Y"] = _Always(True)  # type: ignore[index]

    def test_with_matcher_returns_copy(self) -> None:
        library = MatcherLibrary(name="lib")
        extended = library.with_matcher("X", _Always(True))
        assert "X" in extended
        assert "X" not in library
        assert extended.get("Y") is None


# ---------------------------------------------------------------------------
# MatcherRegistry
# ---------------------------------------------------------------------------


class TestMatcherRegistry:
    def test_default_registry_contents(self) -> None:
        registry = default_registry()
        assert len(registry) == 1
        assert registry.library("").name == "default"
        assert "EqualsIgnoreCase" in registry.library("")

    def test_duplicate_prefix_rejected(self) -> None:
        with pytest.raises(ValueError, match="Duplicate"):
            MatcherRegistry([MatcherLibrary(name="a"), MatcherLibrary(name="b")])

    def test_with_library_does_not_mutate(self) -> None:
        registry = default_registry()
        extended = registry.with_library(
            MatcherLibrary(name="custom", prefix="my", matchers={"X": _Always(True)})
        )
        assert len(registry) == 1
        assert len(extended) == 2
        assert [lib.prefix for lib in extended] == ["", "my"]

    def test_with_matcher_creates_library(self) -> None:
        registry = MatcherRegistry().with_matcher("X", _Always(True), prefix="my")
        assert registry.library("my").get("X") is not None

    def test_with_matcher_overrides_in_place(self) -> None:
        custom = _Always(False)
        registry = default_registry().with_matcher("Contains", custom)
        assert registry.resolve("Contains") is custom
        assert default_registry().resolve("Contains") is not custom

    def test_resolve_prefixed(self) -> None:
        matcher = _Always(True)
        registry = default_registry().with_matcher("X", matcher, prefix="my")
        assert registry.resolve("X", "my") is matcher

    def test_prefixed_lookup_does_not_fall_back(self) -> None:
        registry = default_registry().with_matcher("X", _Always(True), prefix="my")
        with pytest.raises(UnknownMatcherError):
            registry.resolve("Contains", "my")

    def test_unprefixed_falls_back_to_other_libraries(self) -> None:
        matcher = _Always(True)
        registry = default_registry().with_matcher("X", matcher, prefix="my")
        assert registry.resolve("X") is matcher

    def test_default_library_wins(self) -> None:
        shadow = _Always(False)
        registry = default_registry().with_matcher("Contains", shadow, prefix="my")
        assert registry.resolve("Contains") is not shadow

    def test_fallback_in_registration_order(self) -> None:
        first, second = _Always(True), _Always(False)
        registry = (
            MatcherRegistry()
            .with_matcher("X", first, prefix="a")
            .with_matcher("X", second, prefix="b")
        )
        assert registry.resolve("X") is first

    def test_names_are_case_sensitive(self) -> None:
        with pytest.raises(UnknownMatcherError):
            default_registry().resolve("equalsignorecase")

    def test_unknown_name_message(self) -> None:
        with pytest.raises(UnknownMatcherError, match="'Nope' in any registered library"):
            default_registry().resolve("Nope")

    def test_unknown_prefix(self) -> None:
        with pytest.raises(UnknownMatcherError, match="prefix 'zz'"):
            default_registry().resolve("Contains", "zz")

    def test_unknown_matcher_is_configuration_and_lookup_error(self) -> None:
        with pytest.raises(ConfigurationError):
            default_registry().resolve("Nope")
        with pytest.raises(LookupError):
            default_registry().resolve("Nope")
