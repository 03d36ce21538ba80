"""Integration tests for the json-element-validator pytest plugin.

These tests verify that the assert_json_valid fixture is auto-discovered
via the pytest11 entry point and behaves correctly.

NOTE: These tests require json-element-validator to be installed (even in
editable mode via ``pip install -e .``). The pytest11 entry point is only
registered at install time -- running from a raw source checkout without
installing will not discover the fixture.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Any

import pytest

from json_element_validator import default_registry


class _IsUpper:
    def validate(
        self,
        field_path: str,
        value: str | None,
        control_values: list[str],
        context: Any,
    ) -> bool:
        return value is not None and value.isupper()


def test_fixture_passes_matching_docs(assert_json_valid: Any) -> None:
    assert_json_valid({"id": 42, "name": "Lorem"}, {"id": 42, "name": "Lorem"})


def test_fixture_fails_mismatch(assert_json_valid: Any) -> None:
    with pytest.raises(AssertionError, match=r"failed at \$\.id"):
        assert_json_valid({"id": 1}, {"id": 2})


def test_fixture_strict_flag(assert_json_valid: Any) -> None:
    assert_json_valid({"a": 1, "extra": True}, {"a": 1}, strict=False)
    with pytest.raises(AssertionError, match="Number of entries"):
        assert_json_valid({"a": 1, "extra": True}, {"a": 1})


def test_fixture_ignore_paths(assert_json_valid: Any) -> None:
    assert_json_valid(
        {"id": 1, "meta": {"ts": 123}}, {"id": 1, "meta": None}, ignore_paths=["$.meta"]
    )


def test_fixture_rejects_bare_string_ignore_paths(assert_json_valid: Any) -> None:
    with pytest.raises(TypeError, match="not a str"):
        assert_json_valid({"a": 1}, {"a": 2}, ignore_paths="$")


def test_fixture_custom_matchers(assert_json_valid: Any) -> None:
    registry = default_registry().with_matcher("IsUpper", _IsUpper())
    assert_json_valid({"code": "ABC"}, {"code": "@IsUpper()@"}, matchers=registry)


def test_fixture_error_message_contents(assert_json_valid: Any) -> None:
    with pytest.raises(AssertionError) as exc_info:
        assert_json_valid(
            {"name": "lorem ipsum"}, {"name": "@EqualsIgnoreCase('lorem')@"}
        )

    error_message = str(exc_info.value)
    assert "$.name" in error_message
    assert "EqualsIgnoreCase failed" in error_message
    assert "actual:" in error_message
    assert "expected:" in error_message


def test_fixture_returns_callable(assert_json_valid: Any) -> None:
    assert callable(assert_json_valid)


def test_plugin_discovery() -> None:
    """Verify assert_json_valid appears in pytest --fixtures output."""
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "--fixtures", "-q", "-p", "no:cacheprovider"],
        capture_output=True,
        text=True,
        cwd=str(Path(__file__).parent),
    )
    assert "assert_json_valid" in result.stdout, (
        f"Fixture not found in pytest fixtures list. stdout: {result.stdout[:500]}"
    )
