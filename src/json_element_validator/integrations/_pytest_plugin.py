"""pytest plugin for json-element-validator.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

import pytest

from json_element_validator.api import validate
from json_element_validator.matchers.registry import MatcherRegistry


@pytest.fixture(scope="session")
def assert_json_valid() -> Callable[..., None]:
    """Fixture that returns a callable JSON element asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to validate() which creates a fresh ElementValidator per call).

    Usage in tests::

        def test_payload(assert_json_valid):
            assert_json_valid({"id": 42, "name": "Lorem"},
                              {"id": 42, "name": "@EqualsIgnoreCase('lorem')@"})

        def test_mismatch(assert_json_valid):
            with pytest.raises(AssertionError, match=r"\\$\\.id"):
                assert_json_valid({"id": 1}, {"id": 2})

    Returns:
        A callable ``_assert(actual, expected, strict=True, ignore_paths=(),
        matchers=None) -> None`` that raises ``AssertionError`` on the first
        mismatch.
    """

    def _assert(
        actual: Any,
        expected: Any,
        strict: bool = True,
        ignore_paths: Iterable[str] = (),
        matchers: MatcherRegistry | None = None,
    ) -> None:
        """Assert that ``actual`` satisfies ``expected``.

        Raises:
            AssertionError: With the failing path, the mismatch message and
                both documents.
        """
        result = validate(
            actual, expected, strict=strict, ignore_paths=ignore_paths, matchers=matchers
        )
        if not result.passed:
            raise AssertionError(
                f"JSON element validation failed at {result.path}: {result.message}\n"
                f"  actual:   {actual}\n"
                f"  expected: {expected}"
            )

    return _assert
