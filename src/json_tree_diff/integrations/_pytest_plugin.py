"""pytest plugin for json-tree-diff.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_tree_diff import DiffConfig, TreeComparator, format_value
from json_tree_diff.result import DiffNode, DiffType


def _describe_change(node: DiffNode) -> str:
    if node.classification is DiffType.ADDED:
        return f"  + {node.path}: {format_value(node.new_value)}"  # type: ignore[arg-type]
    if node.classification is DiffType.REMOVED:
        return f"  - {node.path}: {format_value(node.old_value)}"  # type: ignore[arg-type]
    return (
        f"  ~ {node.path}: {format_value(node.old_value)} -> "  # type: ignore[arg-type]
        f"{format_value(node.new_value)}"  # type: ignore[arg-type]
    )


@pytest.fixture(scope="session")
def assert_json_unchanged() -> Any:
    """Fixture that returns a callable JSON no-change asserter.

    The fixture is session-scoped because the returned callable is stateless
    (each call builds a fresh TreeComparator).

    Usage in tests::

        def test_roundtrip(assert_json_unchanged):
            assert_json_unchanged(load(dump(doc)), doc)

        def test_detects_change(assert_json_unchanged):
            with pytest.raises(AssertionError, match=r"~ age: 30 -> 31"):
                assert_json_unchanged({"age": 31}, {"age": 30})

    Returns:
        A callable ``_assert(actual, expected, *, config=None) -> None`` that
        raises ``AssertionError`` when any node of the comparison is not
        UNCHANGED.
    """

    def _assert(
        actual: Any,
        expected: Any,
        *,
        config: DiffConfig | None = None,
    ) -> None:
        """Assert that two JSON documents are structurally identical.

        ``expected`` is the old side and ``actual`` the new side, so an extra
        key in ``actual`` is reported as added.

        Raises:
            AssertionError: Listing every leaf-level change (the deepest
                differing nodes) with its path and old/new values.
        """
        result = TreeComparator(config=config).compare(expected, actual)
        if result.identical:
            return

        changes = [
            _describe_change(node)
            for root in result.roots
            for node in root.walk()
            if node.classification is not DiffType.UNCHANGED and not node.children
        ]
        raise AssertionError(
            f"JSON documents differ ({len(changes)} change(s)):\n" + "\n".join(changes)
        )

    return _assert
