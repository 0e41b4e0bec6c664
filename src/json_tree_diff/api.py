"""Public API functions for json-tree-diff.

Each call creates a fresh ``DiffEngine`` (or ``TreeComparator``) to guarantee
zero global state between calls.  All functions accept ``Value`` trees or
native JSON values interchangeably.
"""

from __future__ import annotations

from collections.abc import Iterable

from json_tree_diff.algorithm.config import DiffConfig
from json_tree_diff.algorithm.engine import DiffEngine
from json_tree_diff.algorithm.equality import deep_equal
from json_tree_diff.algorithm.stats import DiffStats, compute_stats
from json_tree_diff.comparator import TreeComparator
from json_tree_diff.parsing import parse_document
from json_tree_diff.result import ComparisonResult, DiffNode, DiffType
from json_tree_diff.tree.builder import JsonValue, ValueBuilder
from json_tree_diff.tree.nodes import Value

__all__ = ["compare", "compare_documents", "equal", "is_identical", "stats"]


def compare(
    old: Value | JsonValue,
    new: Value | JsonValue,
    path: str = "",
    config: DiffConfig | None = None,
) -> list[DiffNode]:
    """Compare two documents and return the diff forest.

    Args:
        old:    Old-side document.
        new:    New-side document.
        path:   Path prefix; ``""`` (default) compares whole documents and
                labels the root ``"/"``.
        config: Engine options.  Defaults to ``DiffConfig()`` when None.

    Returns:
        A list with exactly one root ``DiffNode``.
    """
    builder = ValueBuilder()
    return DiffEngine(config=config).compare(builder.build(old), builder.build(new), path)


def compare_documents(
    old_text: str,
    new_text: str,
    config: DiffConfig | None = None,
) -> ComparisonResult:
    """Parse two JSON texts and compare them.

    Both texts are parsed before the engine runs; nothing is compared when
    either side is invalid.

    Raises:
        InvalidJSONError: If either text is empty or not valid JSON.  The
            error's ``source`` is ``"old"`` or ``"new"``.
    """
    old_value = parse_document(old_text, source="old")
    new_value = parse_document(new_text, source="new")
    return TreeComparator(config=config).compare(old_value, new_value)


def equal(a: Value | JsonValue, b: Value | JsonValue) -> bool:
    """Return True if the two values are deep-equal."""
    builder = ValueBuilder()
    return deep_equal(builder.build(a), builder.build(b))


def stats(forest: Iterable[DiffNode]) -> DiffStats:
    """Count every node of a diff forest by classification.

    Containers count alongside their descendants: ``{"a": {"b": 1}}`` vs
    ``{"a": {"b": 2}}`` reports three MODIFIED nodes (root, ``a``, ``a.b``).
    Use ``json_tree_diff.algorithm.leaf_stats`` for a leaf-only count.
    """
    return compute_stats(forest)


def is_identical(old: Value | JsonValue, new: Value | JsonValue) -> bool:
    """Return True if comparing the documents yields only UNCHANGED nodes."""
    return all(node.classification is DiffType.UNCHANGED for node in compare(old, new))
