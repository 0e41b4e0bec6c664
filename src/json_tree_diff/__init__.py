"""JSON tree diff - structural comparison of JSON documents."""

from __future__ import annotations

from json_tree_diff.algorithm.config import DiffConfig
from json_tree_diff.algorithm.stats import DiffStats, leaf_stats
from json_tree_diff.api import (
    compare,
    compare_documents,
    equal,
    is_identical,
    stats,
)
from json_tree_diff.comparator import TreeComparator
from json_tree_diff.formatting import format_value
from json_tree_diff.parsing import InvalidJSONError
from json_tree_diff.result import ComparisonResult, DiffNode, DiffType
from json_tree_diff.tree.nodes import Value, ValueKind

__version__: str = "0.1.0"
__all__: list[str] = [
    "ComparisonResult",
    "DiffConfig",
    "DiffNode",
    "DiffStats",
    "DiffType",
    "InvalidJSONError",
    "TreeComparator",
    "Value",
    "ValueKind",
    "compare",
    "compare_documents",
    "equal",
    "format_value",
    "is_identical",
    "leaf_stats",
    "stats",
]
