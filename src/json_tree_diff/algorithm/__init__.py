"""algorithm subpackage: public API for the diff engine.

Provides deep equality, the lockstep comparator, its configuration and the
statistics aggregator.  Import from this module (not from sub-modules
directly) to stay on the stable public interface.

Example::

    from json_tree_diff.algorithm import DiffEngine, compute_stats
    from json_tree_diff.tree import ValueBuilder

    build = ValueBuilder().build
    forest = DiffEngine().compare(build({"a": {"b": 1}}), build({"a": {"b": 2}}))
    compute_stats(forest).modified   # 3: root, "a" and "a.b"
"""

from __future__ import annotations

from json_tree_diff.algorithm.config import DiffConfig
from json_tree_diff.algorithm.engine import DiffEngine
from json_tree_diff.algorithm.equality import deep_equal
from json_tree_diff.algorithm.stats import DiffStats, compute_stats, leaf_stats

__all__ = [
    "DiffConfig",
    "DiffEngine",
    "DiffStats",
    "compute_stats",
    "deep_equal",
    "leaf_stats",
]
