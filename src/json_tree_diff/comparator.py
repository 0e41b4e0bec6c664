"""TreeComparator: orchestrator that wires ValueBuilder + DiffEngine + stats.

This is the wiring layer between the raw engine and the public API.  It
coerces native inputs into ``Value`` trees, runs the engine, aggregates the
counts and wraps everything in a ``ComparisonResult`` with timing data.
"""

from __future__ import annotations

import logging
import time

from json_tree_diff.algorithm.config import DiffConfig
from json_tree_diff.algorithm.engine import DiffEngine
from json_tree_diff.algorithm.stats import compute_stats
from json_tree_diff.result import ComparisonResult
from json_tree_diff.tree.builder import JsonValue, ValueBuilder
from json_tree_diff.tree.nodes import Value

__all__ = ["TreeComparator"]

logger = logging.getLogger(__name__)


class TreeComparator:
    """Orchestrator for structural JSON comparison.

    Accepts either ``Value`` trees or native JSON values (dict, list, str,
    int, float, bool, None) on each side.  Native values are converted with a
    fresh ``ValueBuilder`` pass, so the caller's data is never shared with the
    result.

    Example::

        from json_tree_diff.comparator import TreeComparator

        result = TreeComparator().compare({"x": 1}, {"y": 1})
        result.root.classification   # DiffType.MODIFIED
        result.stats.to_dict()       # {"added": 1, "removed": 1, "modified": 1, "unchanged": 0}
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        self._config: DiffConfig = config if config is not None else DiffConfig()
        self._engine = DiffEngine(config=self._config)
        self._builder = ValueBuilder()

    @property
    def config(self) -> DiffConfig:
        return self._config

    def compare(
        self,
        old: Value | JsonValue,
        new: Value | JsonValue,
        path: str = "",
    ) -> ComparisonResult:
        """Compare two documents and return a ``ComparisonResult``.

        Args:
            old:  Old-side document.
            new:  New-side document.
            path: Path prefix; ``""`` (default) for whole documents.

        Raises:
            TypeError: If either side contains a non-JSON value.
        """
        t0 = time.perf_counter()

        old_value = self._builder.build(old)
        new_value = self._builder.build(new)
        roots = self._engine.compare(old_value, new_value, path)
        stats = compute_stats(roots)

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        logger.debug(
            "compared %s vs %s in %.3f ms: %d added, %d removed, %d modified, %d unchanged",
            old_value.kind,
            new_value.kind,
            elapsed_ms,
            stats.added,
            stats.removed,
            stats.modified,
            stats.unchanged,
        )

        return ComparisonResult(
            roots=tuple(roots),
            stats=stats,
            computation_time_ms=elapsed_ms,
        )
