"""DiffStats: classification counts over a diff forest.

``compute_stats`` counts every node, containers included, so a modified
object nested two levels deep contributes one MODIFIED count per level.  The
totals therefore measure nodes, not differing fields.  ``leaf_stats`` is the
separate field-level view: it only counts nodes that have no child nodes.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from json_tree_diff.result import DiffNode, DiffType

__all__ = ["DiffStats", "compute_stats", "leaf_stats"]


@dataclass(frozen=True, slots=True)
class DiffStats:
    """Number of nodes per classification."""

    added: int = 0
    removed: int = 0
    modified: int = 0
    unchanged: int = 0

    @property
    def total(self) -> int:
        return self.added + self.removed + self.modified + self.unchanged

    @property
    def changed(self) -> int:
        """Nodes that are not UNCHANGED."""
        return self.added + self.removed + self.modified

    def to_dict(self) -> dict[str, int]:
        return {
            "added": self.added,
            "removed": self.removed,
            "modified": self.modified,
            "unchanged": self.unchanged,
        }


def _iter_forest(forest: Iterable[DiffNode]) -> Iterator[DiffNode]:
    for root in forest:
        yield from root.walk()


def _count(nodes: Iterable[DiffNode]) -> DiffStats:
    counts = dict.fromkeys(DiffType, 0)
    for node in nodes:
        counts[node.classification] += 1
    return DiffStats(
        added=counts[DiffType.ADDED],
        removed=counts[DiffType.REMOVED],
        modified=counts[DiffType.MODIFIED],
        unchanged=counts[DiffType.UNCHANGED],
    )


def compute_stats(forest: Iterable[DiffNode]) -> DiffStats:
    """Count every node of the forest, containers and leaves alike."""
    return _count(_iter_forest(forest))


def leaf_stats(forest: Iterable[DiffNode]) -> DiffStats:
    """Count only nodes without child nodes (leaves and empty containers)."""
    return _count(node for node in _iter_forest(forest) if not node.children)
