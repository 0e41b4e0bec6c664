"""Result types produced by a comparison: DiffType, DiffNode and ComparisonResult.

A comparison yields a *forest*: a sequence of root ``DiffNode`` objects (one
root for a whole-document comparison).  Every node carries the path to its
location, its classification, the values on each side that exist, and, for
container comparisons, its children.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import TYPE_CHECKING, Any

from json_tree_diff.tree.nodes import Value

if TYPE_CHECKING:
    from json_tree_diff.algorithm.stats import DiffStats

__all__ = ["ComparisonResult", "DiffNode", "DiffType", "ROOT_PATH"]

ROOT_PATH = "/"


class DiffType(StrEnum):
    """Classification of a single diff node.

    - ADDED     -> "added"     : exists only on the new side
    - REMOVED   -> "removed"   : exists only on the old side
    - MODIFIED  -> "modified"  : exists on both sides and differs
    - UNCHANGED -> "unchanged" : exists on both sides and is deep-equal
    """

    ADDED = auto()
    REMOVED = auto()
    MODIFIED = auto()
    UNCHANGED = auto()


@dataclass(frozen=True, slots=True)
class DiffNode:
    """One node of the merged comparison tree.

    Attributes:
        path:           Address of the node.  The root is ``"/"``; object
                        members append ``.key`` (bare ``key`` below the root)
                        and array elements append ``[index]``.
        classification: The node's ``DiffType``.
        old_value:      Old-side value; ``None`` exactly when ADDED.
        new_value:      New-side value; ``None`` exactly when REMOVED.
        children:       Child nodes for array/object comparisons (possibly
                        empty); ``None`` for leaves.
    """

    path: str
    classification: DiffType
    old_value: Value | None = None
    new_value: Value | None = None
    children: tuple[DiffNode, ...] | None = None

    def __post_init__(self) -> None:
        has_old = self.old_value is not None
        has_new = self.new_value is not None
        if self.classification is DiffType.ADDED:
            valid = has_new and not has_old
        elif self.classification is DiffType.REMOVED:
            valid = has_old and not has_new
        else:
            valid = has_old and has_new
        if not valid:
            msg = (
                f"{self.classification} node at {self.path!r} has "
                f"old_value={'set' if has_old else 'absent'}, "
                f"new_value={'set' if has_new else 'absent'}"
            )
            raise ValueError(msg)

    @property
    def is_leaf(self) -> bool:
        return self.children is None

    def walk(self) -> Iterator[DiffNode]:
        """Yield this node and every descendant in pre-order."""
        stack: list[DiffNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.children:
                stack.extend(reversed(node.children))

    def find(self, path: str) -> DiffNode | None:
        """Return the first node in this subtree whose path equals ``path``."""
        for node in self.walk():
            if node.path == path:
                return node
        return None

    def to_dict(self) -> dict[str, Any]:
        """Serialise to plain JSON-compatible data.

        ``old_value`` is omitted for ADDED nodes, ``new_value`` for REMOVED
        nodes, and ``children`` for leaves.  Built from an explicit stack like
        ``walk()``.
        """
        root = self._fields()
        stack: list[tuple[DiffNode, dict[str, Any]]] = [(self, root)]
        while stack:
            node, data = stack.pop()
            if node.children is None:
                continue
            data["children"] = []
            for child in node.children:
                child_data = child._fields()
                data["children"].append(child_data)
                stack.append((child, child_data))
        return root

    def _fields(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "path": self.path,
            "classification": str(self.classification),
        }
        if self.old_value is not None:
            data["old_value"] = self.old_value.to_python()
        if self.new_value is not None:
            data["new_value"] = self.new_value.to_python()
        return data


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Rich result of a ``TreeComparator.compare()`` call.

    Attributes:
        roots: The diff forest.  A whole-document comparison has one root.
        stats: Per-classification node counts over the whole forest.
        computation_time_ms: Wall-clock duration of the comparison in milliseconds.
    """

    roots: tuple[DiffNode, ...]
    stats: DiffStats
    computation_time_ms: float

    @property
    def root(self) -> DiffNode:
        return self.roots[0]

    @property
    def identical(self) -> bool:
        return all(node.classification is DiffType.UNCHANGED for node in self.roots)

    def to_dict(self) -> dict[str, Any]:
        return {
            "identical": self.identical,
            "stats": self.stats.to_dict(),
            "diffs": [node.to_dict() for node in self.roots],
        }
