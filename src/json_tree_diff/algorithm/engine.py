"""DiffEngine: lockstep structural comparison of two ``Value`` trees.

Walks the old and new trees simultaneously and emits one merged ``DiffNode``
tree that classifies every node as added, removed, modified or unchanged.

Architecture:
- Primitive pairs:  one leaf, UNCHANGED when deep-equal, otherwise MODIFIED.
- Kind mismatches:  one MODIFIED leaf carrying both full values.  A type change
                    is an atomic replacement and is never recursed into.
- ARRAY pairs:      positional alignment by index.  Indices beyond the shorter
                    side become REMOVED/ADDED leaves.
- OBJECT pairs:     key union.  One-sided keys become REMOVED/ADDED leaves,
                    shared keys are compared recursively.
- Containers are MODIFIED when any child is not UNCHANGED.

The walk uses an explicit stack of open container frames instead of native
recursion, so document depth is not limited by the interpreter's recursion
limit.  A frame is closed (and its node built) once all its children exist,
which makes the classification bottom-up.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from json_tree_diff.algorithm.config import DiffConfig
from json_tree_diff.algorithm.equality import deep_equal
from json_tree_diff.result import ROOT_PATH, DiffNode, DiffType
from json_tree_diff.tree.nodes import Value, ValueKind

__all__ = ["DiffEngine", "array_path", "member_path"]

# A pending child is either a finished one-sided leaf or a pair still to compare.
_Pending = DiffNode | tuple[Value, Value, str]


def member_path(path: str, key: str) -> str:
    """Path of object member ``key`` below ``path`` (bare key below the root)."""
    return f"{path}.{key}" if path else key


def array_path(path: str, index: int) -> str:
    """Path of array element ``index`` below ``path``."""
    return f"{path}[{index}]"


@dataclass
class _Frame:
    """An open container comparison waiting for its children."""

    old: Value
    new: Value
    path: str
    pending: Iterator[_Pending]
    children: list[DiffNode] = field(default_factory=list)

    def close(self) -> DiffNode:
        changed = any(child.classification is not DiffType.UNCHANGED for child in self.children)
        return DiffNode(
            path=self.path or ROOT_PATH,
            classification=DiffType.MODIFIED if changed else DiffType.UNCHANGED,
            old_value=self.old,
            new_value=self.new,
            children=tuple(self.children),
        )


class DiffEngine:
    """Structural comparator producing a merged diff forest.

    The engine holds only its (immutable) configuration; every ``compare()``
    call works on local state, so one instance may be shared across threads.

    Example::

        from json_tree_diff.algorithm.engine import DiffEngine
        from json_tree_diff.tree import ValueBuilder

        build = ValueBuilder().build
        [root] = DiffEngine().compare(build({"age": 30}), build({"age": 31}))
        root.classification            # DiffType.MODIFIED
        root.children[0].path          # "age"
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        self._config = config if config is not None else DiffConfig()

    @property
    def config(self) -> DiffConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(self, old: Value, new: Value, path: str = "") -> list[DiffNode]:
        """Compare two value trees and return the diff forest.

        Args:
            old:  Old-side value tree.
            new:  New-side value tree.
            path: Path prefix of the compared pair.  ``""`` (default) marks the
                document root, whose node path is rendered as ``"/"``.

        Returns:
            A list holding exactly one root ``DiffNode``.
        """
        first = self._open(old, new, path)
        if isinstance(first, DiffNode):
            return [first]

        forest: list[DiffNode] = []
        stack: list[_Frame] = [first]
        while stack:
            frame = stack[-1]
            task = next(frame.pending, None)

            if task is None:
                stack.pop()
                node = frame.close()
                if stack:
                    stack[-1].children.append(node)
                else:
                    forest.append(node)
                continue

            if isinstance(task, DiffNode):
                frame.children.append(task)
                continue

            child = self._open(*task)
            if isinstance(child, DiffNode):
                frame.children.append(child)
            else:
                stack.append(child)

        return forest

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _open(self, old: Value, new: Value, path: str) -> DiffNode | _Frame:
        """Classify a pair: a finished leaf, or a frame for a container pair."""
        if old.is_primitive and new.is_primitive:
            return DiffNode(
                path=path or ROOT_PATH,
                classification=DiffType.UNCHANGED if deep_equal(old, new) else DiffType.MODIFIED,
                old_value=old,
                new_value=new,
            )

        if old.kind is not new.kind:
            return DiffNode(
                path=path or ROOT_PATH,
                classification=DiffType.MODIFIED,
                old_value=old,
                new_value=new,
            )

        if old.kind is ValueKind.ARRAY:
            return _Frame(old, new, path, self._array_children(old, new, path))
        return _Frame(old, new, path, self._object_children(old, new, path))

    def _array_children(self, old: Value, new: Value, path: str) -> Iterator[_Pending]:
        old_items, new_items = old.items, new.items
        for idx in range(max(len(old_items), len(new_items))):
            item_path = array_path(path, idx)
            if idx >= len(new_items):
                yield DiffNode(item_path, DiffType.REMOVED, old_value=old_items[idx])
            elif idx >= len(old_items):
                yield DiffNode(item_path, DiffType.ADDED, new_value=new_items[idx])
            else:
                yield (old_items[idx], new_items[idx], item_path)

    def _object_children(self, old: Value, new: Value, path: str) -> Iterator[_Pending]:
        old_members = old.as_mapping()
        new_members = new.as_mapping()
        keys = list(old_members)
        keys.extend(key for key in new_members if key not in old_members)
        if self._config.sort_keys:
            keys.sort()

        for key in keys:
            key_path = member_path(path, key)
            old_value = old_members.get(key)
            new_value = new_members.get(key)
            if old_value is None:
                yield DiffNode(key_path, DiffType.ADDED, new_value=new_value)
            elif new_value is None:
                yield DiffNode(key_path, DiffType.REMOVED, old_value=old_value)
            else:
                yield (old_value, new_value, key_path)
