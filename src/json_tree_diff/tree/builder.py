"""ValueBuilder: converts any native JSON value into a ``Value`` tree.

Dicts, lists and scalar values are converted into the closed ``Value`` union.
Containers are built bottom-up from an explicit stack of open frames, so the
nesting depth of the input is not limited by the interpreter's recursion
limit.  Every call constructs fresh ``Value`` instances, so the old-side and
new-side trees handed to the engine never share nodes.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from json_tree_diff.tree.nodes import Value

# Type alias for native JSON values as produced by ``json.loads``
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


@dataclass
class _Frame:
    """An open container whose children are still being built."""

    is_object: bool
    entries: Iterator[tuple[str, Any]]
    built: list[tuple[str, Value]] = field(default_factory=list)
    key: str = ""

    def add(self, value: Value) -> None:
        self.built.append((self.key, value))

    def close(self) -> Value:
        if self.is_object:
            return Value.object(self.built)
        return Value.array(value for _, value in self.built)


def _array_entries(items: list[Any] | tuple[Any, ...]) -> Iterator[tuple[str, Any]]:
    for item in items:
        yield "", item


def _object_entries(obj: dict[Any, Any]) -> Iterator[tuple[str, Any]]:
    for key, val in obj.items():
        if not isinstance(key, str):
            raise TypeError(f"JSON object keys must be str, got {type(key)!r}")
        yield key, val


@dataclass
class ValueBuilder:
    """Converts any valid JSON value into a ``Value`` tree.

    The dispatch order is critical: bool MUST be checked before int because
    bool is a subclass of int in Python (isinstance(True, int) is True).

    Tuples are accepted wherever lists are.  An existing ``Value`` is returned
    as-is, which lets callers mix pre-built trees with native data.

    Example::
        builder = ValueBuilder()
        value = builder.build({"age": 30, "tags": ["a"]})
        # value: OBJECT(age -> NUMBER(30), tags -> ARRAY(STRING("a")))
    """

    def build(self, value: JsonValue | Value) -> Value:
        """Convert a JSON value to a ``Value`` tree.

        Args:
            value: Any valid JSON value (dict, list, str, int, float, bool, None)
                or an already built ``Value``.

        Returns:
            The root ``Value`` of the converted tree.

        Raises:
            TypeError: If value (or anything nested in it) is not a valid JSON
                type, or an object key is not a string.
        """
        first = self._open(value)
        if isinstance(first, Value):
            return first

        done: list[Value] = []
        stack: list[_Frame] = [first]
        while stack:
            frame = stack[-1]
            entry = next(frame.entries, None)

            if entry is None:
                stack.pop()
                node = frame.close()
                if stack:
                    stack[-1].add(node)
                else:
                    done.append(node)
                continue

            frame.key, item = entry
            child = self._open(item)
            if isinstance(child, Value):
                frame.add(child)
            else:
                stack.append(child)

        return done[0]

    def _open(self, value: Any) -> Value | _Frame:
        """Convert a scalar, or open a frame for a container."""
        if isinstance(value, Value):
            return value

        # CRITICAL: bool MUST be checked before int: bool subclasses int in Python
        if isinstance(value, bool):
            return Value.boolean(value)

        if isinstance(value, dict):
            return _Frame(is_object=True, entries=_object_entries(value))

        if isinstance(value, (list, tuple)):
            return _Frame(is_object=False, entries=_array_entries(value))

        if isinstance(value, (int, float)):
            return Value.number(value)

        if isinstance(value, str):
            return Value.string(value)

        if value is None:
            return Value.null()

        raise TypeError(f"Unsupported JSON value type: {type(value)!r}")
