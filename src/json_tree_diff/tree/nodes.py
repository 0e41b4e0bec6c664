"""Value dataclass and ValueKind StrEnum: the closed JSON value model.

Every document handed to the diff engine is first expressed as a tree of
``Value`` instances.  The union is closed: there is exactly one ``ValueKind``
per JSON kind, so the comparator can dispatch exhaustively on ``kind`` instead
of probing native Python types.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

__all__ = ["ValueKind", "Value"]


class ValueKind(StrEnum):
    """Enumeration of the six JSON value kinds.

    StrEnum values are the lowercased member names:
    - NULL    -> "null"
    - BOOL    -> "bool"
    - NUMBER  -> "number"
    - STRING  -> "string"
    - ARRAY   -> "array"   : ordered sequence of values
    - OBJECT  -> "object"  : insertion-ordered mapping with unique string keys
    """

    NULL = auto()
    BOOL = auto()
    NUMBER = auto()
    STRING = auto()
    ARRAY = auto()
    OBJECT = auto()


_CONTAINER_KINDS = frozenset({ValueKind.ARRAY, ValueKind.OBJECT})


@dataclass(frozen=True, slots=True, eq=False)
class Value:
    """An immutable node of a JSON value tree.

    Use the named constructors (``Value.null()``, ``Value.number(3)``,
    ``Value.object({"a": Value.null()})`` ...) rather than calling the class
    directly; they validate the payload for the requested kind.

    Attributes:
        kind:    Which JSON kind this value is.
        scalar:  Python payload for primitive kinds (``None``, ``bool``,
                 ``int``/``float`` or ``str``).  Always ``None`` for containers.
        items:   Elements of an ARRAY value, in order.  Empty for other kinds.
        members: ``(key, value)`` pairs of an OBJECT value in insertion order.
                 Keys are unique.  Empty for other kinds.

    Equality is identity-based (``eq=False``); structural equality is the job
    of ``json_tree_diff.algorithm.equality.deep_equal``.
    """

    kind: ValueKind
    scalar: bool | int | float | str | None = None
    items: tuple[Value, ...] = ()
    members: tuple[tuple[str, Value], ...] = ()

    # ------------------------------------------------------------------
    # Named constructors
    # ------------------------------------------------------------------

    @classmethod
    def null(cls) -> Value:
        return cls(kind=ValueKind.NULL)

    @classmethod
    def boolean(cls, value: bool) -> Value:
        if not isinstance(value, bool):
            raise TypeError(f"Value.boolean() expects bool, got {type(value)!r}")
        return cls(kind=ValueKind.BOOL, scalar=value)

    @classmethod
    def number(cls, value: int | float) -> Value:
        # bool subclasses int; reject it so True never masquerades as 1
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"Value.number() expects int or float, got {type(value)!r}")
        return cls(kind=ValueKind.NUMBER, scalar=value)

    @classmethod
    def string(cls, value: str) -> Value:
        if not isinstance(value, str):
            raise TypeError(f"Value.string() expects str, got {type(value)!r}")
        return cls(kind=ValueKind.STRING, scalar=value)

    @classmethod
    def array(cls, items: Iterable[Value] = ()) -> Value:
        elements = tuple(items)
        for element in elements:
            if not isinstance(element, Value):
                raise TypeError(f"Array elements must be Value, got {type(element)!r}")
        return cls(kind=ValueKind.ARRAY, items=elements)

    @classmethod
    def object(
        cls,
        members: Mapping[str, Value] | Iterable[tuple[str, Value]] = (),
    ) -> Value:
        """Build an OBJECT value.

        Args:
            members: A mapping or an iterable of ``(key, value)`` pairs.
                Insertion order is preserved.

        Raises:
            TypeError:  If a key is not a ``str`` or a value is not a ``Value``.
            ValueError: If the same key appears twice.
        """
        pairs = tuple(members.items()) if isinstance(members, Mapping) else tuple(members)
        seen: set[str] = set()
        for key, member in pairs:
            if not isinstance(key, str):
                raise TypeError(f"Object keys must be str, got {type(key)!r}")
            if not isinstance(member, Value):
                raise TypeError(f"Object values must be Value, got {type(member)!r}")
            if key in seen:
                raise ValueError(f"Duplicate object key: {key!r}")
            seen.add(key)
        return cls(kind=ValueKind.OBJECT, members=pairs)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def is_container(self) -> bool:
        return self.kind in _CONTAINER_KINDS

    @property
    def is_primitive(self) -> bool:
        return self.kind not in _CONTAINER_KINDS

    def size(self) -> int:
        """Number of elements (ARRAY) or keys (OBJECT); 0 for primitives."""
        if self.kind is ValueKind.ARRAY:
            return len(self.items)
        if self.kind is ValueKind.OBJECT:
            return len(self.members)
        return 0

    def keys(self) -> Iterator[str]:
        for key, _ in self.members:
            yield key

    def get(self, key: str) -> Value | None:
        for member_key, member in self.members:
            if member_key == key:
                return member
        return None

    def as_mapping(self) -> dict[str, Value]:
        return dict(self.members)

    def to_python(self) -> Any:
        """Convert back to native JSON-compatible Python values.

        Containers are created empty and filled in place from an explicit
        stack, so the depth of the tree is not limited by the recursion limit.
        """
        root = _native_shell(self)
        stack: list[tuple[Value, Any]] = [(self, root)] if self.is_container else []
        while stack:
            value, target = stack.pop()
            if value.kind is ValueKind.ARRAY:
                for item in value.items:
                    native = _native_shell(item)
                    target.append(native)
                    if item.is_container:
                        stack.append((item, native))
            else:
                for key, member in value.members:
                    native = _native_shell(member)
                    target[key] = native
                    if member.is_container:
                        stack.append((member, native))
        return root

    def __repr__(self) -> str:
        if self.kind is ValueKind.ARRAY:
            return f"Value.array(<{len(self.items)} items>)"
        if self.kind is ValueKind.OBJECT:
            return f"Value.object(<{len(self.members)} keys>)"
        if self.kind is ValueKind.NULL:
            return "Value.null()"
        return f"Value.{_REPR_NAMES[self.kind]}({self.scalar!r})"


_REPR_NAMES = {
    ValueKind.BOOL: "boolean",
    ValueKind.NUMBER: "number",
    ValueKind.STRING: "string",
}


def _native_shell(value: Value) -> Any:
    """Empty list/dict for a container, the payload for a primitive."""
    if value.kind is ValueKind.ARRAY:
        return []
    if value.kind is ValueKind.OBJECT:
        return {}
    return value.scalar
