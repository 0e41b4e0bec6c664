"""Deep structural equality over ``Value`` trees."""

from __future__ import annotations

from json_tree_diff.tree.nodes import Value, ValueKind


def deep_equal(a: Value, b: Value) -> bool:
    """Return True if two values are structurally identical.

    - Primitives: same kind and equal payload.  Numbers use IEEE-754 value
      equality, so ``1 == 1.0`` and NaN never equals itself.
    - Arrays: same length, pointwise equal in order.
    - Objects: identical key sets (order-independent), equal value per key.

    Null and a missing key are not equal; a kind mismatch is always unequal.
    Walks an explicit stack, so arbitrarily deep trees are safe.
    """
    pending: list[tuple[Value, Value]] = [(a, b)]
    while pending:
        left, right = pending.pop()
        if left.kind is not right.kind:
            return False

        if left.kind is ValueKind.ARRAY:
            if len(left.items) != len(right.items):
                return False
            pending.extend(zip(left.items, right.items, strict=True))
        elif left.kind is ValueKind.OBJECT:
            if len(left.members) != len(right.members):
                return False
            right_members = right.as_mapping()
            for key, member in left.members:
                other = right_members.get(key)
                if other is None:
                    return False
                pending.append((member, other))
        elif left.scalar != right.scalar:
            return False
    return True
