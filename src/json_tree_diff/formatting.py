"""Text rendering for values, diff trees and statistics."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from decimal import Decimal

from json_tree_diff.algorithm.stats import DiffStats
from json_tree_diff.result import DiffNode, DiffType
from json_tree_diff.tree.builder import JsonValue, ValueBuilder
from json_tree_diff.tree.nodes import Value, ValueKind

__all__ = [
    "DIFF_MARKERS",
    "format_value",
    "iter_tree_lines",
    "render_stats",
    "render_tree",
]

DIFF_MARKERS: dict[DiffType, str] = {
    DiffType.ADDED: "+",
    DiffType.REMOVED: "-",
    DiffType.MODIFIED: "~",
    DiffType.UNCHANGED: " ",
}

_builder = ValueBuilder()


def format_value(value: Value | JsonValue) -> str:
    """Return a short display form of a value.

    ``null``, quoted strings, ``true``/``false``, number literals, and
    ``[<n> items]`` / ``{<n> keys}`` summaries for containers.
    """
    value = _builder.build(value)
    if value.kind is ValueKind.NULL:
        return "null"
    if value.kind is ValueKind.STRING:
        return f'"{value.scalar}"'
    if value.kind is ValueKind.ARRAY:
        return f"[{len(value.items)} items]"
    if value.kind is ValueKind.OBJECT:
        return f"{{{len(value.members)} keys}}"
    if value.kind is ValueKind.BOOL:
        return "true" if value.scalar else "false"
    return _format_number(value.scalar)  # type: ignore[arg-type]


def _format_number(number: int | float) -> str:
    if isinstance(number, int):
        return str(number)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number == 0:
        return "0"

    # shortest round-trip digits, laid out like ECMAScript Number::toString
    sign = "-" if number < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(number))).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    point = int(exponent) + len(digits)
    if len(digits) <= point <= 21:
        return sign + digits + "0" * (point - len(digits))
    if 0 < point <= 21:
        return f"{sign}{digits[:point]}.{digits[point:]}"
    if -6 < point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"

    mantissa = digits[0] + (f".{digits[1:]}" if len(digits) > 1 else "")
    return f"{sign}{mantissa}e{'+' if point > 0 else '-'}{abs(point - 1)}"


def _describe(node: DiffNode) -> str:
    if node.classification is DiffType.ADDED:
        return format_value(node.new_value)  # type: ignore[arg-type]
    if node.classification is DiffType.REMOVED:
        return format_value(node.old_value)  # type: ignore[arg-type]
    if node.classification is DiffType.MODIFIED:
        return f"{format_value(node.old_value)} -> {format_value(node.new_value)}"  # type: ignore[arg-type]
    return format_value(node.new_value)  # type: ignore[arg-type]


def iter_tree_lines(
    forest: Iterable[DiffNode],
    *,
    show_unchanged: bool = True,
    max_depth: int | None = None,
    indent: int = 2,
) -> Iterator[tuple[DiffNode, str]]:
    """Yield ``(node, line)`` pairs for an indented rendering of the forest.

    Leaves (and containers cut off by ``max_depth``) show their values;
    expanded containers show only their path and classification.

    Args:
        forest:         Root nodes to render.
        show_unchanged: When False, UNCHANGED subtrees are skipped entirely.
        max_depth:      Deepest level whose children are expanded (roots are
                        level 0).  ``None`` expands everything.
        indent:         Spaces per nesting level.
    """
    stack: list[tuple[DiffNode, int]] = [(root, 0) for root in reversed(list(forest))]
    while stack:
        node, level = stack.pop()
        if not show_unchanged and node.classification is DiffType.UNCHANGED:
            continue

        expand = bool(node.children) and (max_depth is None or level < max_depth)
        line = f"{' ' * (indent * level)}{DIFF_MARKERS[node.classification]} {node.path} ({node.classification})"
        if not expand:
            line = f"{line}: {_describe(node)}"
        yield node, line

        if expand:
            stack.extend((child, level + 1) for child in reversed(node.children))  # type: ignore[arg-type]


def render_tree(
    forest: Iterable[DiffNode],
    *,
    show_unchanged: bool = True,
    max_depth: int | None = None,
    indent: int = 2,
) -> str:
    """Render the forest as indented text, one node per line."""
    return "\n".join(
        line
        for _, line in iter_tree_lines(
            forest, show_unchanged=show_unchanged, max_depth=max_depth, indent=indent
        )
    )


def render_stats(stats: DiffStats) -> str:
    return (
        f"{stats.added} added, {stats.removed} removed, "
        f"{stats.modified} modified, {stats.unchanged} unchanged"
    )
