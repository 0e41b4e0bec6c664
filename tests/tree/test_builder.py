"""Tests for ValueBuilder.

Covers all JSON kinds, bool/int dispatch ordering, tuple input, key order
preservation, independence of built trees, pass-through of existing Values,
and TypeError on invalid input.
"""

from __future__ import annotations

from typing import Any

import pytest

from json_tree_diff.tree.builder import ValueBuilder
from json_tree_diff.tree.nodes import Value, ValueKind

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def builder() -> ValueBuilder:
    """A fresh ValueBuilder instance for each test."""
    return ValueBuilder()


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------


class TestScalars:
    @pytest.mark.parametrize(
        ("native", "kind"),
        [
            (None, ValueKind.NULL),
            (True, ValueKind.BOOL),
            (False, ValueKind.BOOL),
            (0, ValueKind.NUMBER),
            (-4.5, ValueKind.NUMBER),
            ("", ValueKind.STRING),
            ("text", ValueKind.STRING),
        ],
    )
    def test_scalar_kind(self, builder: ValueBuilder, native: object, kind: ValueKind) -> None:
        value = builder.build(native)  # type: ignore[arg-type]
        assert value.kind is kind
        assert value.scalar == native

    def test_bool_is_not_number(self, builder: ValueBuilder) -> None:
        """bool subclasses int; dispatch must still yield BOOL."""
        assert builder.build(True).kind is ValueKind.BOOL
        assert builder.build(1).kind is ValueKind.NUMBER

    def test_int_payload_type_preserved(self, builder: ValueBuilder) -> None:
        assert type(builder.build(5).scalar) is int
        assert type(builder.build(5.0).scalar) is float


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------


class TestContainers:
    def test_object_key_order_preserved(self, builder: ValueBuilder) -> None:
        value = builder.build({"z": 1, "a": 2, "m": 3})
        assert list(value.keys()) == ["z", "a", "m"]

    def test_nested_structure(self, builder: ValueBuilder) -> None:
        value = builder.build({"user": {"tags": ["a", None]}})
        user = value.get("user")
        assert user is not None
        tags = user.get("tags")
        assert tags is not None
        assert tags.kind is ValueKind.ARRAY
        assert [item.kind for item in tags.items] == [ValueKind.STRING, ValueKind.NULL]

    def test_tuple_becomes_array(self, builder: ValueBuilder) -> None:
        value = builder.build((1, 2))
        assert value.kind is ValueKind.ARRAY
        assert value.to_python() == [1, 2]

    def test_empty_containers(self, builder: ValueBuilder) -> None:
        assert builder.build({}).kind is ValueKind.OBJECT
        assert builder.build([]).kind is ValueKind.ARRAY

    def test_round_trip(self, builder: ValueBuilder, profile_old: dict[str, object]) -> None:
        assert builder.build(profile_old).to_python() == profile_old


# ---------------------------------------------------------------------------
# Ownership
# ---------------------------------------------------------------------------


class TestOwnership:
    def test_existing_value_returned_unchanged(self, builder: ValueBuilder) -> None:
        value = Value.number(1)
        assert builder.build(value) is value

    def test_mutating_source_does_not_affect_tree(self, builder: ValueBuilder) -> None:
        source = {"items": [1, 2]}
        value = builder.build(source)
        source["items"].append(3)
        assert value.to_python() == {"items": [1, 2]}

    def test_two_builds_share_no_nodes(self, builder: ValueBuilder) -> None:
        source = {"a": [1]}
        first = builder.build(source)
        second = builder.build(source)
        assert first is not second
        assert first.get("a") is not second.get("a")


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestInvalidInput:
    def test_set_raises_type_error(self, builder: ValueBuilder) -> None:
        with pytest.raises(TypeError, match="Unsupported JSON value type"):
            builder.build({1, 2})  # type: ignore[arg-type]

    def test_nested_invalid_raises(self, builder: ValueBuilder) -> None:
        with pytest.raises(TypeError):
            builder.build({"a": [object()]})  # type: ignore[dict-item]

    def test_non_str_key_raises(self, builder: ValueBuilder) -> None:
        with pytest.raises(TypeError, match="keys must be str"):
            builder.build({1: "x"})  # type: ignore[dict-item]


# ---------------------------------------------------------------------------
# Deep nesting
# ---------------------------------------------------------------------------


class TestDeepNesting:
    """Nesting far beyond the interpreter recursion limit builds fine."""

    @pytest.mark.parametrize("depth", [1500, 5000])
    def test_deep_array(self, builder: ValueBuilder, depth: int) -> None:
        native: Any = 1
        for _ in range(depth):
            native = [native]

        value = builder.build(native)
        levels = 0
        while value.kind is ValueKind.ARRAY:
            [value] = value.items
            levels += 1
        assert levels == depth
        assert value.scalar == 1

    @pytest.mark.parametrize("depth", [1500, 5000])
    def test_deep_object_keeps_member_order(self, builder: ValueBuilder, depth: int) -> None:
        native: Any = None
        for _ in range(depth):
            native = {"first": 0, "next": native, "last": True}

        value = builder.build(native)
        levels = 0
        while value.kind is ValueKind.OBJECT:
            assert list(value.keys()) == ["first", "next", "last"]
            value = value.get("next")  # type: ignore[assignment]
            levels += 1
        assert levels == depth
        assert value.kind is ValueKind.NULL

    def test_invalid_value_deep_inside_still_raises(self, builder: ValueBuilder) -> None:
        native: Any = [object()]
        for _ in range(3000):
            native = {"k": native}
        with pytest.raises(TypeError, match="Unsupported JSON value type"):
            builder.build(native)
