"""Shared document fixtures.

``json_recursion_headroom`` raises the interpreter recursion limit for tests
that push very deep documents through the stdlib ``json`` module, whose
decoder and encoder recurse once per nesting level.

The profile pair mirrors a realistic edit: one changed number, one changed
string, a nested object gaining a key and an array with a replaced element.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

import pytest


@pytest.fixture
def profile_old() -> dict[str, Any]:
    return {
        "name": "John Doe",
        "age": 30,
        "email": "john@example.com",
        "address": {"street": "123 Main St", "city": "New York", "country": "USA"},
        "hobbies": ["reading", "gaming", "cooking"],
        "settings": {"notifications": True, "theme": "dark"},
    }


@pytest.fixture
def profile_new() -> dict[str, Any]:
    return {
        "name": "John Doe",
        "age": 31,
        "email": "john.doe@example.com",
        "address": {
            "street": "123 Main St",
            "city": "San Francisco",
            "state": "CA",
            "country": "USA",
        },
        "hobbies": ["reading", "gaming", "photography"],
        "settings": {"notifications": False, "theme": "dark", "language": "en"},
    }


@pytest.fixture
def json_recursion_headroom() -> Iterator[None]:
    previous = sys.getrecursionlimit()
    sys.setrecursionlimit(max(previous, 20_000))
    yield
    sys.setrecursionlimit(previous)
