"""Integrations subpackage for json-tree-diff.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point), providing the
  ``assert_json_unchanged`` fixture.

The plugin module imports pytest, so it is not imported here; pytest loads it
through the entry point.
"""

from __future__ import annotations

__all__: list[str] = []
