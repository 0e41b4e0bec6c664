"""Tree subpackage for the JSON value model.

Re-exports the public API for the tree module:
- Value: immutable tagged-union node of a JSON value tree
- ValueKind: StrEnum of the six JSON kinds (NULL, BOOL, NUMBER, STRING, ARRAY, OBJECT)
- ValueBuilder: converts native Python JSON values into a Value tree
"""

from json_tree_diff.tree.builder import JsonValue, ValueBuilder
from json_tree_diff.tree.nodes import Value, ValueKind

__all__ = ["JsonValue", "Value", "ValueBuilder", "ValueKind"]
