"""Exporter: serialise a diff forest to a JSON report document.

The report is a JSON array with one object per root node.  Each node object
has ``path`` and ``classification``; ``old_value`` unless the node was added,
``new_value`` unless it was removed, and ``children`` only for container
comparisons.  Values are written as plain JSON.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from json_tree_diff.result import DiffNode

__all__ = ["DEFAULT_REPORT_NAME", "export_forest", "export_json", "write_report"]

logger = logging.getLogger(__name__)

DEFAULT_REPORT_NAME = "json-diff-report.json"


def export_forest(forest: Iterable[DiffNode]) -> list[dict[str, Any]]:
    return [node.to_dict() for node in forest]


def export_json(forest: Iterable[DiffNode], indent: int | None = 2) -> str:
    return json.dumps(export_forest(forest), indent=indent, ensure_ascii=False)


def write_report(
    forest: Iterable[DiffNode],
    path: str | Path = DEFAULT_REPORT_NAME,
    indent: int | None = 2,
) -> Path:
    """Write the exported forest to ``path`` and return the resolved path.

    A directory ``path`` receives a file named ``json-diff-report.json``.
    """
    target = Path(path)
    if target.is_dir():
        target = target / DEFAULT_REPORT_NAME
    target.write_text(export_json(forest, indent=indent) + "\n", encoding="utf-8")
    logger.debug("wrote diff report to %s", target)
    return target
