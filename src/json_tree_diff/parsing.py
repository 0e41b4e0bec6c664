"""Input layer: JSON text validation, parsing and pretty-printing.

Parse failures are reported here, before the diff engine is ever invoked.
The engine only accepts fully built ``Value`` trees.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from json_tree_diff.tree.builder import JsonValue, ValueBuilder
from json_tree_diff.tree.nodes import Value

__all__ = [
    "InvalidJSONError",
    "JsonValidationResult",
    "format_json",
    "load_document",
    "minify_json",
    "parse_document",
    "validate_json",
]

logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "Empty JSON input"
_TOO_DEEP_MESSAGE = "document nesting is too deep"

_builder = ValueBuilder()


class InvalidJSONError(ValueError):
    """Raised when a document cannot be parsed as JSON.

    Attributes:
        source: Label of the offending input (file name, ``"old"``, ...).
        reason: The parser's message, without the source label.
    """

    def __init__(self, reason: str, source: str = "<input>") -> None:
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason


@dataclass(frozen=True, slots=True)
class JsonValidationResult:
    """Outcome of ``validate_json``.

    Attributes:
        is_valid: True when the text parsed successfully.
        error:    Parser message when invalid, otherwise None.
        parsed:   The native parsed value when valid, otherwise None.
    """

    is_valid: bool
    error: str | None = None
    parsed: Any = None


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def _loads(text: str) -> Any:
    if not text or not text.strip():
        raise ValueError(EMPTY_INPUT_MESSAGE)
    return json.loads(text, parse_constant=_reject_constant)


def validate_json(text: str) -> JsonValidationResult:
    """Validate and parse JSON text without raising."""
    try:
        parsed = _loads(text)
    except RecursionError:
        return JsonValidationResult(is_valid=False, error=_TOO_DEEP_MESSAGE)
    except ValueError as error:
        return JsonValidationResult(is_valid=False, error=str(error))
    return JsonValidationResult(is_valid=True, parsed=parsed)


def parse_document(text: str, source: str = "<input>") -> Value:
    """Parse JSON text into a ``Value`` tree.

    ``NaN``, ``Infinity`` and ``-Infinity`` are rejected, as in strict JSON.

    Raises:
        InvalidJSONError: If the text is empty or not valid JSON.
    """
    try:
        return _builder.build(_loads(text))
    except RecursionError as error:
        raise InvalidJSONError(_TOO_DEEP_MESSAGE, source) from error
    except ValueError as error:
        logger.debug("failed to parse %s: %s", source, error)
        raise InvalidJSONError(str(error), source) from error


def load_document(path: str | Path) -> Value:
    """Read a UTF-8 JSON file and parse it into a ``Value`` tree.

    Raises:
        OSError: If the file cannot be read.
        InvalidJSONError: If its content is not valid JSON.
    """
    path = Path(path)
    logger.debug("loading document %s", path)
    return parse_document(path.read_text(encoding="utf-8"), source=str(path))


def format_json(value: Value | JsonValue, indent: int = 2) -> str:
    """Pretty-print a value as JSON text."""
    return json.dumps(_builder.build(value).to_python(), indent=indent, ensure_ascii=False)


def minify_json(value: Value | JsonValue) -> str:
    """Serialise a value as compact JSON text."""
    return json.dumps(
        _builder.build(value).to_python(), separators=(",", ":"), ensure_ascii=False
    )
