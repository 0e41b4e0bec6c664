"""Command line interface for json-tree-diff."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as package_version
from pathlib import Path
from typing import Any

import typer

from json_tree_diff.algorithm.config import DiffConfig
from json_tree_diff.algorithm.stats import leaf_stats
from json_tree_diff.comparator import TreeComparator
from json_tree_diff.export import export_forest, write_report
from json_tree_diff.formatting import iter_tree_lines, render_stats
from json_tree_diff.parsing import (
    InvalidJSONError,
    format_json,
    load_document,
    minify_json,
    validate_json,
)
from json_tree_diff.result import DiffType

app = typer.Typer(help="Structural diff for JSON documents.", no_args_is_help=True)

logger = logging.getLogger(__name__)

_DIFF_COLORS: dict[DiffType, str | None] = {
    DiffType.ADDED: typer.colors.GREEN,
    DiffType.REMOVED: typer.colors.RED,
    DiffType.MODIFIED: typer.colors.YELLOW,
    DiffType.UNCHANGED: None,
}


@dataclass(slots=True)
class _OutputOptions:
    no_color: bool = False


_OUTPUT_OPTIONS = _OutputOptions()


def _resolve_cli_version() -> str:
    try:
        return package_version("json-tree-diff")
    except PackageNotFoundError:
        from json_tree_diff import __version__ as local_version

        return local_version


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(_resolve_cli_version(), color=False)
    raise typer.Exit()


@app.callback()
def app_options(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show json-tree-diff version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log debug details to stderr.",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable ANSI color output.",
    ),
) -> None:
    """Global options for all commands."""
    _OUTPUT_OPTIONS.no_color = no_color
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _echo(message: str, *, err: bool = False, fg: str | None = None) -> None:
    if fg is not None and not _OUTPUT_OPTIONS.no_color:
        message = typer.style(message, fg=fg)
    typer.echo(message, err=err, color=False if _OUTPUT_OPTIONS.no_color else None)


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2), color=False)


@app.command()
def diff(
    old: Path = typer.Argument(..., help="Path to the old JSON document."),
    new: Path = typer.Argument(..., help="Path to the new JSON document."),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit the diff tree and statistics as JSON.",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Also write the exported diff report to this file (or directory).",
    ),
    hide_unchanged: bool = typer.Option(
        False,
        "--hide-unchanged",
        help="Omit unchanged nodes from the text tree.",
    ),
    depth: int | None = typer.Option(
        None,
        "--depth",
        min=0,
        help="Deepest nesting level to expand in the text tree.",
    ),
    sort_keys: bool = typer.Option(
        False,
        "--sort-keys",
        help="Order object members by key.",
    ),
    show_leaf_stats: bool = typer.Option(
        False,
        "--leaf-stats",
        help="Also report counts over leaf nodes only.",
    ),
    fail_on_diff: bool = typer.Option(
        False,
        "--fail-on-diff",
        help="Exit with status 1 when the documents differ.",
    ),
) -> None:
    """Compare two JSON documents."""
    try:
        old_value = load_document(old)
        new_value = load_document(new)
    except (InvalidJSONError, OSError) as error:
        _echo(f"diff failed: {error}", err=True)
        raise typer.Exit(code=2) from error

    result = TreeComparator(config=DiffConfig(sort_keys=sort_keys)).compare(old_value, new_value)
    leaves = leaf_stats(result.roots) if show_leaf_stats else None

    if output is not None:
        try:
            written = write_report(result.roots, output)
        except OSError as error:
            _echo(f"diff failed: cannot write report: {error}", err=True)
            raise typer.Exit(code=2) from error
        logger.info("diff report written to %s", written)

    if json_output:
        payload: dict[str, Any] = {
            "identical": result.identical,
            "stats": result.stats.to_dict(),
        }
        if leaves is not None:
            payload["leaf_stats"] = leaves.to_dict()
        payload["diffs"] = export_forest(result.roots)
        _echo_json(payload)
    else:
        for node, line in iter_tree_lines(
            result.roots, show_unchanged=not hide_unchanged, max_depth=depth
        ):
            _echo(line, fg=_DIFF_COLORS[node.classification])
        _echo(render_stats(result.stats))
        if leaves is not None:
            _echo(f"leaves: {render_stats(leaves)}")

    if fail_on_diff and not result.identical:
        raise typer.Exit(code=1)


@app.command()
def validate(
    files: list[Path] = typer.Argument(..., help="JSON documents to validate."),
) -> None:
    """Check that each file holds valid JSON."""
    failures = 0
    for path in files:
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as error:
            failures += 1
            _echo(f"{path}: {error}", err=True)
            continue

        outcome = validate_json(text)
        if outcome.is_valid:
            _echo(f"{path}: ok")
        else:
            failures += 1
            _echo(f"{path}: {outcome.error}", err=True)

    if failures:
        raise typer.Exit(code=1)


@app.command(name="format")
def format_document(
    file: Path = typer.Argument(..., help="JSON document to format."),
    minify: bool = typer.Option(False, "--minify", help="Emit compact JSON."),
    indent: int = typer.Option(2, "--indent", min=0, help="Indentation width."),
) -> None:
    """Pretty-print (or minify) a JSON document."""
    try:
        value = load_document(file)
    except (InvalidJSONError, OSError) as error:
        _echo(f"format failed: {error}", err=True)
        raise typer.Exit(code=2) from error

    typer.echo(minify_json(value) if minify else format_json(value, indent=indent))


def main() -> None:
    app()
