"""Tests for the json-tree-diff command line interface."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from json_tree_diff import __version__
from json_tree_diff.cli import app

runner = CliRunner()


def _write(path: Path, payload: Any) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture
def profile_files(tmp_path: Path, profile_old: Any, profile_new: Any) -> tuple[Path, Path]:
    return _write(tmp_path / "old.json", profile_old), _write(tmp_path / "new.json", profile_new)


# ---------------------------------------------------------------------------
# Global options
# ---------------------------------------------------------------------------


def test_version_flag() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.output.strip() == __version__


def test_no_args_shows_help() -> None:
    result = runner.invoke(app, [])
    assert "diff" in result.output


# ---------------------------------------------------------------------------
# diff
# ---------------------------------------------------------------------------


class TestDiffCommand:
    def test_text_output(self, profile_files: tuple[Path, Path]) -> None:
        old, new = profile_files
        result = runner.invoke(app, ["--no-color", "diff", str(old), str(new)])
        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert lines[0] == "~ / (modified)"
        assert "  ~ age (modified): 30 -> 31" in lines
        assert lines[-1] == "2 added, 0 removed, 9 modified, 6 unchanged"

    def test_json_output(self, profile_files: tuple[Path, Path]) -> None:
        old, new = profile_files
        result = runner.invoke(app, ["diff", "--json", "--leaf-stats", str(old), str(new)])
        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["identical"] is False
        assert payload["stats"] == {"added": 2, "removed": 0, "modified": 9, "unchanged": 6}
        assert payload["leaf_stats"] == {"added": 2, "removed": 0, "modified": 5, "unchanged": 6}
        assert payload["diffs"][0]["path"] == "/"

    def test_hide_unchanged(self, profile_files: tuple[Path, Path]) -> None:
        old, new = profile_files
        result = runner.invoke(
            app, ["--no-color", "diff", "--hide-unchanged", str(old), str(new)]
        )
        assert "(unchanged)" not in result.output

    def test_depth_limits_expansion(self, profile_files: tuple[Path, Path]) -> None:
        old, new = profile_files
        result = runner.invoke(app, ["--no-color", "diff", "--depth", "0", str(old), str(new)])
        assert result.output.splitlines()[0] == "~ / (modified): {6 keys} -> {6 keys}"

    def test_leaf_stats_line(self, profile_files: tuple[Path, Path]) -> None:
        old, new = profile_files
        result = runner.invoke(app, ["--no-color", "diff", "--leaf-stats", str(old), str(new)])
        assert result.output.splitlines()[-1] == "leaves: 2 added, 0 removed, 5 modified, 6 unchanged"

    def test_writes_report(self, tmp_path: Path, profile_files: tuple[Path, Path]) -> None:
        old, new = profile_files
        report = tmp_path / "report.json"
        result = runner.invoke(app, ["diff", "-o", str(report), str(old), str(new)])
        assert result.exit_code == 0, result.output
        assert json.loads(report.read_text(encoding="utf-8"))[0]["classification"] == "modified"

    def test_fail_on_diff(self, profile_files: tuple[Path, Path]) -> None:
        old, new = profile_files
        result = runner.invoke(app, ["diff", "--fail-on-diff", str(old), str(new)])
        assert result.exit_code == 1

    def test_fail_on_diff_identical(self, tmp_path: Path) -> None:
        old = _write(tmp_path / "a.json", {"k": [1, 2]})
        new = _write(tmp_path / "b.json", {"k": [1, 2]})
        result = runner.invoke(app, ["diff", "--fail-on-diff", str(old), str(new)])
        assert result.exit_code == 0
        assert "0 added, 0 removed, 0 modified, 4 unchanged" in result.output

    def test_invalid_json_exits_2(self, tmp_path: Path) -> None:
        old = tmp_path / "old.json"
        old.write_text("{", encoding="utf-8")
        new = _write(tmp_path / "new.json", {})
        result = runner.invoke(app, ["diff", str(old), str(new)])
        assert result.exit_code == 2
        assert "diff failed" in result.output

    def test_empty_file_exits_2(self, tmp_path: Path) -> None:
        old = _write(tmp_path / "old.json", {})
        new = tmp_path / "new.json"
        new.write_text("", encoding="utf-8")
        result = runner.invoke(app, ["diff", str(old), str(new)])
        assert result.exit_code == 2
        assert "Empty JSON input" in result.output

    def test_missing_file_exits_2(self, tmp_path: Path) -> None:
        new = _write(tmp_path / "new.json", {})
        result = runner.invoke(app, ["diff", str(tmp_path / "nope.json"), str(new)])
        assert result.exit_code == 2

    def test_sort_keys(self, tmp_path: Path) -> None:
        old = _write(tmp_path / "old.json", {"b": 1, "a": 1})
        new = _write(tmp_path / "new.json", {"b": 1, "a": 1})
        result = runner.invoke(app, ["--no-color", "diff", "--sort-keys", str(old), str(new)])
        paths = [line.split()[0] for line in result.output.splitlines()[1:3]]
        assert paths == ["a", "b"]



class TestDeepDocuments:
    @pytest.mark.parametrize("depth", [1100, 1400])
    def test_validate_and_diff_agree(
        self, tmp_path: Path, json_recursion_headroom: None, depth: int
    ) -> None:
        path = tmp_path / "deep.json"
        path.write_text("[" * depth + "1" + "]" * depth, encoding="utf-8")

        validated = runner.invoke(app, ["validate", str(path)])
        assert validated.exit_code == 0, validated.output

        diffed = runner.invoke(
            app, ["--no-color", "diff", "--hide-unchanged", "--fail-on-diff", str(path), str(path)]
        )
        assert diffed.exit_code == 0, diffed.output
        assert diffed.output.strip() == f"0 added, 0 removed, 0 modified, {depth + 1} unchanged"

    def test_deep_change_is_reported(self, tmp_path: Path, json_recursion_headroom: None) -> None:
        depth = 1100
        old = tmp_path / "old.json"
        new = tmp_path / "new.json"
        old.write_text("[" * depth + "1" + "]" * depth, encoding="utf-8")
        new.write_text("[" * depth + "2" + "]" * depth, encoding="utf-8")

        result = runner.invoke(
            app, ["--no-color", "diff", "--depth", "1", "--fail-on-diff", str(old), str(new)]
        )
        assert result.exit_code == 1, result.output
        lines = result.output.splitlines()
        assert lines[0] == "~ / (modified)"
        assert lines[1] == "  ~ [0] (modified): [1 items] -> [1 items]"
        assert lines[-1] == f"0 added, 0 removed, {depth + 1} modified, 0 unchanged"


# ---------------------------------------------------------------------------
# validate / format
# ---------------------------------------------------------------------------


class TestValidateCommand:
    def test_valid_files(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "ok.json", [1, 2])
        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 0
        assert f"{path}: ok" in result.output

    def test_invalid_file(self, tmp_path: Path) -> None:
        good = _write(tmp_path / "ok.json", {})
        bad = tmp_path / "bad.json"
        bad.write_text("   ", encoding="utf-8")
        result = runner.invoke(app, ["validate", str(good), str(bad)])
        assert result.exit_code == 1
        assert f"{bad}: Empty JSON input" in result.output


class TestFormatCommand:
    def test_pretty(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "doc.json", {"a": [1]})
        result = runner.invoke(app, ["format", str(path)])
        assert result.exit_code == 0
        assert result.output == '{\n  "a": [\n    1\n  ]\n}\n'

    def test_minify(self, tmp_path: Path) -> None:
        path = tmp_path / "doc.json"
        path.write_text('{ "a" : [ 1 , 2 ] }', encoding="utf-8")
        result = runner.invoke(app, ["format", "--minify", str(path)])
        assert result.output == '{"a":[1,2]}\n'

    def test_invalid(self, tmp_path: Path) -> None:
        path = tmp_path / "doc.json"
        path.write_text("[1,", encoding="utf-8")
        result = runner.invoke(app, ["format", str(path)])
        assert result.exit_code == 2
        assert "format failed" in result.output
