"""Tests for the themekit CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from themekit import __version__
from themekit.cli.main import cli

FIXTURES = Path(__file__).parent.parent / "fixtures"


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


def _write_spec(tmp_path: Path, spec: object, name: str = "theme.json") -> str:
    path = tmp_path / name
    path.write_text(json.dumps(spec), encoding="utf-8")
    return str(path)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for command in ("classes", "build", "validate", "base"):
            assert command in result.output

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# classes
# ---------------------------------------------------------------------------


class TestClassesCommand:
    def test_hierarchical(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["classes", "panel.search.input"])
        assert result.exit_code == 0
        assert result.output == "cm-panel cm-panel-search cm-panel-search-input\n"

    def test_several_names(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["classes", "tab", "panel.search"])
        assert result.output.splitlines() == ["cm-tab", "cm-panel cm-panel-search"]

    def test_prefix(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["classes", "--prefix", "ed-", "tab"])
        assert result.output == "ed-tab\n"

    def test_empty_segment(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["classes", "panel..search"])
        assert result.exit_code == 1
        assert "Error" in result.output


# ---------------------------------------------------------------------------
# build
# ---------------------------------------------------------------------------


class TestBuildCommand:
    def test_css(self, runner: CliRunner, tmp_path: Path) -> None:
        path = _write_spec(tmp_path, {"$tab": {"display": "inline-block"}})
        result = runner.invoke(cli, ["build", path, "--scope", "cm-t1"])
        assert result.exit_code == 0
        assert result.output == ".cm-t1 .cm-tab {display: inline-block;}\n"

    def test_json(self, runner: CliRunner, tmp_path: Path) -> None:
        path = _write_spec(tmp_path, {"$tab": {"display": "inline-block"}})
        result = runner.invoke(cli, ["build", path, "--scope", "cm-t1", "--format", "json"])
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload == {
            "scope": "cm-t1",
            "rules": {".cm-t1 .cm-tab": {"display": "inline-block"}},
        }

    def test_generated_scope(self, runner: CliRunner, tmp_path: Path) -> None:
        path = _write_spec(tmp_path, {"$tab": {"display": "inline-block"}})
        result = runner.invoke(cli, ["build", path, "--format", "json"])
        assert json.loads(result.output)["scope"] == "ͼ1"

    def test_fixture(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["build", str(FIXTURES / "panel_theme.json"), "--scope", "p"])
        assert result.exit_code == 0
        assert ".p.cm-dark .cm-panel {background-color: #333338;}" in result.output
        assert "@keyframes cm-fade {from {opacity: 0;} to {opacity: 1;}}" in result.output

    def test_invalid_spec(self, runner: CliRunner, tmp_path: Path) -> None:
        path = _write_spec(tmp_path, {"$a..b": {"color": "red"}})
        result = runner.invoke(cli, ["build", path])
        assert result.exit_code == 1
        assert "empty segment" in result.output

    def test_no_check_still_fails_fast(self, runner: CliRunner, tmp_path: Path) -> None:
        path = _write_spec(tmp_path, {"$a..b": {"color": "red"}})
        result = runner.invoke(cli, ["build", path, "--no-check"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_invalid_json(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        result = runner.invoke(cli, ["build", str(path)])
        assert result.exit_code == 1
        assert "not valid JSON" in result.output

    def test_not_an_object(self, runner: CliRunner, tmp_path: Path) -> None:
        path = _write_spec(tmp_path, ["$tab"])
        result = runner.invoke(cli, ["build", path])
        assert result.exit_code == 1

    def test_missing_file(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["build", str(tmp_path / "nope.json")])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------


class TestValidateCommand:
    def test_ok(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["validate", str(FIXTURES / "panel_theme.json")])
        assert result.exit_code == 0
        assert "panel_theme.json: no problems found" in result.output

    def test_errors(self, runner: CliRunner, tmp_path: Path) -> None:
        path = _write_spec(tmp_path, {"$a": {"hover": {"color": "red"}}})
        result = runner.invoke(cli, ["validate", path])
        assert result.exit_code == 1
        assert "theme.json: error=1 warning=0 info=0" in result.output

    def test_warnings_only(self, runner: CliRunner, tmp_path: Path) -> None:
        path = _write_spec(tmp_path, {"$panel.search": {"color": "red"}})
        result = runner.invoke(cli, ["validate", path, "--known", "panel"])
        assert result.exit_code == 0
        assert "Unknown theme class 'panel.search'" in result.output
        assert "theme.json: error=0 warning=1 info=0" in result.output


# ---------------------------------------------------------------------------
# base
# ---------------------------------------------------------------------------


class TestBaseCommand:
    def test_css(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["base"])
        assert result.exit_code == 0
        assert ".ͼ1 .cm-scroller {" in result.output
        assert "@keyframes cm-blink {" in result.output

    def test_json(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["base", "--format", "json"])
        payload = json.loads(result.output)
        assert payload["scope"] == "ͼ1"
        assert payload["rules"][".ͼ1 .cm-tab"]["display"] == "inline-block"
