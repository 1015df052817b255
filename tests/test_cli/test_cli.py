"""Tests for the html2wf CLI commands."""
from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from html2wf import __version__
from html2wf.cli.main import cli

MARKUP = '<body><div class="container"><p class="text">Hello</p></div></body>'
CSS = ".container { width: 100%; } .text { color: blue; } @media print { .text { color: black; } }"


@pytest.fixture()
def files(tmp_path: Path) -> tuple[str, str]:
    markup = tmp_path / "page.html"
    markup.write_text(MARKUP, encoding="utf-8")
    css = tmp_path / "page.css"
    css.write_text(CSS, encoding="utf-8")
    return str(markup), str(css)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_cli_group_help(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "convert HTML/CSS into design-tool elements" in result.output

    def test_cli_lists_commands(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert "convert" in result.output
        assert "classes" in result.output
        assert "rules" in result.output

    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# convert command
# ---------------------------------------------------------------------------


class TestConvertCommand:
    def test_convert_help_shows_options(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["convert", "--help"])
        assert result.exit_code == 0
        for option in ("--css", "--prefix", "--media", "--inline", "--output", "--progress"):
            assert option in result.output

    def test_convert_prints_json(self, files) -> None:
        markup, css = files
        runner = CliRunner()
        result = runner.invoke(cli, ["convert", markup, "--css", css, "--prefix", "wf-"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["classMap"] == {"container": "wf-container", "text": "wf-text"}
        assert data["styles"]["el-1"] == {"width": "100%"}
        assert data["styles"]["el-2"] == {"color": "blue"}
        assert data["conditionalStyles"] == {"print": {"el-2": {"color": "black"}}}
        assert data["elements"]["children"][0]["classes"] == ["wf-container"]

    def test_convert_without_stylesheet(self, files) -> None:
        markup, _ = files
        runner = CliRunner()
        result = runner.invoke(cli, ["convert", markup])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["classMap"] == {"container": "html2wf-container", "text": "html2wf-text"}

    def test_convert_no_media(self, files) -> None:
        markup, css = files
        runner = CliRunner()
        result = runner.invoke(cli, ["convert", markup, "--css", css, "--no-media"])
        assert result.exit_code == 0
        assert json.loads(result.output)["conditionalStyles"] == {}

    def test_convert_writes_output_file(self, files, tmp_path) -> None:
        markup, css = files
        out = tmp_path / "out.json"
        runner = CliRunner()
        result = runner.invoke(cli, ["convert", markup, "--css", css, "-o", str(out)])
        assert result.exit_code == 0
        assert "Wrote" in result.output
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["classMap"]["text"] == "html2wf-text"

    def test_convert_progress(self, files, tmp_path) -> None:
        markup, css = files
        runner = CliRunner()
        result = runner.invoke(
            cli, ["convert", markup, "--css", css, "--progress", "-o", str(tmp_path / "o.json")]
        )
        assert result.exit_code == 0
        assert "[  0%] Initializing conversion" in result.output
        assert "[100%] Conversion complete" in result.output

    def test_convert_parse_error(self, tmp_path, files) -> None:
        markup, _ = files
        bad = tmp_path / "bad.css"
        bad.write_text(".a { color: red;", encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(cli, ["convert", markup, "--css", str(bad)])
        assert result.exit_code == 1
        assert "Parse error:" in result.output

    def test_convert_rejects_bad_prefix(self, files) -> None:
        markup, _ = files
        runner = CliRunner()
        result = runner.invoke(cli, ["convert", markup, "--prefix", "bad."])
        assert result.exit_code == 2
        assert "Invalid class prefix" in result.output

    def test_convert_missing_file(self, tmp_path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["convert", str(tmp_path / "nope.html")])
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# classes command
# ---------------------------------------------------------------------------


class TestClassesCommand:
    def test_classes_table(self, files) -> None:
        markup, css = files
        runner = CliRunner()
        result = runner.invoke(cli, ["classes", markup, "--css", css, "--prefix", "wf-"])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "container -> wf-container",
            "text      -> wf-text",
        ]

    def test_classes_empty(self, tmp_path) -> None:
        page = tmp_path / "plain.html"
        page.write_text("<body><p>x</p></body>", encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(cli, ["classes", str(page)])
        assert result.exit_code == 0
        assert "No classes found" in result.output


# ---------------------------------------------------------------------------
# rules command
# ---------------------------------------------------------------------------


class TestRulesCommand:
    def test_rules_listing(self, files) -> None:
        _, css = files
        runner = CliRunner()
        result = runner.invoke(cli, ["rules", css])
        assert result.exit_code == 0
        assert "Rules: 2" in result.output
        assert "  [0] .container  specificity=10  {width: 100%}" in result.output
        assert "@media print (1 rule(s))" in result.output
        assert "  [2] .text  specificity=10  {color: black}" in result.output

    def test_rules_skipped_at_rules(self, tmp_path) -> None:
        css = tmp_path / "s.css"
        css.write_text('@import url("x.css"); p { color: red; }', encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(cli, ["rules", str(css)])
        assert result.exit_code == 0
        assert "Skipped at-rules:" in result.output
        assert '@import url("x.css")' in result.output

    def test_rules_parse_error(self, tmp_path) -> None:
        css = tmp_path / "s.css"
        css.write_text("}", encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(cli, ["rules", str(css)])
        assert result.exit_code == 1
        assert "Parse error:" in result.output
