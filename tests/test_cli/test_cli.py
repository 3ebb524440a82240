"""Tests for the stylenest CLI commands."""
from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from stylenest import __version__
from stylenest.cli.main import cli


@pytest.fixture
def tree_file(tmp_path):
    path = tmp_path / "styles.json"
    path.write_text(
        json.dumps(
            {
                "@charset": '"utf-8"',
                "div": {"minWidth": "34px", "@media screen": {".c": {"zIndex": 45}}},
            }
        ),
        encoding="utf-8",
    )
    return path


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_cli_group_help(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "flatten nested JSON style trees" in result.output

    def test_cli_lists_commands(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert "normalize" in result.output
        assert "render" in result.output

    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# normalize command
# ---------------------------------------------------------------------------


class TestNormalizeCommand:
    def test_prints_flattened_json(self, tree_file) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["normalize", str(tree_file)])
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "@charset": '"utf-8"',
            "div": {"min-width": "34px"},
            "@media screen": {"div .c": {"z-index": 45}},
        }

    def test_missing_file(self, tmp_path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["normalize", str(tmp_path / "nope.json")])
        assert result.exit_code != 0

    def test_invalid_json(self, tmp_path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(cli, ["normalize", str(path)])
        assert result.exit_code == 1
        assert "Error: invalid JSON in bad.json" in result.output

    def test_invalid_utf8(self, tmp_path) -> None:
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"div": {"content": "\xff"}}')
        runner = CliRunner()
        result = runner.invoke(cli, ["render", str(path)])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Error: latin1.json is not valid UTF-8" in result.output

    def test_style_error(self, tmp_path) -> None:
        path = tmp_path / "nested.json"
        path.write_text(json.dumps({"div": {"@font-face": {"src": "x"}}}), encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(cli, ["normalize", str(path)])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "div > @font-face" in result.output


# ---------------------------------------------------------------------------
# render command
# ---------------------------------------------------------------------------


class TestRenderCommand:
    def test_prints_stylesheet(self, tree_file) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["render", str(tree_file)])
        assert result.exit_code == 0
        assert result.output == (
            '@charset "utf-8";\n'
            "div {\n"
            "  min-width: 34px;\n"
            "}\n"
            "@media screen {\n"
            "  div .c {\n"
            "    z-index: 45;\n"
            "  }\n"
            "}\n"
        )

    def test_indent_option(self, tree_file) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["render", "--indent", "4", str(tree_file)])
        assert result.exit_code == 0
        assert "    min-width: 34px;\n" in result.output

    def test_output_file(self, tree_file, tmp_path) -> None:
        out = tmp_path / "styles.css"
        runner = CliRunner()
        result = runner.invoke(cli, ["render", str(tree_file), "-o", str(out)])
        assert result.exit_code == 0
        assert out.read_text(encoding="utf-8").startswith('@charset "utf-8";\n')

    def test_style_error(self, tmp_path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(["div"]), encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(cli, ["render", str(path)])
        assert result.exit_code == 1
        assert "Style tree must be a mapping" in result.output

    def test_verbose_flag_accepted(self, tree_file) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["-v", "render", str(tree_file)])
        assert result.exit_code == 0
