"""Tests for the stylist CLI."""

from __future__ import annotations

import os
import sys
import textwrap

import pytest
from click.testing import CliRunner

from stylist import __version__
from stylist.cli.format import load_provider
from stylist.cli.main import cli
from stylist.errors import ProviderError

PROVIDER = textwrap.dedent(
    """
    from stylist import declare, style

    @style
    def button():
        declare("color", "black")
        declare("text-align", "center")

    @style
    def empty():
        pass

    STYLES = [button, empty]
    """
)

FUNCTION_PROVIDER = textwrap.dedent(
    """
    from stylist import declare, Style

    link = Style(lambda: declare("cursor", "pointer"))

    def styles():
        return [link]
    """
)


@pytest.fixture()
def provider_module(tmp_path, monkeypatch):
    (tmp_path / "cli_styles.py").write_text(PROVIDER)
    (tmp_path / "cli_function_styles.py").write_text(FUNCTION_PROVIDER)
    (tmp_path / "cli_nothing.py").write_text("VALUE = 1\n")
    monkeypatch.syspath_prepend(str(tmp_path))
    return tmp_path


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "compile Python style descriptions" in result.output
        assert "format" in result.output

    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# load_provider
# ---------------------------------------------------------------------------


class TestLoadProvider:
    def test_module_with_styles_list(self, provider_module) -> None:
        provider = load_provider("cli_styles")
        assert len(provider) == 2

    def test_module_with_styles_function(self, provider_module) -> None:
        provider = load_provider("cli_function_styles")
        assert callable(provider.styles)

    def test_attribute(self, provider_module) -> None:
        provider = load_provider("cli_styles:button")
        assert provider.description.endswith("button")

    def test_missing_module(self) -> None:
        with pytest.raises(ProviderError, match="Cannot import"):
            load_provider("no_such_module_for_stylist")

    def test_missing_attribute(self, provider_module) -> None:
        with pytest.raises(ProviderError, match="no attribute"):
            load_provider("cli_styles:missing")

    def test_module_without_styles(self, provider_module) -> None:
        with pytest.raises(ProviderError, match="neither STYLES"):
            load_provider("cli_nothing")


# ---------------------------------------------------------------------------
# format command
# ---------------------------------------------------------------------------


class TestFormatCommand:
    def test_compact_to_stdout(self, provider_module) -> None:
        import cli_styles

        runner = CliRunner()
        result = runner.invoke(cli, ["format", "cli_styles", "--preset", "compact"])
        assert result.exit_code == 0
        name = cli_styles.button.name
        assert result.output == f".{name}{{color:black;text-align:center;}}"

    def test_pretty_is_default(self, provider_module) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["format", "cli_styles"])
        assert result.exit_code == 0
        assert "/* cli_styles.button */" in result.output
        assert "\tcolor: black;\n" in result.output

    def test_javafx(self, provider_module) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["format", "cli_function_styles", "--preset", "javafx"])
        assert result.exit_code == 0
        assert "-fx-cursor: hand;" in result.output

    def test_output_file(self, provider_module, tmp_path) -> None:
        target = tmp_path / "build" / "app.css"
        runner = CliRunner()
        result = runner.invoke(
            cli, ["format", "cli_styles", "--preset", "compact", "--output", str(target)]
        )
        assert result.exit_code == 0
        assert "Wrote" in result.output
        assert target.read_text(encoding="utf-8").endswith("{color:black;text-align:center;}")

    def test_output_failure(self, provider_module, tmp_path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("x")
        runner = CliRunner()
        result = runner.invoke(cli, ["format", "cli_styles", "-o", str(blocker / "app.css")])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_bad_provider(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["format", "no_such_module_for_stylist"])
        assert result.exit_code == 1
        assert "Cannot import" in result.output

    def test_unknown_preset_rejected(self, provider_module) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["format", "cli_styles", "--preset", "xml"])
        assert result.exit_code != 0

    def test_verbose(self, provider_module) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["format", "cli_styles", "--verbose", "--preset", "compact"])
        assert result.exit_code == 0

    def test_module_in_working_directory(self, tmp_path, monkeypatch) -> None:
        (tmp_path / "cli_cwd_styles.py").write_text(PROVIDER)
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(sys, "path", [p for p in sys.path if p not in ("", str(tmp_path))])
        runner = CliRunner()
        result = runner.invoke(cli, ["format", "cli_cwd_styles", "--preset", "compact"])
        assert result.exit_code == 0, result.output
        assert result.output.endswith("{color:black;text-align:center;}")
        assert sys.path[0] == os.getcwd()
