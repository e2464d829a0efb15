"""Unit tests for the main CLI application."""

from pathlib import Path

from injectctl import __version__
from injectctl.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestMainApp:
    """Tests for global options."""

    def test_version(self) -> None:
        """--version prints the version and exits."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"injectctl version {__version__}" in result.output

    def test_help_lists_commands(self) -> None:
        """--help lists the available commands."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for command in ("check", "inject", "remove", "profiles"):
            assert command in result.output

    def test_verbose_flag_accepted(self, project: Path) -> None:
        """--verbose is accepted before a command."""
        result = runner.invoke(app, ["--verbose", "check", "Application", "--root", str(project)])

        assert result.exit_code == 0
