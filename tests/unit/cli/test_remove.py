"""Unit tests for the remove command."""

from pathlib import Path

from injectctl.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestRemove:
    """Tests for injectctl remove command."""

    def test_removes_module(self, project: Path, application_config: str) -> None:
        """remove deletes the entry line from the configuration."""
        result = runner.invoke(app, ["remove", "Application", "--root", str(project)])

        assert result.exit_code == 0
        assert "Removed Application" in result.output
        assert (
            project / "config" / "application.config.php"
        ).read_text() == application_config.replace("        'Application',\n", "")

    def test_removes_provider(self, project: Path, aggregator_config: str) -> None:
        """remove deletes a config provider from the aggregator config."""
        result = runner.invoke(app, ["remove", "App\\ConfigProvider", "--root", str(project)])

        assert result.exit_code == 0
        assert (project / "config" / "config.php").read_text() == aggregator_config.replace(
            "    App\\ConfigProvider::class,\n", ""
        )

    def test_not_registered(self, project: Path, application_config: str) -> None:
        """Removing an unknown entry changes nothing."""
        result = runner.invoke(app, ["remove", "Blog", "--root", str(project)])

        assert result.exit_code == 0
        assert "nothing to remove" in result.output
        assert (project / "config" / "application.config.php").read_text() == application_config

    def test_no_configuration(self, tmp_path: Path) -> None:
        """remove exits 1 when no configuration is found."""
        result = runner.invoke(app, ["remove", "Blog", "--root", str(tmp_path)])

        assert result.exit_code == 1
