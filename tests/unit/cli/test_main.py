"""Unit tests for the main CLI application."""

from archive_man import __version__
from archive_man.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestMainApp:
    """Tests for global options."""

    def test_version(self) -> None:
        """--version prints the version and exits."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"archive-man version {__version__}" in result.output

    def test_help_lists_commands(self) -> None:
        """--help shows every public command."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for name in ("sync", "inspect", "delete-files", "print-exif", "print-exif-create-time"):
            assert name in result.output

    def test_unknown_command(self) -> None:
        """Unknown commands exit with status 1."""
        result = runner.invoke(app, ["frobnicate"])

        assert result.exit_code == 1

    def test_unknown_global_option(self) -> None:
        """Unknown options before the command exit with status 1."""
        result = runner.invoke(app, ["--bogus", "inspect", "."])

        assert result.exit_code == 1

    def test_verbose_flag_accepted(self, tmp_path) -> None:
        """Global flags come before the command."""
        result = runner.invoke(app, ["-v", "inspect", str(tmp_path), "--count"])

        assert result.exit_code == 0
        assert result.output.splitlines()[-1] == "0"
