"""Test that the CLI entry point works correctly in built packages."""

import subprocess
import sys

from typer.testing import CliRunner


def test_entry_point_import():
    """Test that the entry point module can be imported."""
    from gh_milestones.cli.main import app

    assert app is not None


def test_cli_help_command():
    """Test that the CLI help command works."""
    result = subprocess.run(
        [sys.executable, "-c", "from gh_milestones.cli.main import app; app(['--help'])"],
        capture_output=True,
        text=True,
    )

    # Should exit with code 0 for help
    assert result.returncode == 0
    assert "GitHub milestone and component progress reports" in result.stdout


def test_version_command():
    from gh_milestones import __version__
    from gh_milestones.cli.main import app

    result = CliRunner().invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.output
