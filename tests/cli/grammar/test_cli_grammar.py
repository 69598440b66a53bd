import pytest
from typer.testing import CliRunner

from wake_installer.cli.main import cli_app

runner = CliRunner()


def test_cli_app_exists():
    """Verify that the CLI app instance is available."""
    assert cli_app is not None

# --- Valid Commands ---
@pytest.mark.parametrize("command, expected_output_substring", [
    (["--help"], "Fetch, verify and install the Wake binary"),
    (["install", "--help"], "--force"),
    (["install", "--help"], "--dest"),
    (["download", "--help"], "Re-download the Wake binary"),
    (["platform", "--help"], "--arch"),
    (["path", "--help"], "whether it is installed"),
    (["version", "--help"], "installer version"),
])
def test_valid_commands_help_output(command, expected_output_substring):
    """Test that valid commands and their --help flags work and produce expected output."""
    result = runner.invoke(cli_app, command)
    assert result.exit_code == 0
    assert "Usage:" in result.output
    assert expected_output_substring in result.output


def test_no_args_shows_help():
    result = runner.invoke(cli_app, [])
    assert "Usage:" in result.output
    assert "install" in result.output

# --- Invalid Commands ---
@pytest.mark.parametrize("command, expected_error_substring", [
    (["nonexistent-command"], "No such command"),
    (["path", "extra-arg"], "unexpected extra argument"),
    (["--invalid-global-flag"], "No such option"),
    (["install", "--bogus"], "No such option"),
])
def test_invalid_commands_fail_loudly(command, expected_error_substring):
    """Test that invalid commands or arguments fail with non-zero exit code and error message."""
    result = runner.invoke(cli_app, command)
    assert result.exit_code != 0
    assert expected_error_substring in result.output
