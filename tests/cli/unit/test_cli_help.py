"""CLI smoke tests."""

from click.testing import CliRunner
from cli_test_intern.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "run" in result.output
    assert "eject" in result.output


def test_run_command_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["run", "--help"])

    assert result.exit_code == 0
    assert "--testingKey" in result.output
    assert "-usr" in result.output
