"""Tests for the options registered on the run command."""

from __future__ import annotations

from cli_test_intern.cli import cli

SUPPORTED_ARGUMENTS: dict[str, str | None] = {
    "--all": "-a",
    "--config": "-c",
    "--functional": "-f",
    "--node": "-n",
    "--testingKey": "-k",
    "--userName": "-usr",
    "--reporters": "-r",
    "--secret": "-s",
    "--unit": "-u",
    "--verbose": "-v",
    "--filter": None,
}


def test_run_command_registers_supported_arguments() -> None:
    run_command = cli.commands["run"]
    untested_arguments = dict(SUPPORTED_ARGUMENTS)

    for param in run_command.params:
        if param.name == "help":
            continue
        long_names = [opt for opt in param.opts if opt.startswith("--")]
        aliases = [opt for opt in param.opts if not opt.startswith("--")]
        assert len(long_names) == 1
        assert long_names[0] in untested_arguments, f"Argument {long_names[0]} is not expected"
        expected_alias = untested_arguments[long_names[0]]
        assert aliases == ([expected_alias] if expected_alias else [])
        del untested_arguments[long_names[0]]

    assert not untested_arguments, f"Not all arguments are registered: {list(untested_arguments)}"
