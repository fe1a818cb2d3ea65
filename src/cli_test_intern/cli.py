"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys

import click

from cli_test_intern.artifact_validation import MissingBuildArtifactError
from cli_test_intern.configuration import ConfigurationError, load_runner_settings
from cli_test_intern.ejection import ManifestReadError, eject
from cli_test_intern.environment_check import EnvironmentUnavailableError
from cli_test_intern.run_execution import execute_test_run
from cli_test_intern.run_planning import RunRequest
from cli_test_intern.test_execution import EngineFailureError


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="cli-test-intern")
@click.option(
    "--settings",
    "settings_path",
    required=False,
    default=None,
    type=click.Path(path_type=str),
    help="Path to a YAML runner settings file (defaults to .cli-test-intern.yaml if present)",
)
@click.pass_context
def cli(ctx: click.Context, settings_path: str | None) -> None:
    """Run Intern unit and functional tests for a built project."""
    ctx.obj = {"settings_path": settings_path}


@cli.command(name="run")
@click.option(
    "--all", "-a", "all_suites", is_flag=True, help="Runs unit tests and functional tests"
)
@click.option(
    "--config",
    "-c",
    "config",
    default=None,
    help="Intern config to test with, e.g. 'local', 'browserstack' or 'saucelabs'",
)
@click.option("--functional", "-f", is_flag=True, help="Runs only functional tests")
@click.option("--node", "-n", is_flag=True, help="Runs unit tests in node")
@click.option(
    "--testingKey", "-k", "testing_key", default=None, help="API key for testing platform"
)
@click.option(
    "--userName", "-usr", "user_name", default=None, help="User name for testing platform"
)
@click.option("--reporters", "-r", multiple=True, help="Comma separated list of reporters to use")
@click.option("--secret", "-s", default=None, help="API secret for testing platform")
@click.option("--unit", "-u", is_flag=True, help="Runs only unit tests")
@click.option("--verbose", "-v", is_flag=True, help="Produce diagnostic messages to the console")
@click.option(
    "--filter",
    "filter_text",
    default=None,
    help="Run only tests whose IDs match a regular expression",
)
@click.pass_context
def run_tests(  # pylint: disable=too-many-arguments,too-many-positional-arguments
    ctx: click.Context,
    all_suites: bool,
    config: str | None,
    functional: bool,
    node: bool,
    testing_key: str | None,
    user_name: str | None,
    reporters: tuple[str, ...],
    secret: str | None,
    unit: bool,
    verbose: bool,
    filter_text: str | None,
) -> None:
    """Run the built test suites with Intern."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    request = RunRequest(
        all=all_suites,
        unit=unit,
        functional=functional,
        node=node,
        config=config,
        filter=filter_text,
        verbose=verbose,
        reporters=_split_reporters(reporters),
        secret=secret,
        testing_key=testing_key,
        user_name=user_name,
    )
    try:
        settings = load_runner_settings(ctx.obj["settings_path"])
        execute_test_run(request, settings=settings)
    except (
        ConfigurationError,
        EnvironmentUnavailableError,
        MissingBuildArtifactError,
        EngineFailureError,
    ) as exc:
        raise CliError(str(exc)) from exc


@cli.command(name="eject")
def eject_command() -> None:
    """Print the npm dependencies and files a project needs to run Intern directly."""
    try:
        descriptor = eject()
    except ManifestReadError as exc:
        raise CliError(str(exc)) from exc
    click.echo(json.dumps(descriptor.to_dict(), indent=2))


def _split_reporters(values: tuple[str, ...]) -> tuple[str, ...]:
    return tuple(
        reporter.strip() for value in values for reporter in value.split(",") if reporter.strip()
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
