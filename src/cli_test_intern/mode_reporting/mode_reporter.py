"""Run-mode guidance printed after the engine finishes."""

from __future__ import annotations

from concurrent.futures import Future
from typing import Any, Protocol
from urllib.parse import quote

import click

from cli_test_intern.run_planning.run_contracts import RunRequest
from cli_test_intern.runner_resources import INTERN_CONFIG_FILENAME

JIT_MESSAGE = "These tests were run using Dojo JIT compilation."
LOCAL_BROWSER_MESSAGE = (
    "If the project directory is hosted on a local server, "
    "unit tests can also be run in browser by navigating to"
)


class Reporter(Protocol):  # pylint: disable=too-few-public-methods
    """Sink for operator-facing messages."""

    def log(self, message: str) -> None: ...


class EchoReporter:  # pylint: disable=too-few-public-methods
    """Reporter writing to stdout through click."""

    def log(self, message: str) -> None:
        click.echo(message)


def local_browser_url(
    local_server_url: str,
    filter_text: str | None = None,
    config_reference: str = INTERN_CONFIG_FILENAME,
) -> str:
    """Return the Intern browser client URL for the project served at `local_server_url`.

    `config_reference` is the Intern config the run used, relative to the served project.
    """
    url = (
        f"{local_server_url.rstrip('/')}/node_modules/intern/"
        f"?config={config_reference}@local"
    )
    if filter_text:
        url = f"{url}&grep={quote(filter_text)}"
    return url


def build_guidance_message(
    request: RunRequest, local_server_url: str, config_reference: str = INTERN_CONFIG_FILENAME
) -> str:
    if request.is_local:
        url = local_browser_url(local_server_url, request.filter, config_reference)
        return f"{LOCAL_BROWSER_MESSAGE} {url}"
    return JIT_MESSAGE


def report_run_mode(
    request: RunRequest,
    reporter: Reporter,
    local_server_url: str,
    config_reference: str = INTERN_CONFIG_FILENAME,
) -> None:
    reporter.log(build_guidance_message(request, local_server_url, config_reference))


def await_with_guidance(
    future: Future[Any],
    request: RunRequest,
    reporter: Reporter,
    local_server_url: str,
    config_reference: str = INTERN_CONFIG_FILENAME,
) -> Any:
    """Wait for the engine, report guidance on either outcome, then re-surface the outcome."""
    try:
        return future.result()
    finally:
        report_run_mode(request, reporter, local_server_url, config_reference)
