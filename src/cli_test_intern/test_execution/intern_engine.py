"""Intern command line engine."""

from __future__ import annotations

import json
import logging
import shlex
import subprocess
from collections.abc import Callable, Mapping
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Any

from cli_test_intern.runner_resources import INTERN_CONFIG_FILENAME, RESOURCES_DIR

CommandRunner = Callable[[tuple[str, ...]], int]

_LOGGER = logging.getLogger(__name__)


class EngineFailureError(Exception):
    """Raised when the Intern process cannot be started or reports failures."""


class InternProcessEngine:  # pylint: disable=too-few-public-methods
    """Engine that runs the project's Intern CLI as a child process."""

    def __init__(
        self,
        *,
        command: str = "node_modules/.bin/intern",
        config_path: Path | None = None,
        run_command: CommandRunner | None = None,
    ) -> None:
        self._command = command
        self._config_path = config_path or RESOURCES_DIR / INTERN_CONFIG_FILENAME
        self._run_command = run_command or _run_process

    def run(self, configuration: Mapping[str, Any]) -> Future[None]:
        """Start Intern in a worker thread; the future rejects with EngineFailureError."""
        command = (
            *shlex.split(self._command),
            *build_intern_arguments(configuration, self._config_path),
        )
        executor = ThreadPoolExecutor(max_workers=1)
        try:
            return executor.submit(self._execute, command)
        finally:
            executor.shutdown(wait=False)

    def _execute(self, command: tuple[str, ...]) -> None:
        _LOGGER.debug("running %s", shlex.join(command))
        try:
            exit_code = self._run_command(command)
        except FileNotFoundError as exc:
            raise EngineFailureError(f"Intern command not found: {command[0]}") from exc
        if exit_code != 0:
            raise EngineFailureError(f"Intern exited with code {exit_code}")


def build_intern_arguments(configuration: Mapping[str, Any], config_path: Path) -> list[str]:
    """Translate a merged run configuration into Intern `key=value` arguments."""
    config_argument = f"config={config_path}"
    if configuration.get("config"):
        config_argument = f"{config_argument}@{configuration['config']}"
    arguments = [config_argument]

    if not configuration.get("node_unit"):
        arguments.append("node.suites=")
    if not configuration.get("remote_unit"):
        arguments.append("browser.suites=")
    if not configuration.get("remote_functional"):
        arguments.append("functionalSuites=")
    if configuration.get("filter"):
        arguments.append(f"grep={configuration['filter']}")
    for reporter in configuration.get("reporters") or ():
        arguments.append(f"reporters={reporter}")

    tunnel_options = {
        key: value
        for key, value in (
            ("username", configuration.get("user_name")),
            ("accessKey", configuration.get("testing_key")),
            ("secret", configuration.get("secret")),
        )
        if value
    }
    if tunnel_options:
        arguments.append(f"tunnelOptions={json.dumps(tunnel_options, sort_keys=True)}")
    return arguments


def _run_process(command: tuple[str, ...]) -> int:
    return subprocess.run(list(command), check=False).returncode
