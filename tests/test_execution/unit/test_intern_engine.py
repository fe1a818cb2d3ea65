"""Tests for the Intern process engine."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from cli_test_intern.run_planning import RunRequest, resolve_run_configuration
from cli_test_intern.runner_resources import INTERN_CONFIG_FILENAME, RESOURCES_DIR
from cli_test_intern.test_execution import (
    EngineFailureError,
    InternProcessEngine,
    build_engine_configuration,
    build_intern_arguments,
)

CONFIG_PATH = Path("/pkg/intern.json")


def _merged(request: RunRequest) -> dict:
    return build_engine_configuration(resolve_run_configuration(request), request)


def test_all_suites_run_with_plain_config_reference() -> None:
    arguments = build_intern_arguments(_merged(RunRequest(all=True)), CONFIG_PATH)

    assert arguments == ["config=/pkg/intern.json"]


def test_unit_run_disables_functional_suites_and_selects_named_config() -> None:
    arguments = build_intern_arguments(
        _merged(RunRequest(unit=True, config="local", filter="widgets")), CONFIG_PATH
    )

    assert arguments == ["config=/pkg/intern.json@local", "functionalSuites=", "grep=widgets"]


def test_functional_run_disables_unit_suites() -> None:
    arguments = build_intern_arguments(_merged(RunRequest(functional=True)), CONFIG_PATH)

    assert "node.suites=" in arguments
    assert "browser.suites=" in arguments
    assert "functionalSuites=" not in arguments


def test_reporters_and_tunnel_credentials_are_forwarded() -> None:
    arguments = build_intern_arguments(
        _merged(
            RunRequest(
                all=True,
                config="browserstack",
                reporters=("Runner", "LcovHtml"),
                testing_key="key-1",
                user_name="qa-bot",
            )
        ),
        CONFIG_PATH,
    )

    assert "reporters=Runner" in arguments
    assert "reporters=LcovHtml" in arguments
    tunnel_argument = next(arg for arg in arguments if arg.startswith("tunnelOptions="))
    assert json.loads(tunnel_argument.split("=", 1)[1]) == {
        "accessKey": "key-1",
        "username": "qa-bot",
    }


def test_engine_runs_command_and_resolves_on_zero_exit() -> None:
    captured: list[tuple[str, ...]] = []

    def _fake_run(command: tuple[str, ...]) -> int:
        captured.append(command)
        return 0

    engine = InternProcessEngine(command="npx intern", run_command=_fake_run)

    assert engine.run(_merged(RunRequest(unit=True))).result() is None
    assert captured[0][:2] == ("npx", "intern")
    assert captured[0][2] == f"config={RESOURCES_DIR / INTERN_CONFIG_FILENAME}"


def test_engine_rejects_on_non_zero_exit() -> None:
    engine = InternProcessEngine(run_command=lambda command: 3)

    with pytest.raises(EngineFailureError, match="exited with code 3"):
        engine.run(_merged(RunRequest(unit=True))).result()


def test_engine_rejects_when_intern_is_not_installed() -> None:
    def _missing(command: tuple[str, ...]) -> int:
        raise FileNotFoundError(command[0])

    engine = InternProcessEngine(run_command=_missing)

    with pytest.raises(EngineFailureError, match="Intern command not found"):
        engine.run(_merged(RunRequest(unit=True))).result()
