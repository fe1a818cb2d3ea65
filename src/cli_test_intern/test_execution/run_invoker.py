"""Delegation of a resolved run to the test-execution engine."""

from __future__ import annotations

from collections.abc import Mapping
from concurrent.futures import Future
from typing import Any, Protocol

from cli_test_intern.run_planning.run_contracts import RunConfiguration, RunRequest


class ExecutionEngine(Protocol):  # pylint: disable=too-few-public-methods
    """Protocol for engines that execute a merged run configuration."""

    def run(self, configuration: Mapping[str, Any]) -> Future[Any]: ...


def build_engine_configuration(
    configuration: RunConfiguration, request: RunRequest
) -> dict[str, Any]:
    """Merge the resolved plan with the request fields the engine consumes as-is."""
    return {
        "node_unit": configuration.node_unit,
        "remote_unit": configuration.remote_unit,
        "remote_functional": configuration.remote_functional,
        "node": configuration.node,
        "config": configuration.config,
        "filter": configuration.filter,
        "reporters": request.reporters,
        "secret": request.secret,
        "testing_key": request.testing_key,
        "user_name": request.user_name,
    }


def invoke_test_engine(
    configuration: RunConfiguration, request: RunRequest, engine: ExecutionEngine
) -> Future[Any]:
    """Start the engine and hand back its future unchanged."""
    return engine.run(build_engine_configuration(configuration, request))
