"""Suite run use-case service."""

from __future__ import annotations

import logging
from functools import partial
from pathlib import Path

from cli_test_intern.artifact_validation import validate_build_artifacts
from cli_test_intern.configuration import RunnerSettings
from cli_test_intern.environment_check import JavaCheck, check_java_available, ensure_java_available
from cli_test_intern.file_system import FileSystem, LocalFileSystem
from cli_test_intern.mode_reporting import EchoReporter, Reporter, await_with_guidance
from cli_test_intern.run_planning import RunRequest, resolve_run_configuration
from cli_test_intern.runner_resources import browser_config_reference, resolve_intern_config
from cli_test_intern.test_execution import ExecutionEngine, InternProcessEngine, invoke_test_engine

from .run_contracts import RunOutcome

_LOGGER = logging.getLogger(__name__)


def execute_test_run(
    request: RunRequest,
    *,
    settings: RunnerSettings | None = None,
    engine: ExecutionEngine | None = None,
    java_check: JavaCheck | None = None,
    file_system: FileSystem | None = None,
    reporter: Reporter | None = None,
    project_root: Path | None = None,
) -> RunOutcome:
    """Gate, resolve, validate, run and report one test run.

    Java and build-artifact failures propagate before the engine starts and
    without guidance. Engine failures propagate after guidance is reported.
    """
    resolved_settings = settings or RunnerSettings()
    resolved_java_check = java_check or partial(
        check_java_available, resolved_settings.java_command
    )
    resolved_reporter = reporter or EchoReporter()
    resolved_file_system = file_system or LocalFileSystem()
    root = project_root or Path.cwd()

    ensure_java_available(request, resolved_java_check)

    configuration = resolve_run_configuration(request)
    _LOGGER.debug("resolved run scope %s", configuration.scope.value)

    validate_build_artifacts(
        configuration,
        resolved_settings.artifacts,
        verbose=request.verbose,
        project_root=root,
        file_system=resolved_file_system,
    )

    config_path = resolve_intern_config(root, resolved_file_system.exists)
    resolved_engine = engine or InternProcessEngine(
        command=resolved_settings.engine_command, config_path=config_path
    )
    future = invoke_test_engine(configuration, request, resolved_engine)
    engine_result = await_with_guidance(
        future,
        request,
        resolved_reporter,
        resolved_settings.local_server_url,
        browser_config_reference(config_path, root),
    )
    return RunOutcome(configuration=configuration, engine_result=engine_result)
