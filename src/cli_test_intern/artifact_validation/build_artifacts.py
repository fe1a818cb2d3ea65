"""Existence checks for built test suites."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

from cli_test_intern.configuration.runtime_settings import ArtifactSettings
from cli_test_intern.file_system import FileSystem, LocalFileSystem
from cli_test_intern.run_planning.run_contracts import RunConfiguration

_LOGGER = logging.getLogger(__name__)

_BUILD_INSTRUCTIONS = (
    "For @dojo/cli-build-app run: dojo build app --mode unit or dojo build app --mode functional"
)
MISSING_TESTS_MESSAGE = (
    f"Could not find tests, have you built the tests using dojo build?\n\n{_BUILD_INSTRUCTIONS}"
)


class MissingBuildArtifactError(Exception):
    """Raised when a required test build output does not exist."""

    def __init__(self, path: Path, *, verbose: bool = False) -> None:
        if verbose:
            message = (
                f"Could not find tests at {path}. "
                f"Have you built the tests using dojo build?\n\n{_BUILD_INSTRUCTIONS}"
            )
        else:
            message = MISSING_TESTS_MESSAGE
        super().__init__(message)
        self.path = path


class ArtifactCategory(str, Enum):
    """Build output categories produced by `dojo build app --mode <category>`."""

    UNIT = "unit"
    FUNCTIONAL = "functional"

    def location(self, settings: ArtifactSettings) -> Path:
        return settings.unit if self is ArtifactCategory.UNIT else settings.functional


def required_artifact_categories(configuration: RunConfiguration) -> tuple[ArtifactCategory, ...]:
    """Return the categories a configuration needs, unit before functional."""
    required: list[ArtifactCategory] = []
    if configuration.node_unit or configuration.remote_unit:
        required.append(ArtifactCategory.UNIT)
    if configuration.remote_functional:
        required.append(ArtifactCategory.FUNCTIONAL)
    return tuple(required)


def validate_build_artifacts(
    configuration: RunConfiguration,
    settings: ArtifactSettings,
    *,
    verbose: bool = False,
    project_root: Path | None = None,
    file_system: FileSystem | None = None,
) -> None:
    """Fail with MissingBuildArtifactError on the first required category that was not built."""
    resolved_file_system = file_system or LocalFileSystem()
    root = project_root or Path.cwd()
    for category in required_artifact_categories(configuration):
        location = root / category.location(settings)
        _LOGGER.debug("checking %s tests at %s", category.value, location)
        if not resolved_file_system.exists(location):
            raise MissingBuildArtifactError(location, verbose=verbose)
