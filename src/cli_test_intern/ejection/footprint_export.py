"""Export of the command's npm dependencies and Intern configuration."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from cli_test_intern.file_system import FileSystem, LocalFileSystem
from cli_test_intern.runner_resources import (
    INTERN_CONFIG_FILENAME,
    MANIFEST_FILENAME,
    RESOURCES_DIR,
)

from .export_models import ExportDescriptor


class ManifestReadError(Exception):
    """Raised when the bundled package.json cannot be read or parsed."""


def eject(helper: Any = None, *, file_system: FileSystem | None = None) -> ExportDescriptor:
    """Describe the dependencies to install and the files to copy when ejecting.

    Args:
      helper: Command host helper; ejection does not use it.
      file_system: Filesystem used to read the manifest.

    Returns:
      The export descriptor. Nothing is copied or installed here.

    Raises:
      ManifestReadError: If the manifest cannot be read or parsed.
    """
    del helper
    resolved_file_system = file_system or LocalFileSystem()
    try:
        manifest = json.loads(resolved_file_system.read_text(RESOURCES_DIR / MANIFEST_FILENAME))
    except (OSError, ValueError) as exc:
        raise ManifestReadError(
            f"Failed reading dependencies from {MANIFEST_FILENAME} - {exc}"
        ) from exc

    return ExportDescriptor(
        dev_dependencies=_dependencies_of(manifest),
        copy_path=RESOURCES_DIR,
        copy_files=(INTERN_CONFIG_FILENAME,),
    )


def _dependencies_of(manifest: Any) -> dict[str, str]:
    if not isinstance(manifest, Mapping):
        raise ManifestReadError(
            f"Failed reading dependencies from {MANIFEST_FILENAME} - manifest must be an object"
        )
    dependencies = manifest.get("dependencies")
    if dependencies is None:
        return {}
    if not isinstance(dependencies, Mapping):
        raise ManifestReadError(
            f"Failed reading dependencies from {MANIFEST_FILENAME} - dependencies must be an object"
        )
    for name, version in dependencies.items():
        if not isinstance(version, str):
            raise ManifestReadError(
                f"Failed reading dependencies from {MANIFEST_FILENAME} - "
                f"version of {name} must be a string"
            )
    return dict(dependencies)
