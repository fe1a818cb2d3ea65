"""Locations of the files shipped with the command."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

RESOURCES_DIR = Path(__file__).resolve().parent / "resources"
INTERN_CONFIG_FILENAME = "intern.json"
MANIFEST_FILENAME = "package.json"


def resolve_intern_config(
    project_root: Path, exists: Callable[[Path], bool] = Path.exists
) -> Path:
    """Prefer an ejected `intern.json` in the project over the bundled one."""
    project_config = project_root / INTERN_CONFIG_FILENAME
    if exists(project_config):
        return project_config
    return RESOURCES_DIR / INTERN_CONFIG_FILENAME


def browser_config_reference(config_path: Path, project_root: Path) -> str:
    """Return `config_path` as the browser client sees it when `project_root` is served."""
    try:
        return config_path.relative_to(project_root).as_posix()
    except ValueError:
        return config_path.as_posix()
