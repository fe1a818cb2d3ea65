"""Runner settings loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import ArtifactSettings, RunnerSettings

DEFAULT_SETTINGS_FILENAME = ".cli-test-intern.yaml"


class ConfigurationError(Exception):
    """Raised when the settings file is invalid."""


def load_runner_settings(
    settings_path: Path | str | None = None, *, cwd: Path | None = None
) -> RunnerSettings:
    """Load runner settings, falling back to defaults when no settings file is present.

    An explicitly requested file must exist. The default file in `cwd` is optional.
    """
    base_dir = cwd or Path.cwd()
    if settings_path is None:
        path = base_dir / DEFAULT_SETTINGS_FILENAME
        if not path.exists():
            return RunnerSettings()
    else:
        path = _resolve_path(base_dir, str(settings_path))
        if not path.exists():
            raise ConfigurationError(f"Settings file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to read settings file: {exc}") from exc

    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse settings file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Settings root must be a mapping.")

    defaults = RunnerSettings()
    artifacts = _parse_artifacts_section(parsed.get("artifacts"), defaults.artifacts)
    local_server = _optional_mapping(parsed.get("local_server"), "local_server")
    engine = _optional_mapping(parsed.get("engine"), "engine")
    java = _optional_mapping(parsed.get("java"), "java")

    return RunnerSettings(
        artifacts=artifacts,
        local_server_url=_require_non_empty_string(
            local_server.get("url", defaults.local_server_url), "local_server.url"
        ).rstrip("/"),
        engine_command=_require_non_empty_string(
            engine.get("command", defaults.engine_command), "engine.command"
        ),
        java_command=_require_non_empty_string(
            java.get("command", defaults.java_command), "java.command"
        ),
        source_path=path,
    )


def _parse_artifacts_section(value: Any, defaults: ArtifactSettings) -> ArtifactSettings:
    section = _optional_mapping(value, "artifacts")
    unit = section.get("unit", str(defaults.unit))
    functional = section.get("functional", str(defaults.functional))
    return ArtifactSettings(
        unit=Path(_require_non_empty_string(unit, "artifacts.unit")),
        functional=Path(_require_non_empty_string(functional, "artifacts.functional")),
    )


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Settings section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped
