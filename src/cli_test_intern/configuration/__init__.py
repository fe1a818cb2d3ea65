"""Configuration domain exports."""

from .loader import DEFAULT_SETTINGS_FILENAME, ConfigurationError, load_runner_settings
from .runtime_settings import ArtifactSettings, RunnerSettings

__all__ = [
    "ArtifactSettings",
    "RunnerSettings",
    "ConfigurationError",
    "DEFAULT_SETTINGS_FILENAME",
    "load_runner_settings",
]
