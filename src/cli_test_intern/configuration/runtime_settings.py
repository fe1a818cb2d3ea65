"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class ArtifactSettings:
    """Build output locations checked before a run."""

    unit: Path = Path("output/test/unit")
    functional: Path = Path("output/test/functional")


@dataclass(frozen=True)
class RunnerSettings:
    """Top-level settings aggregate."""

    artifacts: ArtifactSettings = field(default_factory=ArtifactSettings)
    local_server_url: str = "http://localhost:9000"
    engine_command: str = "node_modules/.bin/intern"
    java_command: str = "java"
    source_path: Path | None = None
