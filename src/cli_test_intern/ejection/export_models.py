"""Ejection entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class ExportDescriptor:
    """What a project must install and copy to run Intern without this command."""

    dev_dependencies: Mapping[str, str]
    copy_path: Path
    copy_files: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "npm": {"devDependencies": dict(self.dev_dependencies)},
            "copy": {"path": str(self.copy_path), "files": list(self.copy_files)},
        }
