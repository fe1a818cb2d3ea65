"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from cli_test_intern.run_planning.run_contracts import RunConfiguration


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed run."""

    configuration: RunConfiguration
    engine_result: Any = None
