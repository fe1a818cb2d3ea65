"""Run planning domain exports."""

from .argument_resolver import resolve_run_configuration
from .run_contracts import RunConfiguration, RunRequest, RunScope

__all__ = [
    "RunRequest",
    "RunScope",
    "RunConfiguration",
    "resolve_run_configuration",
]
