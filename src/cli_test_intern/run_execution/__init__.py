"""Run execution domain exports."""

from .run_contracts import RunOutcome
from .suite_run_use_case import execute_test_run

__all__ = ["RunOutcome", "execute_test_run"]
