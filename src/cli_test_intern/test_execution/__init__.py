"""Test execution exports."""

from .intern_engine import EngineFailureError, InternProcessEngine, build_intern_arguments
from .run_invoker import ExecutionEngine, build_engine_configuration, invoke_test_engine

__all__ = [
    "EngineFailureError",
    "InternProcessEngine",
    "ExecutionEngine",
    "build_engine_configuration",
    "build_intern_arguments",
    "invoke_test_engine",
]
