"""Runtime dependency check exports."""

from .java_check import (
    JAVA_NOT_FOUND_MESSAGE,
    EnvironmentUnavailableError,
    JavaCheck,
    check_java_available,
    ensure_java_available,
)

__all__ = [
    "JAVA_NOT_FOUND_MESSAGE",
    "EnvironmentUnavailableError",
    "JavaCheck",
    "check_java_available",
    "ensure_java_available",
]
