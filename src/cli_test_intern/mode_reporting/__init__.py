"""Operator guidance exports."""

from .mode_reporter import (
    JIT_MESSAGE,
    LOCAL_BROWSER_MESSAGE,
    EchoReporter,
    Reporter,
    await_with_guidance,
    build_guidance_message,
    local_browser_url,
    report_run_mode,
)

__all__ = [
    "JIT_MESSAGE",
    "LOCAL_BROWSER_MESSAGE",
    "EchoReporter",
    "Reporter",
    "await_with_guidance",
    "build_guidance_message",
    "local_browser_url",
    "report_run_mode",
]
