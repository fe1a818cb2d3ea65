"""Java VM availability check required by the Selenium tunnel."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor

from cli_test_intern.run_planning.run_contracts import RunRequest

JAVA_NOT_FOUND_MESSAGE = "Error! Java VM could not be found."

JavaCheck = Callable[[], Future[bool]]

_LOGGER = logging.getLogger(__name__)


class EnvironmentUnavailableError(Exception):
    """Raised when a runtime the requested run depends on is missing."""


def check_java_available(java_command: str = "java") -> Future[bool]:
    """Run `<java_command> -version` in a worker thread and resolve to whether it succeeded."""
    executor = ThreadPoolExecutor(max_workers=1)
    try:
        return executor.submit(_java_version_succeeds, java_command)
    finally:
        executor.shutdown(wait=False)


def ensure_java_available(request: RunRequest, java_check: JavaCheck) -> None:
    """Block on the Java check when every suite is requested."""
    if not request.all:
        return
    if not java_check().result():
        raise EnvironmentUnavailableError(JAVA_NOT_FOUND_MESSAGE)


def _java_version_succeeds(java_command: str) -> bool:
    try:
        subprocess.run(
            [java_command, "-version"],
            check=True,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except FileNotFoundError:
        _LOGGER.debug("java command not found: %s", java_command)
        return False
    except subprocess.CalledProcessError as exc:
        _LOGGER.debug("java -version exited with %s", exc.returncode)
        return False
    return True
