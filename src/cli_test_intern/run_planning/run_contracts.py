"""Run planning entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

LOCAL_CONFIG = "local"


class RunScope(str, Enum):
    """Which suites a run covers."""

    ALL = "all"
    UNIT = "unit"
    FUNCTIONAL = "functional"

    @property
    def node_unit(self) -> bool:
        return _SCOPE_SUITES[self][0]

    @property
    def remote_unit(self) -> bool:
        return _SCOPE_SUITES[self][1]

    @property
    def remote_functional(self) -> bool:
        return _SCOPE_SUITES[self][2]


# (node_unit, remote_unit, remote_functional)
_SCOPE_SUITES: dict[RunScope, tuple[bool, bool, bool]] = {
    RunScope.ALL: (True, True, True),
    RunScope.UNIT: (True, True, False),
    RunScope.FUNCTIONAL: (False, False, True),
}


@dataclass(frozen=True)
class RunRequest:  # pylint: disable=too-many-instance-attributes
    """Operator intent for one test run, as parsed from the command line."""

    all: bool = False
    unit: bool = False
    functional: bool = False
    node: bool = False
    config: str | None = None
    filter: str | None = None
    verbose: bool = False
    reporters: tuple[str, ...] = ()
    secret: str | None = None
    testing_key: str | None = None
    user_name: str | None = None

    @property
    def is_local(self) -> bool:
        return self.config == LOCAL_CONFIG


@dataclass(frozen=True)
class RunConfiguration:
    """Resolved execution plan for one run."""

    scope: RunScope
    node: bool
    config: str | None
    filter: str | None

    @property
    def node_unit(self) -> bool:
        return self.scope.node_unit

    @property
    def remote_unit(self) -> bool:
        return self.scope.remote_unit

    @property
    def remote_functional(self) -> bool:
        return self.scope.remote_functional
