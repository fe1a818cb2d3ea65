"""Mapping of requested test modes to a run configuration."""

from __future__ import annotations

from .run_contracts import RunConfiguration, RunRequest, RunScope


def resolve_run_configuration(request: RunRequest) -> RunConfiguration:
    """Resolve the run scope; `all` wins over `unit` and `unit` wins over `functional`."""
    return RunConfiguration(
        scope=_resolve_scope(request),
        node=request.node,
        config=request.config,
        filter=request.filter,
    )


def _resolve_scope(request: RunRequest) -> RunScope:
    if request.all:
        return RunScope.ALL
    if request.unit:
        return RunScope.UNIT
    if request.functional:
        return RunScope.FUNCTIONAL
    return RunScope.UNIT
