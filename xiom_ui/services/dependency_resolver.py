"""Resolve requested component names into an install plan.

Depth-first walk over registryDependencies. A component is fetched and
emitted once, after its own registry dependencies, at its first encounter.
Fetch failures are recorded per name and do not stop the walk.
"""

from __future__ import annotations

import logging
from typing import Iterable, Protocol

from xiom_ui.models.component import Component
from xiom_ui.models.install_plan import FailureKind, InstallPlan, ResolutionFailure
from xiom_ui.services.registry_client import (
    ComponentNotFoundError,
    RegistryError,
    SchemaError,
)

log = logging.getLogger(__name__)


class ComponentSource(Protocol):
    """Anything that can fetch a component by name (RegistryClient in practice)."""

    def get_component(self, name: str) -> Component:
        ...


def _failure_kind(exc: RegistryError) -> FailureKind:
    if isinstance(exc, ComponentNotFoundError):
        return FailureKind.NOT_FOUND
    if isinstance(exc, SchemaError):
        return FailureKind.SCHEMA
    return FailureKind.NETWORK


def _add_unique(out: list[str], seen: set[str], names: Iterable[str]) -> None:
    for name in names:
        if name and name not in seen:
            seen.add(name)
            out.append(name)


def resolve(source: ComponentSource, requested: Iterable[str]) -> InstallPlan:
    """Build an InstallPlan for requested names and everything they depend on."""
    visited: set[str] = set()
    components: list[Component] = []
    emitted: set[str] = set()
    failures: list[ResolutionFailure] = []
    deps: list[str] = []
    deps_seen: set[str] = set()
    dev_deps: list[str] = []
    dev_deps_seen: set[str] = set()

    def _visit(name: str, required_by: str | None) -> None:
        name = (name or "").strip()
        if not name or name in visited:
            return
        visited.add(name)
        try:
            component = source.get_component(name)
        except RegistryError as e:
            if required_by:
                log.warning("could not fetch %s (required by %s): %s", name, required_by, e)
            else:
                log.warning("could not fetch %s: %s", name, e)
            failures.append(ResolutionFailure(name=name, kind=_failure_kind(e), message=str(e)))
            return

        visited.add(component.name)
        for dep in component.registry_dependencies:
            _visit(dep, name)

        # registry may answer an alias with a canonical name already emitted
        if component.name in emitted:
            return
        emitted.add(component.name)
        components.append(component)
        _add_unique(deps, deps_seen, component.dependencies)
        _add_unique(dev_deps, dev_deps_seen, component.dev_dependencies)

    for requested_name in requested:
        _visit(requested_name, None)

    log.debug("resolved order: %s", [c.name for c in components])
    return InstallPlan(
        components=tuple(components),
        dependencies=tuple(deps),
        dev_dependencies=tuple(dev_deps),
        failures=tuple(failures),
    )
