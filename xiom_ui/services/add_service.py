"""`add` command core: select -> resolve -> materialize -> install.

Only a missing/invalid project config (and a failed registry listing when
the user asked for --all or interactive selection) stops the run. Every
per-component and per-file problem is reported and skipped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from xiom_ui.models.component import RegistryEntry
from xiom_ui.models.install_plan import AddReport, FailureKind, FileStatus
from xiom_ui.services.dependency_resolver import resolve
from xiom_ui.services.file_materializer import ConfirmOverwrite, OverwritePolicy, materialize
from xiom_ui.services.package_installer import PackageInstaller
from xiom_ui.services.project_config_service import load_project_config
from xiom_ui.services.registry_client import RegistryClient

log = logging.getLogger(__name__)

SelectComponents = Callable[[list[RegistryEntry]], list[str]]
Echo = Callable[[str], None]


@dataclass
class AddOptions:
    yes: bool = False
    overwrite: bool = False
    all: bool = False


def _component_names(
    names: list[str],
    options: AddOptions,
    client: RegistryClient,
    select: Optional[SelectComponents],
) -> list[str]:
    if options.all:
        return [e.name for e in client.list_components()]
    names = [n.strip() for n in names if n and n.strip()]
    if names:
        return names
    if select is None:
        return []
    return select(client.list_components())


def add_components(
    names: list[str],
    options: AddOptions,
    *,
    client: Optional[RegistryClient] = None,
    installer: Optional[PackageInstaller] = None,
    cwd: Optional[Path] = None,
    confirm: Optional[ConfirmOverwrite] = None,
    select: Optional[SelectComponents] = None,
    echo: Echo = print,
) -> AddReport:
    root = Path(cwd) if cwd is not None else Path.cwd()
    config = load_project_config(root)
    client = client or RegistryClient()

    requested = _component_names(names, options, client, select)
    if not requested:
        echo("No components selected.")
        return AddReport()

    plan = resolve(client, requested)
    policy = OverwritePolicy.from_flags(overwrite=options.overwrite, yes=options.yes)
    files = materialize(plan, config, policy, confirm=confirm, cwd=root, prompt_for=set(requested))
    report = AddReport(plan=plan, files=files)

    for failure in plan.failures:
        if failure.kind == FailureKind.NOT_FOUND:
            echo(f'Component "{failure.name}" not found')
        else:
            echo(f"Failed to add {failure.name}")
            echo(f"  {failure.message}")

    for component in plan.components:
        results = report.files_for(component.name)
        for r in results:
            if r.status == FileStatus.SKIPPED:
                echo(f"Skipped {r.file}")
            elif r.status == FileStatus.FAILED:
                echo(f"Failed to write {r.file}: {r.detail}")
        if any(r.status == FileStatus.FAILED for r in results):
            echo(f"Added {component.name} (with errors)")
        else:
            echo(f"Added {component.name}")

    installer = installer or PackageInstaller(cwd=root)
    if plan.dependencies:
        echo("Installing dependencies...")
        result = installer.install(plan.dependencies)
        report.installs.append(result)
        echo("Dependencies installed" if result.ok else "Failed to install some dependencies")
    if plan.dev_dependencies:
        result = installer.install(plan.dev_dependencies, dev=True)
        report.installs.append(result)
        if not result.ok:
            echo("Failed to install some dev dependencies")

    log.info(
        "add finished: %d component(s), %d failure(s), %d file(s)",
        len(plan.components),
        len(plan.failures),
        len(files),
    )
    echo("Done!")
    return report
