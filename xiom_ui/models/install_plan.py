"""Install plan and per-item result models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from xiom_ui.models.component import Component


class FailureKind(str, Enum):
    NOT_FOUND = "not_found"
    NETWORK = "network"
    SCHEMA = "schema"


class ResolutionFailure(BaseModel):
    """A requested (or transitively required) component that could not be fetched."""

    model_config = ConfigDict(frozen=True)

    name: str
    kind: FailureKind
    message: str = ""


class InstallPlan(BaseModel):
    """Resolver output.

    components are in post-order (dependencies before dependents) and each
    name appears once. dependencies / dev_dependencies keep first-seen order.
    """

    model_config = ConfigDict(frozen=True)

    components: tuple[Component, ...] = ()
    dependencies: tuple[str, ...] = ()
    dev_dependencies: tuple[str, ...] = ()
    failures: tuple[ResolutionFailure, ...] = ()

    @property
    def order(self) -> list[str]:
        return [c.name for c in self.components]


class FileStatus(str, Enum):
    WRITTEN = "written"
    SKIPPED = "skipped"
    FAILED = "failed"


class FileResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    component: str
    file: str
    path: str
    status: FileStatus
    detail: str = ""


class InstallResult(BaseModel):
    """Outcome of one package-manager invocation."""

    dev: bool = False
    packages: list[str] = Field(default_factory=list)
    ok: bool = True
    detail: str = ""


class AddReport(BaseModel):
    """Everything `add` did, in order."""

    plan: InstallPlan = Field(default_factory=InstallPlan)
    files: list[FileResult] = Field(default_factory=list)
    installs: list[InstallResult] = Field(default_factory=list)

    def files_for(self, component: str) -> list[FileResult]:
        return [r for r in self.files if r.component == component]
