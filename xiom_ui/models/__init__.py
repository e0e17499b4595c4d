"""Pydantic models."""

from xiom_ui.models.component import Component, ComponentFile, RegistryEntry, RegistryIndex
from xiom_ui.models.install_plan import (
    AddReport,
    FailureKind,
    FileResult,
    FileStatus,
    InstallPlan,
    InstallResult,
    ResolutionFailure,
)
from xiom_ui.models.project_config import Aliases, ProjectConfig, Style, TailwindConfig
