"""Project initialization: config file, cn() helper, components dir, base packages."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from xiom_ui.models.install_plan import InstallResult
from xiom_ui.models.project_config import Aliases, ProjectConfig, Style, TailwindConfig
from xiom_ui.services import settings
from xiom_ui.services.package_installer import PackageInstaller
from xiom_ui.services.project_config_service import write_project_config

log = logging.getLogger(__name__)

UTILS_CONTENT = """import { type ClassValue, clsx } from "clsx"
import { twMerge } from "tailwind-merge"

export function cn(...inputs: ClassValue[]) {
  return twMerge(clsx(inputs))
}
"""


class InitError(RuntimeError):
    pass


@dataclass
class InitAnswers:
    components_dir: str = settings.DEFAULT_COMPONENTS_DIR
    utils_path: str = settings.DEFAULT_UTILS_PATH
    style: Style = Style.DEFAULT
    tailwind_css: str = settings.DEFAULT_TAILWIND_CSS


def build_config(answers: InitAnswers) -> ProjectConfig:
    return ProjectConfig(
        style=answers.style,
        tailwind=TailwindConfig(css=answers.tailwind_css),
        aliases=Aliases(
            components=answers.components_dir,
            utils=re.sub(r"\.ts$", "", answers.utils_path.strip()),
        ),
    )


def init_project(
    answers: InitAnswers,
    cwd: Optional[Path] = None,
    installer: Optional[PackageInstaller] = None,
) -> tuple[ProjectConfig, InstallResult]:
    """Write project scaffolding and install base packages.

    Raises InitError if an answer is invalid or any file cannot be written.
    A failed package install comes back as InstallResult(ok=False); written
    files are kept.
    """
    root = Path(cwd) if cwd is not None else Path.cwd()
    try:
        config = build_config(answers)
        write_project_config(config, root)
        utils_file = root / answers.utils_path
        utils_file.parent.mkdir(parents=True, exist_ok=True)
        utils_file.write_text(UTILS_CONTENT, encoding="utf-8")
        (root / answers.components_dir).mkdir(parents=True, exist_ok=True)
    except ValidationError as e:
        raise InitError(f"Failed to initialize project: invalid answer: {e}") from e
    except OSError as e:
        raise InitError(f"Failed to initialize project: {e}") from e

    installer = installer or PackageInstaller(cwd=root)
    result = installer.install(settings.BASE_DEPENDENCIES)
    if not result.ok:
        log.warning("base package install failed: %s", result.detail)
    return config, result
