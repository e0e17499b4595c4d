"""Load and write xiom-ui.json."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from xiom_ui.models.project_config import ProjectConfig
from xiom_ui.services import settings

log = logging.getLogger(__name__)


class ProjectConfigError(RuntimeError):
    pass


class ConfigMissingError(ProjectConfigError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Config not found at {path}. Run `xiom-ui init` first.")
        self.path = path


class ConfigInvalidError(ProjectConfigError):
    pass


def config_path(cwd: Optional[Path] = None) -> Path:
    return (Path(cwd) if cwd is not None else Path.cwd()) / settings.CONFIG_FILENAME


def load_project_config(cwd: Optional[Path] = None) -> ProjectConfig:
    path = config_path(cwd)
    if not path.is_file():
        raise ConfigMissingError(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise ConfigInvalidError(f"Could not read {path}: {e}") from e
    try:
        return ProjectConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigInvalidError(f"Invalid {path.name}: {e}") from e


def write_project_config(config: ProjectConfig, cwd: Optional[Path] = None) -> Path:
    path = config_path(cwd)
    path.write_text(json.dumps(config.to_json_dict(), indent=2) + "\n", encoding="utf-8")
    log.debug("wrote %s", path)
    return path
