"""Write resolved components into the project.

For each component in plan order, each file goes to
<cwd>/<aliases.components>/<file.name> with the utils import token rewritten
to the project's alias. Existing files are handled by an OverwritePolicy.
A failure on one file never stops the next one.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from pathlib import Path
from typing import Callable, Collection, Optional

from xiom_ui.models.install_plan import FileResult, FileStatus, InstallPlan
from xiom_ui.models.project_config import ProjectConfig
from xiom_ui.services import settings

log = logging.getLogger(__name__)

ConfirmOverwrite = Callable[[str], bool]


class OverwritePolicy(str, Enum):
    ALWAYS = "always"  # --overwrite
    PROMPT = "prompt"  # ask confirm(file_name); decline skips
    SKIP = "skip"  # --yes: leave existing files alone, no prompt

    @classmethod
    def from_flags(cls, overwrite: bool = False, yes: bool = False) -> "OverwritePolicy":
        if overwrite:
            return cls.ALWAYS
        if yes:
            return cls.SKIP
        return cls.PROMPT


# Path characters; a token touching one of these is part of a longer path.
_PATH_CHAR = r"[\w@/.\-]"
_TOKEN_RE = re.compile(
    rf"(?<!{_PATH_CHAR}){re.escape(settings.UTILS_IMPORT_TOKEN)}(?!{_PATH_CHAR})"
)


def utils_import_path(
    utils_alias: str,
    source_root: str = settings.SOURCE_ROOT_PREFIX,
    alias_prefix: str = settings.IMPORT_ALIAS_PREFIX,
) -> str:
    """Map a configured utils path to its import specifier: src/lib/utils -> @/lib/utils."""
    path = utils_alias.strip().replace("\\", "/")
    if path.startswith(source_root):
        return alias_prefix + path[len(source_root):]
    return path


def rewrite_imports(content: str, utils_alias: str) -> str:
    """Replace standalone occurrences of the utils token. Safe to apply twice."""
    target = utils_import_path(utils_alias)
    return _TOKEN_RE.sub(lambda _m: target, content)


def _target_path(base: Path, file_name: str) -> Optional[Path]:
    """Resolve file_name under base; None when it would land outside base."""
    rel = Path(file_name.replace("\\", "/"))
    if rel.is_absolute() or ".." in rel.parts:
        return None
    return base / rel


def materialize(
    plan: InstallPlan,
    config: ProjectConfig,
    policy: OverwritePolicy,
    *,
    confirm: Optional[ConfirmOverwrite] = None,
    cwd: Optional[Path] = None,
    prompt_for: Optional[Collection[str]] = None,
) -> list[FileResult]:
    """Write every file of every planned component.

    prompt_for limits PROMPT to the named components; the rest (components
    pulled in only as registry dependencies) keep existing files without
    asking. None prompts for everything.
    """
    root = Path(cwd) if cwd is not None else Path.cwd()
    base = root / config.aliases.components
    results: list[FileResult] = []

    for component in plan.components:
        component_policy = policy
        if policy == OverwritePolicy.PROMPT and prompt_for is not None and component.name not in prompt_for:
            component_policy = OverwritePolicy.SKIP
        for f in component.files:
            target = _target_path(base, f.name)
            if target is None:
                log.warning("refusing to write %s for %s: outside %s", f.name, component.name, base)
                results.append(
                    FileResult(
                        component=component.name,
                        file=f.name,
                        path=str(base / f.name),
                        status=FileStatus.FAILED,
                        detail="path escapes the components directory",
                    )
                )
                continue

            if target.exists() and not _may_overwrite(component_policy, confirm, f.name):
                log.info("skipped existing %s", target)
                results.append(
                    FileResult(
                        component=component.name,
                        file=f.name,
                        path=str(target),
                        status=FileStatus.SKIPPED,
                        detail="file exists",
                    )
                )
                continue

            content = rewrite_imports(f.content, config.aliases.utils)
            try:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text(content, encoding="utf-8")
            except OSError as e:
                log.warning("write failed for %s: %s", target, e)
                results.append(
                    FileResult(
                        component=component.name,
                        file=f.name,
                        path=str(target),
                        status=FileStatus.FAILED,
                        detail=str(e),
                    )
                )
                continue

            log.debug("wrote %s", target)
            results.append(
                FileResult(
                    component=component.name,
                    file=f.name,
                    path=str(target),
                    status=FileStatus.WRITTEN,
                )
            )
    return results


def _may_overwrite(policy: OverwritePolicy, confirm: Optional[ConfirmOverwrite], file_name: str) -> bool:
    if policy == OverwritePolicy.ALWAYS:
        return True
    if policy == OverwritePolicy.SKIP or confirm is None:
        return False
    return bool(confirm(file_name))
