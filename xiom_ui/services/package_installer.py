"""Install npm packages for added components. Failures are reported, never raised."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Iterable, Optional

from xiom_ui.models.install_plan import InstallResult

log = logging.getLogger(__name__)


class PackageInstaller:
    def __init__(self, command: str = "npm", cwd: Optional[Path] = None, timeout: float = 600.0) -> None:
        self._command = command
        self._cwd = cwd
        self._timeout = timeout

    def build_command(self, packages: list[str], dev: bool = False) -> list[str]:
        cmd = [self._command, "install"]
        if dev:
            cmd.append("-D")
        return cmd + packages

    def install(self, packages: Iterable[str], dev: bool = False) -> InstallResult:
        """Run `<command> install [-D] pkgs...`. Empty input is a no-op success."""
        pkgs = [p for p in packages if p]
        if not pkgs:
            return InstallResult(dev=dev, packages=[], ok=True)

        cmd = self.build_command(pkgs, dev=dev)
        log.info("running %s", " ".join(cmd))
        try:
            r = subprocess.run(
                cmd,
                cwd=str(self._cwd) if self._cwd is not None else None,
                capture_output=True,
                text=True,
                timeout=self._timeout,
            )
        except FileNotFoundError:
            log.warning("%s not found on PATH", self._command)
            return InstallResult(dev=dev, packages=pkgs, ok=False, detail=f"{self._command} not found")
        except subprocess.TimeoutExpired:
            log.warning("%s timed out after %ss", " ".join(cmd), self._timeout)
            return InstallResult(dev=dev, packages=pkgs, ok=False, detail="timeout")
        except OSError as e:
            log.warning("%s failed to start: %s", self._command, e)
            return InstallResult(dev=dev, packages=pkgs, ok=False, detail=str(e))

        if r.returncode != 0:
            out = ((r.stderr or "").strip() or (r.stdout or "").strip())[-500:]
            log.warning("%s exited %s: %s", " ".join(cmd), r.returncode, out)
            return InstallResult(dev=dev, packages=pkgs, ok=False, detail=f"exit {r.returncode}: {out}")
        return InstallResult(dev=dev, packages=pkgs, ok=True)
