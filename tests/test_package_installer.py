"""Tests for npm invocation. subprocess.run is patched; npm is never executed."""

import subprocess
from unittest.mock import MagicMock, patch

from xiom_ui.services.package_installer import PackageInstaller


def _completed(returncode: int = 0, stdout: str = "", stderr: str = "") -> MagicMock:
    return MagicMock(returncode=returncode, stdout=stdout, stderr=stderr)


def test_empty_package_list_is_noop():
    with patch("subprocess.run") as run:
        result = PackageInstaller().install([])

    assert result.ok is True
    assert not run.called


def test_runtime_install_command():
    with patch("subprocess.run", return_value=_completed()) as run:
        result = PackageInstaller(cwd=None).install(["clsx", "tailwind-merge"])

    assert result.ok is True
    assert result.packages == ["clsx", "tailwind-merge"]
    assert run.call_args[0][0] == ["npm", "install", "clsx", "tailwind-merge"]


def test_dev_install_command(tmp_path):
    with patch("subprocess.run", return_value=_completed()) as run:
        result = PackageInstaller(cwd=tmp_path).install(["@types/react"], dev=True)

    assert result.dev is True
    assert run.call_args[0][0] == ["npm", "install", "-D", "@types/react"]
    assert run.call_args[1]["cwd"] == str(tmp_path)


def test_nonzero_exit_is_reported_not_raised():
    with patch("subprocess.run", return_value=_completed(1, stderr="ERESOLVE could not resolve")):
        result = PackageInstaller().install(["react"])

    assert result.ok is False
    assert "exit 1" in result.detail
    assert "ERESOLVE" in result.detail


def test_missing_executable_is_reported():
    with patch("subprocess.run", side_effect=FileNotFoundError("npm")):
        result = PackageInstaller(command="pnpm").install(["react"])

    assert result.ok is False
    assert "pnpm not found" in result.detail


def test_timeout_is_reported():
    with patch("subprocess.run", side_effect=subprocess.TimeoutExpired(cmd="npm", timeout=1)):
        result = PackageInstaller(timeout=1).install(["react"])

    assert result.ok is False
    assert result.detail == "timeout"
