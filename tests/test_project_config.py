"""Tests for xiom-ui.json handling and `init` scaffolding."""

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from xiom_ui.main import main
from xiom_ui.models.install_plan import InstallResult
from xiom_ui.models.project_config import Style
from xiom_ui.services.init_service import InitAnswers, InitError, UTILS_CONTENT, build_config, init_project
from xiom_ui.services.project_config_service import (
    ConfigInvalidError,
    ConfigMissingError,
    load_project_config,
)


def _installer(ok: bool = True) -> MagicMock:
    installer = MagicMock()
    installer.install.return_value = InstallResult(packages=["clsx"], ok=ok, detail="" if ok else "exit 1")
    return installer


def test_load_project_config(project: Path):
    config = load_project_config(project)

    assert config.style == Style.DEFAULT
    assert config.tailwind.css == "src/app/globals.css"
    assert config.aliases.components == "src/components/ui"
    assert config.aliases.utils == "src/lib/utils"


def test_missing_config_raises(tmp_path: Path):
    with pytest.raises(ConfigMissingError) as exc_info:
        load_project_config(tmp_path)

    assert "xiom-ui init" in str(exc_info.value)


def test_invalid_json_raises(tmp_path: Path):
    (tmp_path / "xiom-ui.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigInvalidError):
        load_project_config(tmp_path)


def test_unknown_style_raises(project: Path):
    path = project / "xiom-ui.json"
    data = json.loads(path.read_text(encoding="utf-8"))
    data["style"] = "brutalist"
    path.write_text(json.dumps(data), encoding="utf-8")

    with pytest.raises(ConfigInvalidError):
        load_project_config(project)


def test_build_config_strips_ts_extension():
    config = build_config(InitAnswers(utils_path="src/lib/utils.ts", style=Style.NEW_YORK))

    assert config.aliases.utils == "src/lib/utils"
    assert config.style == Style.NEW_YORK


def test_init_project_writes_scaffolding(tmp_path: Path):
    installer = _installer()

    config, result = init_project(InitAnswers(), cwd=tmp_path, installer=installer)

    assert result.ok is True
    data = json.loads((tmp_path / "xiom-ui.json").read_text(encoding="utf-8"))
    assert data == {
        "$schema": "https://xiom-ui.dev/schema.json",
        "style": "default",
        "tailwind": {"css": "src/app/globals.css"},
        "aliases": {"components": "src/components/ui", "utils": "src/lib/utils"},
    }
    assert (tmp_path / "src/lib/utils.ts").read_text(encoding="utf-8") == UTILS_CONTENT
    assert (tmp_path / "src/components/ui").is_dir()
    installer.install.assert_called_once_with(["clsx", "tailwind-merge", "class-variance-authority"])
    assert load_project_config(tmp_path) == config


def test_init_project_keeps_files_when_install_fails(tmp_path: Path):
    _config, result = init_project(InitAnswers(), cwd=tmp_path, installer=_installer(ok=False))

    assert result.ok is False
    assert (tmp_path / "xiom-ui.json").is_file()


def test_init_command_with_defaults(tmp_path: Path, capsys):
    with patch("subprocess.run", return_value=MagicMock(returncode=0, stdout="", stderr="")) as run:
        code = main(["--cwd", str(tmp_path), "init", "--yes"])

    assert code == 0
    assert load_project_config(tmp_path).aliases.utils == "src/lib/utils"
    assert run.call_args[0][0] == ["npm", "install", "clsx", "tailwind-merge", "class-variance-authority"]
    assert "Project initialized successfully!" in capsys.readouterr().out


def test_config_without_tailwind_loads(tmp_path: Path):
    (tmp_path / "xiom-ui.json").write_text(
        json.dumps({"aliases": {"components": "components/ui", "utils": "lib/utils"}}),
        encoding="utf-8",
    )

    config = load_project_config(tmp_path)

    assert config.tailwind is None
    assert config.aliases.components == "components/ui"
    assert "tailwind" not in config.to_json_dict()


def test_init_project_invalid_answer_raises_init_error(tmp_path: Path):
    installer = _installer()

    with pytest.raises(InitError):
        init_project(InitAnswers(utils_path=".ts"), cwd=tmp_path, installer=installer)

    assert not (tmp_path / "xiom-ui.json").exists()
    assert not installer.install.called
