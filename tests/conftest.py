"""Pytest configuration and fixtures."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from xiom_ui.models.component import Component  # noqa: E402
from xiom_ui.services.registry_client import ComponentNotFoundError, RegistryNetworkError  # noqa: E402

REGISTRY = "https://registry.test/api/registry"


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # Tests must never reach the production registry.
    monkeypatch.setenv("REGISTRY_URL", REGISTRY)


class FakeRegistry:
    """In-memory ComponentSource. Names in `broken` raise a network error."""

    def __init__(self, components: dict[str, dict], broken: set[str] | None = None) -> None:
        self._components = components
        self._broken = broken or set()
        self.calls: list[str] = []

    def get_component(self, name: str) -> Component:
        self.calls.append(name)
        if name in self._broken:
            raise RegistryNetworkError(f"GET {name} failed: connection reset")
        if name not in self._components:
            raise ComponentNotFoundError(name)
        return Component.model_validate({"name": name, **self._components[name]})


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Initialized project directory with the default xiom-ui.json."""
    config = {
        "$schema": "https://xiom-ui.dev/schema.json",
        "style": "default",
        "tailwind": {"css": "src/app/globals.css"},
        "aliases": {"components": "src/components/ui", "utils": "src/lib/utils"},
    }
    (tmp_path / "xiom-ui.json").write_text(json.dumps(config, indent=2), encoding="utf-8")
    return tmp_path
