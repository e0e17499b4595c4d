"""Component registry client.

Plain JSON over HTTP GET:
- GET <base>         -> {"components": [{"name", "description"}, ...]}
- GET <base>/<name>  -> full component definition

404 is the only status with its own meaning. No retries, no caching.
"""

from __future__ import annotations

import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from xiom_ui.models.component import Component, RegistryEntry, RegistryIndex
from xiom_ui.services import settings

log = logging.getLogger(__name__)


class RegistryError(RuntimeError):
    pass


class ComponentNotFoundError(RegistryError):
    def __init__(self, name: str) -> None:
        super().__init__(f'Component "{name}" not found')
        self.name = name


class RegistryNetworkError(RegistryError):
    pass


class SchemaError(RegistryError):
    pass


class RegistryClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        user_agent: str = settings.USER_AGENT,
        timeout: float = 20.0,
    ) -> None:
        self._base_url = (base_url or settings.registry_url()).rstrip("/")
        self._timeout = timeout
        self._headers = {
            "Accept": "application/json",
            "User-Agent": user_agent,
        }

    @property
    def base_url(self) -> str:
        return self._base_url

    def _get(self, url: str) -> httpx.Response:
        try:
            with httpx.Client(timeout=self._timeout, headers=self._headers, follow_redirects=True) as client:
                return client.get(url)
        except httpx.HTTPError as e:
            raise RegistryNetworkError(f"GET {url} failed: {e}") from e

    def get_json(self, url: str, name: Optional[str] = None) -> Any:
        """GET url and decode JSON. name is used for the not-found error."""
        r = self._get(url)
        log.debug("GET %s -> %s", url, r.status_code)
        if r.status_code == 404 and name is not None:
            raise ComponentNotFoundError(name)
        if r.status_code < 200 or r.status_code >= 300:
            raise RegistryNetworkError(f"Registry error {r.status_code} for {url}: {r.text[:200]}")
        try:
            return r.json()
        except ValueError as e:
            raise SchemaError(f"Registry response for {url} was not JSON: {r.text[:200]}") from e

    def list_components(self) -> list[RegistryEntry]:
        data = self.get_json(self._base_url)
        try:
            return list(RegistryIndex.model_validate(data).components)
        except ValidationError as e:
            raise SchemaError(f"Malformed registry index: {e.error_count()} validation error(s)") from e

    def get_component(self, name: str) -> Component:
        url = f"{self._base_url}/{quote(name, safe='')}"
        data = self.get_json(url, name=name)
        if not isinstance(data, dict):
            raise SchemaError(f"Malformed component {name!r}: expected object, got {type(data).__name__}")
        try:
            return Component.model_validate(data)
        except ValidationError as e:
            raise SchemaError(f"Malformed component {name!r}: {e.error_count()} validation error(s)") from e
