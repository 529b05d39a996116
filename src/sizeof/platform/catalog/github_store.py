"""Where: src/sizeof/platform/catalog/github_store.py
What: Catalog store backed by a GitHub repository (tree API + raw file URLs).
Why: The published catalog lives in a public repository and is read per request.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast, final

from sizeof.config.settings import (
    CONFIG_FILE_NAME,
    DIAGRAM_FILE_NAME,
    GITHUB_API_BASE,
    GITHUB_RAW_BASE,
)
from sizeof.features.catalog import (
    CatalogUnavailableError,
    ComponentData,
    NotFoundError,
    normalize_component_path,
    parse_component_config,
)
from sizeof.platform.http import HTTPClient, HTTPResult, RequestsHTTPClient
from sizeof.platform.logging import logger

_CONFIG_SUFFIX = f"/{CONFIG_FILE_NAME}"


@final
class GitHubCatalogStore:
    """List and fetch components from ``owner/repo`` at ``branch``."""

    owner: str
    repo: str
    branch: str

    def __init__(
        self,
        owner: str,
        repo: str,
        branch: str = "main",
        http_client: HTTPClient | None = None,
    ) -> None:
        self.owner = owner
        self.repo = repo
        self.branch = branch
        self._http = http_client or RequestsHTTPClient()

    @property
    def tree_url(self) -> str:
        return f"{GITHUB_API_BASE}/repos/{self.owner}/{self.repo}/git/trees/{self.branch}"

    def raw_url(self, component_path: str, file_name: str) -> str:
        return f"{GITHUB_RAW_BASE}/{self.owner}/{self.repo}/{self.branch}/{component_path}/{file_name}"

    def list_component_paths(self) -> tuple[str, ...]:
        """Return directories holding a ``config.yaml`` in repository tree order."""

        result = self._http.get(self.tree_url, {"recursive": "1"})
        if not result.ok:
            raise CatalogUnavailableError(
                f"failed to fetch repository tree (status={result.status})"
            )

        payload = result.json()
        if not isinstance(payload, Mapping) or not isinstance(payload.get("tree"), list):
            raise CatalogUnavailableError("repository tree response has no 'tree' list")

        listing = cast(Mapping[str, Any], payload)
        if listing.get("truncated"):
            logger.warning(
                "Repository tree for %s/%s is truncated; some components may be missing",
                self.owner,
                self.repo,
            )

        paths: list[str] = []
        for entry in cast(list[object], listing["tree"]):
            if not isinstance(entry, Mapping):
                continue
            item = cast(Mapping[str, Any], entry)
            item_path = item.get("path")
            if not isinstance(item_path, str) or item.get("type", "blob") != "blob":
                continue
            if not item_path.endswith(_CONFIG_SUFFIX):
                continue
            component_path = normalize_component_path(item_path[: -len(_CONFIG_SUFFIX)])
            if component_path:
                paths.append(component_path)

        return tuple(dict.fromkeys(paths))

    def load_component(self, path: str) -> ComponentData:
        """Fetch configuration and diagram for ``path``."""

        component_path = normalize_component_path(path)
        if not component_path:
            raise NotFoundError(path, CONFIG_FILE_NAME)

        config_result = self._http.get(self.raw_url(component_path, CONFIG_FILE_NAME))
        diagram_result = self._http.get(self.raw_url(component_path, DIAGRAM_FILE_NAME))

        config_text = self._require(config_result, component_path, CONFIG_FILE_NAME)
        diagram_text = self._require(diagram_result, component_path, DIAGRAM_FILE_NAME)

        config = parse_component_config(config_text, component_path)
        return ComponentData(path=component_path, config=config, diagram=diagram_text)

    @staticmethod
    def _require(result: HTTPResult, component_path: str, file_name: str) -> str:
        if result.ok and result.text is not None:
            return result.text
        if result.status == 404:
            raise NotFoundError(component_path, file_name)
        raise CatalogUnavailableError(
            f"failed to fetch {file_name} for '{component_path}' (status={result.status})"
        )


__all__ = ["GitHubCatalogStore"]
