"""Application service for browsing, searching and rendering the catalog.

This layer wires a catalog store into the tree builder, the search index and
the diagram engine so that the CLI (and tests) reuse one orchestration path.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Any, final

from sizeof.config.config import Config
from sizeof.config.paths import default_catalog_dir
from sizeof.config.settings import http_timeout, search_cache_size
from sizeof.features.catalog import (
    CatalogError,
    CatalogNode,
    CatalogStorePort,
    ComponentData,
    PathTreeBuilder,
)
from sizeof.features.diagram import TemplateSubstitutionEngine
from sizeof.features.search import CatalogSearchIndex, SearchHit
from sizeof.platform.catalog import FilesystemCatalogStore, GitHubCatalogStore
from sizeof.platform.http import RequestsHTTPClient
from sizeof.platform.logging import logger


class CatalogEvent(StrEnum):
    """Structured event names understood by ``CatalogRichHandler``."""

    LOAD_START = "catalog.load.start"
    LOAD_COMPLETE = "catalog.load.complete"
    LOAD_ERROR = "catalog.load.error"
    COMPONENT_SUCCESS = "component.load.success"
    COMPONENT_ERROR = "component.load.error"
    DIAGRAM_RENDER = "diagram.render"


@dataclass(frozen=True, slots=True)
class RenderedDiagram:
    """A component's diagram rendered for one selected row (or none)."""

    component: ComponentData
    row_index: int | None
    document: str


def create_catalog_store(
    config: Config,
    *,
    source: str | None = None,
    catalog_dir: Path | None = None,
) -> CatalogStorePort:
    """Build the store selected by ``source`` (falls back to ``config.source``)."""

    selected = source or config.source
    if selected == "local":
        root = catalog_dir or config.catalog_dir or default_catalog_dir()
        return FilesystemCatalogStore(root)
    if selected == "github":
        client = RequestsHTTPClient(timeout=http_timeout(config))
        return GitHubCatalogStore(
            config.github_owner,
            config.github_repo,
            config.github_branch,
            http_client=client,
        )
    raise ValueError(f"Unknown catalog source: {selected!r}")


@final
class CatalogService:
    """Application façade over one catalog store.

    The tree and its search index are built lazily on first use and kept for
    the lifetime of the service; component data is fetched on every request.
    """

    _store: CatalogStorePort
    _tree: list[CatalogNode] | None
    _index: CatalogSearchIndex | None

    def __init__(
        self,
        store: CatalogStorePort,
        *,
        strict: bool = True,
        cache_size: int | None = None,
        engine: TemplateSubstitutionEngine | None = None,
    ) -> None:
        self._store = store
        self._builder = PathTreeBuilder(strict=strict)
        self._engine = engine or TemplateSubstitutionEngine()
        self._cache_size = cache_size if cache_size is not None else search_cache_size(None)
        self._tree = None
        self._index = None

    @classmethod
    def from_config(
        cls,
        config: Config,
        *,
        source: str | None = None,
        catalog_dir: Path | None = None,
        strict: bool = True,
    ) -> "CatalogService":
        store = create_catalog_store(config, source=source, catalog_dir=catalog_dir)
        return cls(store, strict=strict, cache_size=search_cache_size(config))

    @property
    def store(self) -> CatalogStorePort:
        return self._store

    def load_tree(self) -> list[CatalogNode]:
        """Return the catalog tree, listing the store on first call."""

        if self._tree is not None:
            return self._tree

        source = type(self._store).__name__
        self._log(logging.INFO, CatalogEvent.LOAD_START, "Loading catalog", source=source)
        started = time.perf_counter()
        try:
            paths = self._store.list_component_paths()
            tree = self._builder.build(paths)
        except CatalogError as exc:
            self._log(
                logging.ERROR,
                CatalogEvent.LOAD_ERROR,
                "Catalog unavailable: %s",
                exc,
                source=source,
                error_message=str(exc),
            )
            raise

        self._tree = tree
        self._index = CatalogSearchIndex(tree, cache_size=self._cache_size)
        self._log(
            logging.INFO,
            CatalogEvent.LOAD_COMPLETE,
            "Catalog ready with %d components",
            len(paths),
            source=source,
            leaf_count=len(paths),
            duration_ms=(time.perf_counter() - started) * 1000,
        )
        return tree

    def search(self, query: str) -> list[CatalogNode]:
        """Filtered tree for ``query``; the full tree for a blank query."""

        return self._search_index().filter(query)

    def search_hits(self, query: str) -> list[SearchHit]:
        """Matching leaves with scores, in tree order."""

        return self._search_index().search(query)

    def load_component(self, path: str) -> ComponentData:
        """Fetch one component, logging success or failure."""

        started = time.perf_counter()
        try:
            component = self._store.load_component(path)
        except CatalogError as exc:
            self._log(
                logging.ERROR,
                CatalogEvent.COMPONENT_ERROR,
                "Component unavailable: %s",
                exc,
                component_path=path,
                error_message=str(exc),
            )
            raise

        self._log(
            logging.DEBUG,
            CatalogEvent.COMPONENT_SUCCESS,
            "Loaded component %s",
            component.path,
            component_path=component.path,
            row_count=len(component.config.rows),
            duration_ms=(time.perf_counter() - started) * 1000,
        )
        return component

    def render(self, path: str, row_index: int | None = 0) -> RenderedDiagram:
        """Render ``path``'s diagram for ``row_index``.

        The first row is selected by default. ``None`` renders with no row
        selected, which leaves the template text as authored.

        Raises:
            IndexError: If ``row_index`` is outside the component's rows.
        """
        component = self.load_component(path)
        row = None if row_index is None else component.config.row(row_index)
        document = self._engine.render_row(component.diagram, component.config, row)

        self._log(
            logging.DEBUG,
            CatalogEvent.DIAGRAM_RENDER,
            "Rendered diagram for %s",
            component.path,
            component_path=component.path,
            row_index=row_index,
        )
        return RenderedDiagram(component=component, row_index=row_index, document=document)

    def _search_index(self) -> CatalogSearchIndex:
        if self._index is None:
            _ = self.load_tree()
        assert self._index is not None
        return self._index

    @staticmethod
    def _log(
        level: int,
        event: CatalogEvent,
        message: str,
        *message_args: object,
        **context: Any,
    ) -> None:
        extra: dict[str, Any] = {"catalog_event": event.value}
        extra.update(context)
        logger.log(level, message, *message_args, extra=extra, stacklevel=2)


__all__ = [
    "CatalogEvent",
    "CatalogService",
    "RenderedDiagram",
    "create_catalog_store",
]
