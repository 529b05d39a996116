"""Application services."""

from .catalog_service import (
    CatalogEvent,
    CatalogService,
    RenderedDiagram,
    create_catalog_store,
)

__all__ = ["CatalogEvent", "CatalogService", "RenderedDiagram", "create_catalog_store"]
