"""Ports for catalog use cases.

Where: features/catalog/usecases.
What: Protocol describing the catalog source consumed by tree building and rendering.
Why: Keep the core free of I/O so local and GitHub catalogs plug in interchangeably.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..domain.models import ComponentData


@runtime_checkable
class CatalogStorePort(Protocol):
    """Read-only access to a catalog of component directories."""

    def list_component_paths(self) -> tuple[str, ...]:
        """Return leaf identifiers in listing order, without duplicates."""
        ...

    def load_component(self, path: str) -> ComponentData:
        """Return the configuration and diagram stored under ``path``.

        Raises ``NotFoundError`` when either file is missing and
        ``FormatError`` when the configuration does not validate.
        """
        ...
