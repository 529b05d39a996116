"""Display management for CLI interface."""

from sizeof.ui.cli.display.component import ComponentDisplay, column_header
from sizeof.ui.cli.display.tree import CatalogTreeDisplay

__all__ = ["CatalogTreeDisplay", "ComponentDisplay", "column_header"]
