"""src/sizeof/ui/cli/display/tree.py
What: Build Rich trees and hit lists for catalog browsing and search.
Why: Present the folder hierarchy the same way for full and filtered trees.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from sizeof.config.display import DisplaySettings, ThemePalette
from sizeof.features.catalog import CatalogNode
from sizeof.features.search import SearchHit


@final
class CatalogTreeDisplay:
    """Render catalog trees with the active theme palette."""

    console: Console
    palette: ThemePalette

    def __init__(self, settings: DisplaySettings, console: Console | None = None) -> None:
        self.console = console or Console()
        self.palette = settings.palette
        self._unsubscribe = settings.subscribe(self._on_theme_change)

    def close(self) -> None:
        self._unsubscribe()

    def _on_theme_change(self, settings: DisplaySettings) -> None:
        self.palette = settings.palette

    def build_tree(self, nodes: Sequence[CatalogNode], title: str = "Catalog") -> Tree:
        """Build a Rich tree mirroring ``nodes`` in catalog order."""

        root = Tree(Text(f"📚 {title}", style=self.palette.header), guide_style=self.palette.muted)
        for node in nodes:
            self._add_node(root, node)
        return root

    def _add_node(self, parent: Tree, node: CatalogNode) -> None:
        if node.children:
            branch = parent.add(Text(f"📁 {node.display_name}", style=self.palette.folder))
            for child in node.children:
                self._add_node(branch, child)
            return

        label = Text(node.display_name, style=self.palette.leaf)
        if node.component_path:
            _ = label.append(f"  {node.component_path}", style=self.palette.muted)
        _ = parent.add(label)

    def show_tree(self, nodes: Sequence[CatalogNode], title: str = "Catalog") -> None:
        if not nodes:
            self.console.print(Text("No components found.", style=self.palette.muted))
            return
        self.console.print(self.build_tree(nodes, title))

    def show_hits(self, hits: Sequence[SearchHit], query: str) -> None:
        """Print matching components with their scores (0 is a perfect match)."""

        if not hits:
            self.console.print(Text(f"No components match {query!r}.", style=self.palette.muted))
            return

        table = Table(
            title=f"Matches for {query!r}",
            show_header=True,
            header_style=self.palette.header,
            box=box.SIMPLE_HEAD,
        )
        table.add_column("Component", style=self.palette.leaf)
        table.add_column("Path", style=self.palette.muted)
        table.add_column("Score", justify="right", style=self.palette.accent)
        for hit in hits:
            table.add_row(hit.node.display_name, hit.node.component_path or "", f"{hit.score:.3f}")
        self.console.print(table)


__all__ = ["CatalogTreeDisplay"]
