"""src/sizeof/ui/cli/display/component.py
What: Render component details and size tables, alone or side by side.
Why: Give ``show`` and ``compare`` one table layout.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich import box
from rich.columns import Columns
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from sizeof.config.display import DisplaySettings, ThemePalette
from sizeof.features.catalog import ComponentColumn, ComponentData


def column_header(column: ComponentColumn) -> str:
    """Header text for ``column``: its label plus the unit in brackets."""

    if column.unit:
        return f"{column.label} ({column.unit})"
    return column.label


@final
class ComponentDisplay:
    """Render component records with the active theme palette."""

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

    def build_table(self, component: ComponentData, *, selected_row: int | None = None) -> Table:
        config = component.config
        table = Table(
            show_header=True,
            header_style=self.palette.header,
            box=box.SIMPLE_HEAD,
            highlight=False,
        )
        for column in config.columns:
            justify = "right" if column.type == "number" else "left"
            table.add_column(column_header(column), justify=justify)

        for index, row in enumerate(config.rows):
            values = row.raw_values()
            cells = [values.get(column.key, "") for column in config.columns]
            style = self.palette.accent if index == selected_row else None
            table.add_row(*cells, style=style)
        return table

    def build_panel(self, component: ComponentData) -> Panel:
        """Heading (name, standard, meta) above the size table."""

        config = component.config
        heading = Text(config.name, style=f"bold {self.palette.folder}")
        if config.standard:
            _ = heading.append(f"  {config.standard}", style=self.palette.accent)

        parts: list[RenderableType] = [heading]
        if config.meta is not None:
            parts.append(
                Text(f"id {config.meta.id} · version {config.meta.version}", style=self.palette.muted)
            )
        parts.append(self.build_table(component))
        return Panel(
            Group(*parts),
            title=component.path,
            title_align="left",
            border_style=self.palette.muted,
        )

    def show(self, component: ComponentData) -> None:
        self.console.print(self.build_panel(component))

    def show_side_by_side(
        self,
        components: Sequence[ComponentData],
        unavailable: Sequence[tuple[str, str]] = (),
    ) -> None:
        """Print several components next to each other.

        Args:
            components: Components that loaded successfully.
            unavailable: ``(path, reason)`` pairs rendered as placeholders.
        """
        panels: list[RenderableType] = [self.build_panel(component) for component in components]
        for path, reason in unavailable:
            panels.append(
                Panel(
                    Text(f"Component unavailable\n{reason}", style="red"),
                    title=path,
                    title_align="left",
                    border_style="red",
                )
            )
        self.console.print(Columns(panels, equal=False, expand=False))


__all__ = ["ComponentDisplay", "column_header"]
