"""Rich console handler with styling for structured catalog events.

Where: platform/logging/handlers.py
What: Render ``catalog_event`` log records with icons, colours and compact component paths.
Why: Keep console output readable while the file handler receives plain records.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text
from typing_extensions import override


class CatalogRichHandler(RichHandler):
    """Rich handler that highlights catalog events and component paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "catalog.load.start": ("🔎", "cyan"),
        "catalog.load.complete": ("✅", "green"),
        "catalog.load.error": ("❌", "red"),
        "component.load.success": ("📐", "green"),
        "component.load.error": ("⛔", "red"),
        "diagram.render": ("🖊", "magenta"),
    }
    _EVENT_PREFIXES: ClassVar[dict[str, str]] = {
        "catalog.load.start": "Loading catalog",
        "catalog.load.complete": "Catalog ready",
        "catalog.load.error": "Catalog unavailable",
        "component.load.success": "Loaded ",
        "component.load.error": "Component unavailable ",
        "diagram.render": "Rendered ",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_component_path(self, path: str) -> Text:
        """Format a slash-joined component path, keeping only the trailing segments."""

        parts = [part for part in path.split("/") if part]
        truncated = len(parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            parts = parts[-self._PATH_SEGMENT_LIMIT:]

        text = Text()
        if truncated:
            _ = text.append("…/", style=Style(color="magenta"))
        for index, part in enumerate(parts):
            if index:
                _ = text.append("/", style=Style(color="magenta"))
            _ = text.append(part, style=Style(color="white", bold=True))
        if not parts:
            _ = text.append(".", style=Style(color="white"))
        return text

    def _render_catalog_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured catalog events with dedicated styling."""

        event = getattr(record, "catalog_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        prefix = self._EVENT_PREFIXES.get(event)
        if prefix:
            _ = body.append(prefix)

        component_path = getattr(record, "component_path", None)
        if component_path:
            _ = body.append_text(self._format_component_path(str(component_path)))

        details: list[str] = []
        source = getattr(record, "source", None)
        if source:
            details.append(f"source={source}")
        leaves = getattr(record, "leaf_count", None)
        if isinstance(leaves, int):
            details.append(f"components={leaves}")
        rows = getattr(record, "row_count", None)
        if isinstance(rows, int):
            details.append(f"rows={rows}")
        row_index = getattr(record, "row_index", None)
        if isinstance(row_index, int):
            details.append(f"row={row_index}")
        duration_ms = getattr(record, "duration_ms", None)
        if isinstance(duration_ms, (int, float)):
            details.append(f"{duration_ms:.2f} ms")
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for catalog events."""

        catalog_text = self._render_catalog_message(record)
        if catalog_text is not None:
            return catalog_text
        return super().render_message(record, message)


__all__ = ["CatalogRichHandler"]
