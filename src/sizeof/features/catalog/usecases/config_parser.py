"""
Summary: Parse and validate component ``config.yaml`` payloads into typed records.
Why: Every catalog store must reject the same malformed inputs with ``FormatError``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final, cast

import yaml

from ..domain.errors import FormatError
from ..domain.models import (
    ColumnType,
    ComponentColumn,
    ComponentConfig,
    ComponentMeta,
    ComponentRow,
)

_HTML_PREFIXES: Final[tuple[str, ...]] = ("<!doctype", "<html")
_COLUMN_TYPES: Final[tuple[str, ...]] = ("string", "number")


def parse_component_config(text: str, path: str) -> ComponentConfig:
    """Parse a YAML configuration document.

    Args:
        text: Raw ``config.yaml`` contents.
        path: Component path, used in error messages.

    Returns:
        ComponentConfig: Validated configuration.

    Raises:
        FormatError: If the payload is HTML, invalid YAML, or misses the
            required non-empty ``columns`` and ``data`` lists.
    """
    stripped = text.lstrip()
    if stripped[:9].lower().startswith(_HTML_PREFIXES):
        raise FormatError(path, "received an HTML page instead of YAML")

    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise FormatError(path, f"YAML syntax error: {exc}") from exc

    if not isinstance(document, Mapping):
        raise FormatError(path, "top level must be a mapping")

    return build_component_config(cast(Mapping[str, Any], document), path)


def build_component_config(document: Mapping[str, Any], path: str) -> ComponentConfig:
    """Validate an already-decoded configuration mapping."""

    columns = _parse_columns(document.get("columns"), path)
    rows = _parse_rows(document.get("data"), path)

    return ComponentConfig(
        name=_optional_text(document.get("name")),
        standard=_optional_text(document.get("standard")),
        columns=columns,
        rows=rows,
        meta=_parse_meta(document.get("meta"), path),
    )


def _parse_columns(raw: object, path: str) -> tuple[ComponentColumn, ...]:
    if not isinstance(raw, list) or not raw:
        raise FormatError(path, "'columns' must be a non-empty list")

    columns: list[ComponentColumn] = []
    for index, entry in enumerate(cast(list[object], raw)):
        if not isinstance(entry, Mapping):
            raise FormatError(path, f"column {index} must be a mapping")
        column = cast(Mapping[str, Any], entry)

        key = column.get("key")
        if not isinstance(key, str) or not key.strip():
            raise FormatError(path, f"column {index} needs a non-empty 'key'")

        column_type = column.get("type")
        if column_type is not None and column_type not in _COLUMN_TYPES:
            raise FormatError(
                path, f"column '{key}' has unsupported type {column_type!r}"
            )

        unit = column.get("unit")
        columns.append(
            ComponentColumn(
                key=key,
                label=_optional_text(column.get("label")) or key,
                unit=str(unit) if unit not in (None, "") else None,
                type=cast(ColumnType | None, column_type),
            )
        )
    return tuple(columns)


def _parse_rows(raw: object, path: str) -> tuple[ComponentRow, ...]:
    if not isinstance(raw, list) or not raw:
        raise FormatError(path, "'data' must be a non-empty list of rows")

    rows: list[ComponentRow] = []
    for index, entry in enumerate(cast(list[object], raw)):
        if not isinstance(entry, Mapping):
            raise FormatError(path, f"row {index} must be a mapping")
        rows.append(ComponentRow(cast(Mapping[str, object], entry)))
    return tuple(rows)


def _parse_meta(raw: object, path: str) -> ComponentMeta | None:
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        raise FormatError(path, "'meta' must be a mapping")
    meta = cast(Mapping[str, Any], raw)
    return ComponentMeta(
        id=_optional_text(meta.get("id")),
        version=_optional_text(meta.get("version")),
    )


def _optional_text(value: object) -> str:
    return "" if value is None else str(value)


__all__ = ["build_component_config", "parse_component_config"]
