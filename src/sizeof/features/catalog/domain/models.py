"""
Summary: Catalog tree nodes and component configuration records.
Why: Give the tree builder, search filter and diagram renderer one set of immutable types.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Literal, TypeAlias, final

from typing_extensions import override

from .values import CellValue, coerce_value

DiagramDocument: TypeAlias = str
ColumnType: TypeAlias = Literal["string", "number"]


@final
@dataclass(frozen=True, slots=True)
class CatalogNode:
    """One position in the catalog tree.

    A leaf carries ``component_path`` and no children; a folder carries one
    or more children and no ``component_path``.
    """

    id: str
    display_name: str
    component_path: str | None = None
    children: tuple[CatalogNode, ...] | None = None

    @property
    def is_leaf(self) -> bool:
        return self.component_path is not None and not self.children

    @property
    def is_folder(self) -> bool:
        return bool(self.children)

    def iter_leaves(self) -> Iterator[CatalogNode]:
        """Yield leaves below (or at) this node in tree order."""

        if self.children:
            for child in self.children:
                yield from child.iter_leaves()
        elif self.component_path is not None:
            yield self


def iter_leaves(tree: list[CatalogNode] | tuple[CatalogNode, ...]) -> Iterator[CatalogNode]:
    """Yield every leaf of a forest in depth-first tree order."""

    for node in tree:
        yield from node.iter_leaves()


def find_node(tree: list[CatalogNode] | tuple[CatalogNode, ...], path: str) -> CatalogNode | None:
    """Follow raw segment ids from the roots; ``None`` when the path is absent."""

    segments = [segment for segment in path.split("/") if segment]
    if not segments:
        return None

    level: tuple[CatalogNode, ...] | list[CatalogNode] | None = tree
    node: CatalogNode | None = None
    for segment in segments:
        if not level:
            return None
        node = next((child for child in level if child.id == segment), None)
        if node is None:
            return None
        level = node.children
    return node


@dataclass(frozen=True, slots=True)
class ComponentColumn:
    """Column descriptor of a component table."""

    key: str
    label: str
    unit: str | None = None
    type: ColumnType | None = None


@dataclass(frozen=True, slots=True)
class ComponentMeta:
    id: str
    version: str


@final
class ComponentRow(Mapping[str, CellValue]):
    """One catalog entry (for example one screw size), keyed by column key."""

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, object] | None = None) -> None:
        self._values: dict[str, CellValue] = {
            str(key): coerce_value(value) for key, value in (values or {}).items()
        }

    @override
    def __getitem__(self, key: str) -> CellValue:
        return self._values[key]

    @override
    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    @override
    def __len__(self) -> int:
        return len(self._values)

    @override
    def __repr__(self) -> str:
        return f"ComponentRow({self.raw_values()!r})"

    def raw_values(self) -> dict[str, str]:
        """Plain string form of every cell."""

        return {key: value.raw() for key, value in self._values.items()}


@dataclass(frozen=True, slots=True)
class ComponentConfig:
    """A component's full record: identity, columns and rows."""

    name: str
    standard: str
    columns: tuple[ComponentColumn, ...]
    rows: tuple[ComponentRow, ...]
    meta: ComponentMeta | None = None

    def units(self) -> dict[str, str]:
        """Map column key to unit for columns declaring a non-empty unit."""

        return {column.key: column.unit for column in self.columns if column.unit}

    def row(self, index: int) -> ComponentRow:
        """Return the row at ``index``; raises ``IndexError`` when out of range."""

        if index < 0:
            raise IndexError(f"Row index must not be negative: {index}")
        return self.rows[index]


@dataclass(frozen=True, slots=True)
class ComponentData:
    """Configuration and diagram fetched for one component path."""

    path: str
    config: ComponentConfig
    diagram: DiagramDocument


__all__ = [
    "CatalogNode",
    "ColumnType",
    "ComponentColumn",
    "ComponentConfig",
    "ComponentData",
    "ComponentMeta",
    "ComponentRow",
    "DiagramDocument",
    "find_node",
    "iter_leaves",
]
