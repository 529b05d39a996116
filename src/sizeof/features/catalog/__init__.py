# Path: `src/sizeof/features/catalog/__init__.py`
# Summary: Export catalog domain types, errors and use cases.
# Why: Provide a stable import surface for adapters, services and tests.

from .domain.errors import (
    AmbiguousPathError,
    CatalogError,
    CatalogUnavailableError,
    FormatError,
    NotFoundError,
)
from .domain.labels import format_label
from .domain.models import (
    CatalogNode,
    ComponentColumn,
    ComponentConfig,
    ComponentData,
    ComponentMeta,
    ComponentRow,
    DiagramDocument,
    find_node,
    iter_leaves,
)
from .domain.values import (
    CellValue,
    NumberValue,
    PlainValue,
    StringValue,
    coerce_value,
    raw_text,
)
from .usecases import (
    CatalogStorePort,
    PathTreeBuilder,
    build_catalog_tree,
    build_component_config,
    normalize_component_path,
    parse_component_config,
)

__all__ = [
    "AmbiguousPathError",
    "CatalogError",
    "CatalogNode",
    "CatalogStorePort",
    "CatalogUnavailableError",
    "CellValue",
    "ComponentColumn",
    "ComponentConfig",
    "ComponentData",
    "ComponentMeta",
    "ComponentRow",
    "DiagramDocument",
    "FormatError",
    "NotFoundError",
    "NumberValue",
    "PathTreeBuilder",
    "PlainValue",
    "StringValue",
    "build_catalog_tree",
    "build_component_config",
    "coerce_value",
    "find_node",
    "format_label",
    "iter_leaves",
    "normalize_component_path",
    "parse_component_config",
    "raw_text",
]
