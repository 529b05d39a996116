"""Catalog use cases: tree building, configuration parsing and store port."""

from .config_parser import build_component_config, parse_component_config
from .ports import CatalogStorePort
from .tree_builder import PathTreeBuilder, build_catalog_tree, normalize_component_path

__all__ = [
    "CatalogStorePort",
    "PathTreeBuilder",
    "build_catalog_tree",
    "build_component_config",
    "normalize_component_path",
    "parse_component_config",
]
