"""
Summary: Build the nested catalog tree from flat slash-delimited component paths.
Why: The catalog source only lists component directories; the sidebar-style tree is derived.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import final

from sizeof.platform.logging import logger

from ..domain.errors import AmbiguousPathError
from ..domain.labels import format_label
from ..domain.models import CatalogNode


@dataclass(slots=True)
class _DraftNode:
    """Mutable node used while paths are being merged."""

    id: str
    component_path: str | None = None
    children: dict[str, _DraftNode] | None = field(default=None)

    def first_leaf_path(self) -> str | None:
        if self.children is None:
            return self.component_path
        for child in self.children.values():
            found = child.first_leaf_path()
            if found is not None:
                return found
        return None

    def freeze(self) -> CatalogNode:
        if self.children:
            return CatalogNode(
                id=self.id,
                display_name=format_label(self.id),
                children=tuple(child.freeze() for child in self.children.values()),
            )
        return CatalogNode(
            id=self.id,
            display_name=format_label(self.id),
            component_path=self.component_path,
        )


def normalize_component_path(path: str) -> str:
    """Strip surrounding slashes and drop empty segments (``/a//b/`` -> ``a/b``)."""

    return "/".join(segment for segment in path.strip().split("/") if segment)


@final
class PathTreeBuilder:
    """Merge component paths into a tree of folders and leaves."""

    _strict: bool

    def __init__(self, *, strict: bool = True) -> None:
        """Initialize the builder.

        Args:
            strict: Raise ``AmbiguousPathError`` when a path is both a component
                and a folder prefix of another path. When ``False`` the last
                path processed decides the node's leaf/folder status.
        """
        self._strict = strict

    def build(self, paths: Iterable[str]) -> list[CatalogNode]:
        """Build root nodes from ``paths``.

        Node order follows the first time each segment is encountered in
        ``paths``; siblings are matched by raw segment id.

        Args:
            paths: Slash-delimited component identifiers.

        Returns:
            list[CatalogNode]: Root nodes of the catalog tree.

        Raises:
            AmbiguousPathError: In strict mode, for prefix/leaf conflicts.
        """
        roots: dict[str, _DraftNode] = {}
        count = 0

        for raw_path in paths:
            path = normalize_component_path(raw_path)
            if not path:
                logger.debug("Ignoring blank component path %r", raw_path)
                continue
            self._insert(roots, path)
            count += 1

        tree = [node.freeze() for node in roots.values()]
        logger.debug("Built catalog tree with %d roots from %d paths", len(tree), count)
        return tree

    def _insert(self, roots: dict[str, _DraftNode], path: str) -> None:
        parts = path.split("/")
        level = roots

        for index, segment in enumerate(parts):
            node = level.get(segment)
            if node is None:
                node = _DraftNode(id=segment)
                level[segment] = node

            if index == len(parts) - 1:
                if node.children:
                    conflict = node.first_leaf_path() or path
                    self._resolve_conflict(path, conflict)
                    node.children = None
                node.component_path = path
                return

            if node.component_path is not None:
                self._resolve_conflict(node.component_path, path)
                node.component_path = None
            if node.children is None:
                node.children = {}
            level = node.children

    def _resolve_conflict(self, path: str, conflicting_path: str) -> None:
        if self._strict:
            raise AmbiguousPathError(path, conflicting_path)
        logger.warning(
            "Component path '%s' is also a folder of '%s'; keeping the later declaration",
            path,
            conflicting_path,
        )


def build_catalog_tree(paths: Iterable[str], *, strict: bool = True) -> list[CatalogNode]:
    """Convenience wrapper around ``PathTreeBuilder.build``."""

    return PathTreeBuilder(strict=strict).build(paths)


__all__ = ["PathTreeBuilder", "build_catalog_tree", "normalize_component_path"]
