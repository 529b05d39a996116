"""
Summary: Error taxonomy for catalog listing, component loading and tree building.
Why: Give stores and the tree builder a shared vocabulary the CLI can report on.
"""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for every catalog failure surfaced to callers."""


class NotFoundError(CatalogError):
    """Raised when a component path has no configuration or diagram."""

    def __init__(self, path: str, resource: str) -> None:
        super().__init__(f"Component '{path}' has no {resource}")
        self.path: str = path
        self.resource: str = resource


class FormatError(CatalogError):
    """Raised when a component configuration fails to parse or validate."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Invalid configuration format for '{path}': {reason}")
        self.path: str = path
        self.reason: str = reason


class AmbiguousPathError(CatalogError):
    """Raised when a path is declared both as a component and as a folder prefix."""

    def __init__(self, path: str, conflicting_path: str) -> None:
        super().__init__(
            f"Path '{path}' is both a component and a folder of '{conflicting_path}'"
        )
        self.path: str = path
        self.conflicting_path: str = conflicting_path


class CatalogUnavailableError(CatalogError):
    """Raised when the catalog source cannot be listed or fetched."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Catalog unavailable: {reason}")
        self.reason: str = reason


__all__ = [
    "AmbiguousPathError",
    "CatalogError",
    "CatalogUnavailableError",
    "FormatError",
    "NotFoundError",
]
