"""Catalog store adapters implementing ``CatalogStorePort``."""

from .filesystem_store import FilesystemCatalogStore
from .github_store import GitHubCatalogStore

__all__ = ["FilesystemCatalogStore", "GitHubCatalogStore"]
