"""Search use cases."""

from .fuzzy_filter import CatalogSearchIndex, FuzzyTreeFilter, SearchHit, filter_tree

__all__ = ["CatalogSearchIndex", "FuzzyTreeFilter", "SearchHit", "filter_tree"]
