"""Public API for the search feature."""

from .domain.scoring import FuzzyScorer, LeafScore, normalize_text
from .usecases.fuzzy_filter import (
    CatalogSearchIndex,
    FuzzyTreeFilter,
    SearchHit,
    filter_tree,
)

__all__ = [
    "CatalogSearchIndex",
    "FuzzyScorer",
    "FuzzyTreeFilter",
    "LeafScore",
    "SearchHit",
    "filter_tree",
    "normalize_text",
]
