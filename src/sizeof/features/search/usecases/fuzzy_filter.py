"""
Summary: Filter the catalog tree down to fuzzy-matching leaves and their ancestors.
Why: Search results must keep the folder hierarchy stable and in catalog order.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import final

from sizeof.config.settings import SEARCH_CACHE_SIZE_DEFAULT
from sizeof.features.catalog import CatalogNode, iter_leaves
from sizeof.platform.logging import logger

from ..domain.scoring import FuzzyScorer, normalize_text


@dataclass(frozen=True, slots=True)
class SearchHit:
    """A matching leaf with its combined and per-field scores."""

    node: CatalogNode
    score: float
    field_scores: dict[str, float]


@final
class FuzzyTreeFilter:
    """Stateless tree filter driven by a ``FuzzyScorer``."""

    _scorer: FuzzyScorer

    def __init__(self, scorer: FuzzyScorer | None = None) -> None:
        self._scorer = scorer or FuzzyScorer()

    def search(self, tree: Sequence[CatalogNode], query: str) -> list[SearchHit]:
        """Return matching leaves in tree order (not sorted by score)."""

        normalized = normalize_text(query)
        if not normalized:
            return []

        hits: list[SearchHit] = []
        for leaf in iter_leaves(tuple(tree)):
            result = self._scorer.score_leaf(normalized, leaf)
            if result.matched:
                hits.append(
                    SearchHit(node=leaf, score=result.score, field_scores=result.field_scores)
                )
        return hits

    def filter(self, tree: list[CatalogNode], query: str) -> list[CatalogNode]:
        """Return the minimal sub-tree whose leaves match ``query``.

        An empty or whitespace-only query returns ``tree`` itself. Matched
        leaves are reused as-is; retained folders are new nodes holding only
        their retained children. ``tree`` is never modified.
        """
        if not query.strip():
            return tree

        hits = self.search(tree, query)
        matched = {id(hit.node) for hit in hits}
        filtered = _prune(tree, matched)
        logger.debug("Query %r matched %d components", query, len(hits))
        return filtered


def _prune(nodes: Sequence[CatalogNode], matched: set[int]) -> list[CatalogNode]:
    kept: list[CatalogNode] = []
    for node in nodes:
        if node.children:
            children = _prune(node.children, matched)
            if children:
                kept.append(replace(node, children=tuple(children)))
        elif id(node) in matched:
            kept.append(node)
    return kept


@final
class CatalogSearchIndex:
    """Memoising wrapper that filters one fixed tree by query string."""

    tree: list[CatalogNode]

    def __init__(
        self,
        tree: list[CatalogNode],
        *,
        tree_filter: FuzzyTreeFilter | None = None,
        cache_size: int = SEARCH_CACHE_SIZE_DEFAULT,
    ) -> None:
        self.tree = tree
        self._filter = tree_filter or FuzzyTreeFilter()
        self._cached_filter = lru_cache(maxsize=cache_size)(self._filter_uncached)

    def filter(self, query: str) -> list[CatalogNode]:
        """Same result as ``FuzzyTreeFilter.filter(self.tree, query)``."""

        if not query.strip():
            return self.tree
        return list(self._cached_filter(query))

    def search(self, query: str) -> list[SearchHit]:
        return self._filter.search(self.tree, query)

    def _filter_uncached(self, query: str) -> tuple[CatalogNode, ...]:
        return tuple(self._filter.filter(self.tree, query))


def filter_tree(tree: list[CatalogNode], query: str) -> list[CatalogNode]:
    """Convenience wrapper around ``FuzzyTreeFilter().filter``."""

    return FuzzyTreeFilter().filter(tree, query)


__all__ = ["CatalogSearchIndex", "FuzzyTreeFilter", "SearchHit", "filter_tree"]
