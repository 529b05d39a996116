"""
Summary: Approximate string scoring for catalog leaves (0 = perfect, 1 = unrelated).
Why: Searches must tolerate typos and substrings without matching unrelated names.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Final, final

from rapidfuzz.distance import Levenshtein
from rapidfuzz.utils import default_process

from sizeof.config.settings import (
    SEARCH_FIELD_WEIGHTS,
    SEARCH_LOCATION_DISTANCE,
    SEARCH_THRESHOLD,
)
from sizeof.features.catalog import CatalogNode

# Stand-in for a perfect field score so the weighted product stays non-zero.
_EPSILON: Final[float] = 0.001


def normalize_text(text: str) -> str:
    """Lowercase, replace punctuation (``/``, ``_``, ``-``) with spaces, trim."""

    return default_process(text)


@dataclass(frozen=True, slots=True)
class LeafScore:
    """Outcome of scoring one leaf against a query."""

    field_scores: dict[str, float] = field(default_factory=dict)
    score: float = 1.0
    matched: bool = False


@final
class FuzzyScorer:
    """Score leaves field by field with a location-aware edit distance.

    A field's score is the best ``errors / len(query) + offset / distance``
    over windows of the field text around the query length, where
    ``errors`` is the Levenshtein distance between the query and the
    window. A field hits when its score is within ``threshold``; a leaf
    matches when any weighted field hits.
    """

    threshold: float
    distance: int
    weights: dict[str, float]

    def __init__(
        self,
        threshold: float = SEARCH_THRESHOLD,
        distance: int = SEARCH_LOCATION_DISTANCE,
        weights: Mapping[str, float] | None = None,
    ) -> None:
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"threshold must be within [0, 1]; got {threshold}")
        if distance <= 0:
            raise ValueError(f"distance must be positive; got {distance}")
        self.threshold = threshold
        self.distance = distance
        self.weights = dict(weights if weights is not None else SEARCH_FIELD_WEIGHTS)

    def score_text(self, query: str, text: str) -> float:
        """Score an already-normalized ``query`` against raw field ``text``."""

        target = normalize_text(text)
        length = len(query)
        if not length or not target:
            return 1.0

        best = 1.0
        for start in range(len(target)):
            proximity = start / self.distance
            if proximity >= best:
                break
            for width in (length - 1, length, length + 1):
                if width <= 0:
                    continue
                window = target[start : start + width]
                errors = Levenshtein.distance(query, window)
                best = min(best, errors / length + proximity)
            if best == 0.0:
                break
        return min(best, 1.0)

    def score_leaf(self, query: str, node: CatalogNode) -> LeafScore:
        """Score ``node`` against a normalized ``query``."""

        fields = {
            "display_name": node.display_name,
            "component_path": node.component_path or "",
        }
        field_scores: dict[str, float] = {}
        combined = 1.0
        matched = False
        for name, weight in self.weights.items():
            value = fields.get(name)
            if value is None:
                continue
            field_score = self.score_text(query, value)
            field_scores[name] = field_score
            if field_score <= self.threshold:
                matched = True
                combined *= math.pow(max(field_score, _EPSILON), weight)

        return LeafScore(
            field_scores=field_scores,
            score=combined if matched else 1.0,
            matched=matched,
        )


__all__ = ["FuzzyScorer", "LeafScore", "normalize_text"]
