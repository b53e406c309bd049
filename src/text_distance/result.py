"""ComparisonResult dataclass for pairwise comparison output.

This module provides the rich result type returned by compare() calls.
"""

from __future__ import annotations

from dataclasses import dataclass

from text_distance.algorithm.config import Metric

__all__ = ["ComparisonResult"]


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Rich result of a compare() call.

    Attributes:
        metric: The engine that produced the values.
        distance: Raw distance.  ``int`` edit count for Levenshtein,
            Damerau-Levenshtein and Hamming; ``float`` in [0, 1] for Jaccard
            and Jaro-Winkler.
        normalized_distance: Distance scaled into [0.0, 1.0].
        similarity: Raw similarity, same type as ``distance``.
        normalized_similarity: ``1.0 - normalized_distance``.
        computation_time_ms: Wall-clock duration of the comparison in milliseconds.
    """

    metric: Metric
    distance: int | float
    normalized_distance: float
    similarity: int | float
    normalized_similarity: float
    computation_time_ms: float
