"""Public API functions for text-distance.

This module provides the user-facing functions: compare, distance,
normalized_distance, similarity, normalized_similarity and is_similar.  Each
call creates a fresh StringComparator to guarantee zero global state mutation
between calls.
"""

from __future__ import annotations

from text_distance.algorithm.config import DistanceConfig
from text_distance.comparator import StringComparator
from text_distance.result import ComparisonResult

__all__ = [
    "compare",
    "distance",
    "is_similar",
    "normalized_distance",
    "normalized_similarity",
    "similarity",
]


def compare(
    src: str,
    tar: str,
    config: DistanceConfig | None = None,
) -> ComparisonResult:
    """Compare two strings and return a rich ComparisonResult.

    Creates a fresh ``StringComparator`` per call to guarantee zero global state
    mutation between calls.

    Args:
        src:    Source string.
        tar:    Target string.
        config: Metric selection and mode flags. Defaults to ``DistanceConfig()``
                (Levenshtein) when None.

    Returns:
        A ``ComparisonResult`` with distance, normalized_distance, similarity,
        normalized_similarity and computation_time_ms populated.

    Raises:
        LengthMismatchError: Hamming metric with inputs of unequal length.
        SequenceTooShortError: Jaccard q-grams on an input shorter than ``qval``.
    """
    comparator = StringComparator(config=config, max_cache_size=0)
    return comparator.compare(src, tar)


def distance(
    src: str,
    tar: str,
    config: DistanceConfig | None = None,
) -> int | float:
    """Return the raw distance: an edit count, or a ratio for Jaccard/Jaro-Winkler."""
    return compare(src, tar, config=config).distance


def normalized_distance(
    src: str,
    tar: str,
    config: DistanceConfig | None = None,
) -> float:
    """Return the distance scaled into [0.0, 1.0]."""
    return compare(src, tar, config=config).normalized_distance


def similarity(
    src: str,
    tar: str,
    config: DistanceConfig | None = None,
) -> int | float:
    """Return the raw similarity: ``max(len) - distance`` or ``1 - distance``."""
    return compare(src, tar, config=config).similarity


def normalized_similarity(
    src: str,
    tar: str,
    config: DistanceConfig | None = None,
) -> float:
    """Return ``1.0 - normalized_distance``. 1.0 means identical."""
    return compare(src, tar, config=config).normalized_similarity


def is_similar(
    src: str,
    tar: str,
    threshold: float = 0.85,
    config: DistanceConfig | None = None,
) -> bool:
    """Return True if the two strings are at least ``threshold`` similar.

    Args:
        src:       Source string.
        tar:       Target string.
        threshold: Minimum normalized similarity. Must be in [0.0, 1.0].
                   Defaults to 0.85.
        config:    Metric selection and mode flags. Defaults to
                   ``DistanceConfig()`` when None.

    Returns:
        True if ``compare(src, tar, config).normalized_similarity >= threshold``.

    Raises:
        ValueError: If ``threshold`` is outside [0.0, 1.0].
    """
    if not 0.0 <= threshold <= 1.0:
        msg = f"threshold must be in [0, 1], got {threshold}"
        raise ValueError(msg)
    return compare(src, tar, config=config).normalized_similarity >= threshold
