"""Derived metrics shared by every engine.

Each engine computes a single raw ``distance``.  The other three queries are
arithmetic over that value and the input lengths, defined once here:

Count-based engines (Levenshtein, Damerau-Levenshtein, Hamming)::

    normalized_distance   = distance / max(len(src), len(tar))   (0.0 if both empty)
    similarity            = max(len(src), len(tar)) - distance
    normalized_similarity = 1 - normalized_distance

Ratio-based engines (Jaccard, Jaro-Winkler), whose distance is already in
[0, 1]::

    normalized_distance   = distance
    similarity            = 1 - distance
    normalized_similarity = 1 - normalized_distance
"""

from __future__ import annotations

__all__ = ["CountMetricMixin", "RatioMetricMixin", "normalize_distance"]


def normalize_distance(distance: int, n_src: int, n_tar: int) -> float:
    """Scale a raw edit count into [0, 1] by the longer input length.

    Args:
        distance: Raw edit count, bounded above by ``max(n_src, n_tar)``.
        n_src:    Code-point length of the source sequence.
        n_tar:    Code-point length of the target sequence.

    Returns:
        ``distance / max(n_src, n_tar)``, or 0.0 when both inputs are empty.
    """
    maximum = max(n_src, n_tar)
    if maximum == 0:
        return 0.0
    return distance / maximum


class CountMetricMixin:
    """Derived queries for engines whose distance is an integer edit count.

    The host class must provide ``src`` and ``tar`` attributes and a
    ``distance()`` method returning an ``int``.
    """

    __slots__ = ()

    src: str
    tar: str

    def distance(self) -> int:
        raise NotImplementedError

    def normalized_distance(self) -> float:
        return normalize_distance(self.distance(), len(self.src), len(self.tar))

    def similarity(self) -> int:
        return max(len(self.src), len(self.tar)) - self.distance()

    def normalized_similarity(self) -> float:
        return 1.0 - self.normalized_distance()


class RatioMetricMixin:
    """Derived queries for engines whose distance is already a ratio in [0, 1]."""

    __slots__ = ()

    def distance(self) -> float:
        raise NotImplementedError

    def normalized_distance(self) -> float:
        return self.distance() / 1.0

    def similarity(self) -> float:
        return 1.0 - self.distance()

    def normalized_similarity(self) -> float:
        return 1.0 - self.normalized_distance()
