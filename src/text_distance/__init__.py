"""Text distance - pairwise similarity and distance metrics for strings."""

from __future__ import annotations

from text_distance.algorithm.config import DistanceConfig, Metric
from text_distance.algorithm.edit import DamerauLevenshtein, Levenshtein
from text_distance.algorithm.hamming import Hamming
from text_distance.algorithm.jaccard import Jaccard
from text_distance.algorithm.jaro import JaroWinkler
from text_distance.api import (
    compare,
    distance,
    is_similar,
    normalized_distance,
    normalized_similarity,
    similarity,
)
from text_distance.comparator import StringComparator
from text_distance.exceptions import (
    LengthMismatchError,
    SequenceTooShortError,
    TextDistanceError,
)
from text_distance.result import ComparisonResult

__version__: str = "0.1.0"
__all__: list[str] = [
    "ComparisonResult",
    "DamerauLevenshtein",
    "DistanceConfig",
    "Hamming",
    "Jaccard",
    "JaroWinkler",
    "LengthMismatchError",
    "Levenshtein",
    "Metric",
    "SequenceTooShortError",
    "StringComparator",
    "TextDistanceError",
    "compare",
    "distance",
    "is_similar",
    "normalized_distance",
    "normalized_similarity",
    "similarity",
]
