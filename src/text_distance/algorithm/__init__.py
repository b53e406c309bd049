"""algorithm subpackage: public API for the distance engines.

Provides the four engines, their shared derived-metric contract, and the
metric configuration.  Import from this module (not from sub-modules
directly) to stay on the stable public interface.

Example::

    from text_distance.algorithm import DamerauLevenshtein, Jaccard

    DamerauLevenshtein("ca", "abc", restricted=False).distance()  # 2
    Jaccard("nelson", "neilsen", qval=1).similarity()             # 0.6666666666666666
"""

from __future__ import annotations

from text_distance.algorithm.config import DistanceConfig, Metric
from text_distance.algorithm.edit import DamerauLevenshtein, Levenshtein
from text_distance.algorithm.hamming import Hamming
from text_distance.algorithm.jaccard import Jaccard, tokenize
from text_distance.algorithm.jaro import (
    JaroWinkler,
    jaro_similarity,
    jaro_winkler_similarity,
)

__all__ = [
    "DamerauLevenshtein",
    "DistanceConfig",
    "Hamming",
    "Jaccard",
    "JaroWinkler",
    "Levenshtein",
    "Metric",
    "jaro_similarity",
    "jaro_winkler_similarity",
    "tokenize",
]
