"""DistanceConfig and Metric for engine selection.

DistanceConfig is a frozen (immutable) dataclass naming the metric to
compute and carrying each engine's mode flag.  Flags that do not apply to the
selected metric are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

from text_distance.algorithm.edit import DamerauLevenshtein, Levenshtein
from text_distance.algorithm.hamming import Hamming
from text_distance.algorithm.jaccard import Jaccard
from text_distance.algorithm.jaro import JaroWinkler

Engine = Levenshtein | DamerauLevenshtein | Hamming | Jaccard | JaroWinkler


class Metric(StrEnum):
    """Which engine a comparison runs.

    - LEVENSHTEIN:         insert / delete / substitute edit count.
    - DAMERAU_LEVENSHTEIN: edit count with transpositions (see ``restricted``).
    - HAMMING:             positional mismatches, equal lengths only.
    - JACCARD:             token-set overlap (see ``qval``).
    - JARO_WINKLER:        windowed matching (see ``winklerize``).
    """

    LEVENSHTEIN = auto()
    DAMERAU_LEVENSHTEIN = auto()
    HAMMING = auto()
    JACCARD = auto()
    JARO_WINKLER = auto()


@dataclass(frozen=True, slots=True)
class DistanceConfig:
    """Immutable configuration for a pairwise comparison.

    Attributes:
        metric: Engine to run.  Default ``Metric.LEVENSHTEIN``.
        restricted: Damerau-Levenshtein only.  True selects optimal string
            alignment, False the unrestricted algorithm.  Default True.
        winklerize: Jaro-Winkler only.  Apply the common-prefix boost.
            Default True.
        qval: Jaccard only.  0 = words, 1 = characters, >=2 = q-grams.
            Default 1.
    """

    metric: Metric = Metric.LEVENSHTEIN
    restricted: bool = True
    winklerize: bool = True
    qval: int = 1

    def __post_init__(self) -> None:
        if not isinstance(self.metric, Metric):
            try:
                object.__setattr__(self, "metric", Metric(self.metric))
            except ValueError:
                choices = ", ".join(m.value for m in Metric)
                msg = f"metric must be one of {choices}, got {self.metric!r}"
                raise ValueError(msg) from None
        if self.qval < 0:
            msg = f"qval must be >= 0, got {self.qval}"
            raise ValueError(msg)

    def build(self, src: str, tar: str) -> Engine:
        """Return the configured engine for ``src`` and ``tar``."""
        if self.metric == Metric.LEVENSHTEIN:
            return Levenshtein(src, tar)
        if self.metric == Metric.DAMERAU_LEVENSHTEIN:
            return DamerauLevenshtein(src, tar, restricted=self.restricted)
        if self.metric == Metric.HAMMING:
            return Hamming(src, tar)
        if self.metric == Metric.JACCARD:
            return Jaccard(src, tar, qval=self.qval)
        # JARO_WINKLER (final variant)
        return JaroWinkler(src, tar, winklerize=self.winklerize)
