"""StringComparator: orchestrator that wires DistanceConfig + engine + result cache.

This is the central wiring layer between the raw engines and the public API.
It builds the configured engine for each input pair, evaluates all four
queries, and packages them with timing data into a ComparisonResult.

Architecture:
- compare() returns a cached result when the same (src, tar) pair was seen
  before by this instance; otherwise it starts a wall-clock timer, builds the
  engine via ``DistanceConfig.build``, computes the raw distance once, derives
  the other three values from it, and stores the result.
- Results are cached in a per-instance ``cachetools.LRUCache``.  Engines are
  pure, so a cached result is always identical to a recomputed one; the cache
  never changes values.  Two comparators never share cache state.
- Precondition violations (``LengthMismatchError``, ``SequenceTooShortError``)
  propagate to the caller and are never cached.
"""

from __future__ import annotations

import logging
import time

from cachetools import LRUCache

from text_distance.algorithm.config import DistanceConfig
from text_distance.algorithm.normalizer import CountMetricMixin, normalize_distance
from text_distance.result import ComparisonResult

__all__ = ["StringComparator"]

logger = logging.getLogger(__name__)


class StringComparator:
    """Orchestrator for pairwise string comparison.

    Example::

        from text_distance.comparator import StringComparator
        from text_distance.algorithm.config import DistanceConfig, Metric

        cmp = StringComparator(DistanceConfig(metric=Metric.JARO_WINKLER))
        result = cmp.compare("frog", "fog")
        print(result.distance)               # 0.07500000000000007
        print(result.normalized_similarity)  # 0.9249999999999999
    """

    def __init__(
        self,
        config: DistanceConfig | None = None,
        max_cache_size: int = 512,
    ) -> None:
        """Initialise the comparator.

        Args:
            config: Metric selection and mode flags.  Defaults to
                ``DistanceConfig()`` (Levenshtein).
            max_cache_size: Maximum number of results held in the per-instance
                LRU cache.  When exceeded, the least-recently-used entry is
                silently evicted.  0 disables caching.  Defaults to 512.
                This is an infrastructure parameter, NOT part of
                ``DistanceConfig`` (which governs metric behaviour only).
        """
        self._config: DistanceConfig = config if config is not None else DistanceConfig()
        self._cache: LRUCache[tuple[str, str], ComparisonResult] = LRUCache(
            maxsize=max_cache_size
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def config(self) -> DistanceConfig:
        """The configuration this comparator was built with."""
        return self._config

    @property
    def cache_size(self) -> int:
        """The current number of results stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(self, src: str, tar: str) -> ComparisonResult:
        """Compare two strings and return a rich ComparisonResult.

        Args:
            src: Source string.
            tar: Target string.

        Returns:
            A ``ComparisonResult`` with all six fields populated.

        Raises:
            LengthMismatchError: Hamming metric with inputs of unequal length.
            SequenceTooShortError: Jaccard metric with ``qval >= 2`` and an
                input shorter than ``qval``.
        """
        key = (src, tar)
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("cache hit for %s comparison", self._config.metric)
            return cached

        t0 = time.perf_counter()

        engine = self._config.build(src, tar)
        distance = engine.distance()

        if isinstance(engine, CountMetricMixin):
            normalized = normalize_distance(distance, len(src), len(tar))
            similarity: int | float = max(len(src), len(tar)) - distance
        else:
            normalized = distance / 1.0
            similarity = 1.0 - distance

        elapsed_ms = (time.perf_counter() - t0) * 1000.0

        result = ComparisonResult(
            metric=self._config.metric,
            distance=distance,
            normalized_distance=normalized,
            similarity=similarity,
            normalized_similarity=1.0 - normalized,
            computation_time_ms=elapsed_ms,
        )
        if self._cache.maxsize > 0:
            self._cache[key] = result
        logger.debug(
            "computed %s comparison in %.3f ms (cache size %d)",
            self._config.metric,
            elapsed_ms,
            self._cache.currsize,
        )
        return result
