"""Edit-distance engines: Levenshtein and Damerau-Levenshtein.

All three distances fill a dynamic-programming cost table in which cell
``[i, j]`` holds the minimum number of edits turning ``src[:i]`` into
``tar[:j]``.  Tables are numpy integer arrays allocated per call.

- Levenshtein:            insert, delete, substitute.
- Restricted DL (OSA):    adds transposition of two adjacent characters, with
                          no further edits to the transposed pair.  OSA does not
                          satisfy the triangle inequality
                          (``osa("ca", "abc") == 3`` although
                          ``osa("ca", "ac") + osa("ac", "abc") == 2``).
- Unrestricted DL:        transpositions of characters arbitrarily far apart,
                          using a per-character "last row seen" map.

Inputs are Python ``str`` objects, so ``src[i]`` is a constant-time code-point
lookup and lengths count code points rather than bytes.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from text_distance.algorithm.normalizer import CountMetricMixin

__all__ = ["DamerauLevenshtein", "Levenshtein"]


def _levenshtein_distance(src: str, tar: str) -> int:
    n = len(src)
    m = len(tar)

    table = np.zeros((n + 1, m + 1), dtype=np.intp)
    table[:, 0] = np.arange(n + 1)
    table[0, :] = np.arange(m + 1)

    for i in range(1, n + 1):
        s_char = src[i - 1]
        for j in range(1, m + 1):
            cost = 0 if s_char == tar[j - 1] else 1
            table[i, j] = min(
                table[i - 1, j] + 1,  # deletion
                table[i, j - 1] + 1,  # insertion
                table[i - 1, j - 1] + cost,  # substitution
            )

    return int(table[n, m])


def _osa_distance(src: str, tar: str) -> int:
    n = len(src)
    m = len(tar)

    table = np.zeros((n + 1, m + 1), dtype=np.intp)
    table[:, 0] = np.arange(n + 1)
    table[0, :] = np.arange(m + 1)

    for i in range(1, n + 1):
        s_char = src[i - 1]
        for j in range(1, m + 1):
            t_char = tar[j - 1]
            cost = 0 if s_char == t_char else 1
            best = min(
                table[i - 1, j] + 1,  # deletion
                table[i, j - 1] + 1,  # insertion
                table[i - 1, j - 1] + cost,  # substitution
            )
            # Current pair is the swap of the preceding pair.
            if (
                i > 1
                and j > 1
                and s_char == tar[j - 2]
                and t_char == src[i - 2]
            ):
                best = min(best, table[i - 2, j - 2] + cost)
            table[i, j] = best

    return int(table[n, m])


def _damerau_levenshtein_distance(src: str, tar: str) -> int:
    n = len(src)
    m = len(tar)

    # Border sentinel exceeds any real distance so no transposition path can
    # start outside the table.
    max_dist = n + m
    table = np.zeros((n + 2, m + 2), dtype=np.intp)
    table[0, :] = max_dist
    table[:, 0] = max_dist
    table[1:, 1] = np.arange(n + 1)
    table[1, 1:] = np.arange(m + 1)

    # Last row (1-based) at which each character occurred in src.
    last_row: dict[str, int] = {}

    for i in range(1, n + 1):
        s_char = src[i - 1]
        # Last column in this row where src[i - 1] matched.
        last_match_col = 0
        for j in range(1, m + 1):
            t_char = tar[j - 1]
            k = last_row.get(t_char, 0)
            col = last_match_col

            if s_char == t_char:
                cost = 0
                last_match_col = j
            else:
                cost = 1

            table[i + 1, j + 1] = min(
                table[i, j] + cost,  # substitution
                table[i + 1, j] + 1,  # insertion
                table[i, j + 1] + 1,  # deletion
                table[k, col] + (i - k - 1) + 1 + (j - col - 1),  # transposition
            )
        last_row[s_char] = i

    return int(table[n + 1, m + 1])


@dataclass(frozen=True, slots=True)
class Levenshtein(CountMetricMixin):
    """Levenshtein edit distance between ``src`` and ``tar``.

    Example::

        lev = Levenshtein("karolin", "kathrin")
        lev.distance()              # 3
        lev.normalized_distance()   # 0.42857142857142855
        lev.similarity()            # 4
        lev.normalized_similarity() # 0.5714285714285714
    """

    src: str
    tar: str

    def distance(self) -> int:
        """Minimum number of insertions, deletions and substitutions."""
        return _levenshtein_distance(self.src, self.tar)


@dataclass(frozen=True, slots=True)
class DamerauLevenshtein(CountMetricMixin):
    """Damerau-Levenshtein distance between ``src`` and ``tar``.

    Attributes:
        src:        Source sequence.
        tar:        Target sequence.
        restricted: True selects optimal string alignment (adjacent
            transpositions only, no substring edited twice).  False selects
            the unrestricted algorithm, which is a true metric and never
            exceeds the restricted distance.

    Example::

        DamerauLevenshtein("ca", "abc", restricted=True).distance()   # 3
        DamerauLevenshtein("ca", "abc", restricted=False).distance()  # 2
    """

    src: str
    tar: str
    restricted: bool = True

    def distance(self) -> int:
        """Minimum edits, counting a transposition as a single edit."""
        if self.restricted:
            return _osa_distance(self.src, self.tar)
        return _damerau_levenshtein_distance(self.src, self.tar)
