"""Hamming engine: positional mismatch count for equal-length sequences."""

from __future__ import annotations

from dataclasses import dataclass

from text_distance.algorithm.normalizer import CountMetricMixin
from text_distance.exceptions import LengthMismatchError

__all__ = ["Hamming"]


@dataclass(frozen=True, slots=True)
class Hamming(CountMetricMixin):
    """Hamming distance between two sequences of equal code-point length.

    Sequences of different length are never truncated or padded; every query
    raises ``LengthMismatchError`` instead.

    Example::

        Hamming("karolin", "kathrin").distance()  # 3
        Hamming("test", "textt").distance()       # raises LengthMismatchError
    """

    src: str
    tar: str

    def distance(self) -> int:
        """Number of positions at which the two sequences differ.

        Raises:
            LengthMismatchError: If ``len(src) != len(tar)``.
        """
        if len(self.src) != len(self.tar):
            raise LengthMismatchError(len(self.src), len(self.tar))
        return sum(1 for s_char, t_char in zip(self.src, self.tar) if s_char != t_char)
