"""Exception hierarchy for text-distance.

Only two inputs are outside an engine's domain: Hamming on sequences of
different length, and Jaccard q-grams on a sequence shorter than ``qval``.
Both raise a subclass of ``TextDistanceError`` (and ``ValueError``) so callers
can catch either the package-specific or the builtin type.
"""

from __future__ import annotations

__all__ = ["LengthMismatchError", "SequenceTooShortError", "TextDistanceError"]


class TextDistanceError(Exception):
    """Base class for all text-distance errors."""


class LengthMismatchError(TextDistanceError, ValueError):
    """Raised when a positional metric receives sequences of unequal length."""

    def __init__(self, len_src: int, len_tar: int) -> None:
        self.len_src = len_src
        self.len_tar = len_tar
        super().__init__(
            "Hamming distance is only defined for strings of equal length "
            f"(got {len_src} and {len_tar})"
        )


class SequenceTooShortError(TextDistanceError, ValueError):
    """Raised when a sequence is shorter than the requested n-gram length."""

    def __init__(self, length: int, qval: int) -> None:
        self.length = length
        self.qval = qval
        super().__init__(
            "Can't create n-grams from text shorter than n-gram length "
            f"(length {length} < qval {qval})"
        )
