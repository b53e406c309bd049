"""Jaccard engine: set overlap of word, character or q-gram tokens.

Tokenization granularity is selected by ``qval``:

- ``0``:  whitespace-delimited words (runs of whitespace split, as ``str.split()``).
- ``1``:  single characters.
- ``>=2``: every contiguous window of ``qval`` code points.

q-grams are cut on code points, so a multi-byte character is never split
into partial tokens.  An input shorter than ``qval`` has no q-grams at all
and raises ``SequenceTooShortError``.

Two inputs with no tokens (for example two empty strings with ``qval=1``)
are treated as identical: distance 0.0.
"""

from __future__ import annotations

from dataclasses import dataclass

from text_distance.algorithm.normalizer import RatioMetricMixin
from text_distance.exceptions import SequenceTooShortError

__all__ = ["Jaccard", "tokenize"]


def tokenize(text: str, qval: int) -> set[str]:
    """Split ``text`` into a set of tokens.

    Args:
        text: Input sequence.
        qval: 0 for words, 1 for characters, ``>=2`` for q-grams of that length.

    Returns:
        Deduplicated token set.

    Raises:
        SequenceTooShortError: If ``qval >= 2`` and ``len(text) < qval``.
    """
    if qval == 0:
        return set(text.split())
    if qval == 1:
        return set(text)
    if len(text) < qval:
        raise SequenceTooShortError(len(text), qval)
    return {text[i : i + qval] for i in range(len(text) - qval + 1)}


@dataclass(frozen=True, slots=True)
class Jaccard(RatioMetricMixin):
    """Jaccard distance between the token sets of ``src`` and ``tar``.

    Example::

        Jaccard("nelson", "neilsen", qval=1).distance()  # 0.33333333333333337
        Jaccard("data is a new oil", "data is oil", qval=0).similarity()  # 0.6
    """

    src: str
    tar: str
    qval: int = 1

    def __post_init__(self) -> None:
        if self.qval < 0:
            msg = f"qval must be >= 0, got {self.qval}"
            raise ValueError(msg)

    def distance(self) -> float:
        """``1 - |A & B| / |A | B|`` over the two token sets.

        Raises:
            SequenceTooShortError: If ``qval >= 2`` and either input is shorter
                than ``qval``.
        """
        src_tokens = tokenize(self.src, self.qval)
        tar_tokens = tokenize(self.tar, self.qval)

        union = src_tokens | tar_tokens
        if not union:
            return 0.0
        intersection = src_tokens & tar_tokens
        return 1.0 - len(intersection) / len(union)
