"""Deterministic string generators for performance benchmarks.

All generators produce fixed, reproducible strings. No random values.
Three tiers: 10, 100 and 500 characters.
Each tier provides both "similar" and "dissimilar" pair generators, and every
pair has equal-length members so that Hamming can be benchmarked too.

Edit-distance engines fill an (n+1) x (m+1) table, so the 500-character
tier is the one that exposes quadratic cost.
"""

from __future__ import annotations

import pytest

_ALPHABET = "abcdefghijklmnopqrstuvwxyz"


def generate_text(length: int, offset: int = 0) -> str:
    """Generate a deterministic lowercase string of the given length."""
    return "".join(_ALPHABET[(i * 7 + offset) % len(_ALPHABET)] for i in range(length))


def _make_similar(length: int) -> tuple[str, str]:
    """Generate a similar pair: every tenth character is swapped with its neighbour."""
    left = generate_text(length)
    chars = list(left)
    for i in range(0, length - 1, 10):
        chars[i], chars[i + 1] = chars[i + 1], chars[i]
    return left, "".join(chars)


def _make_dissimilar(length: int) -> tuple[str, str]:
    """Generate a dissimilar pair drawn from disjoint halves of the alphabet."""
    left = "".join(_ALPHABET[i % 13] for i in range(length))
    right = "".join(_ALPHABET[13 + (i * 5) % 13] for i in range(length))
    return left, right


# --- Fixtures for each size tier ---


@pytest.fixture
def pair_10char_similar() -> tuple[str, str]:
    """10-character similar pair (one adjacent transposition)."""
    return _make_similar(10)


@pytest.fixture
def pair_10char_dissimilar() -> tuple[str, str]:
    """10-character dissimilar pair (no shared characters)."""
    return _make_dissimilar(10)


@pytest.fixture
def pair_100char_similar() -> tuple[str, str]:
    """100-character similar pair (ten adjacent transpositions)."""
    return _make_similar(100)


@pytest.fixture
def pair_100char_dissimilar() -> tuple[str, str]:
    """100-character dissimilar pair (no shared characters)."""
    return _make_dissimilar(100)


@pytest.fixture
def pair_500char_similar() -> tuple[str, str]:
    """500-character similar pair (fifty adjacent transpositions)."""
    return _make_similar(500)


@pytest.fixture
def pair_500char_dissimilar() -> tuple[str, str]:
    """500-character dissimilar pair (no shared characters)."""
    return _make_dissimilar(500)
