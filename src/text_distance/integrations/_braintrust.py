"""Braintrust scorer adapter for text-distance.

Provides a factory function ``BraintrustScorer`` that wraps a
``StringComparator`` in the Braintrust scorer interface (plain function pattern).

No Braintrust SDK import is required; the scorer is a plain Python function
with the signature that Braintrust expects.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from text_distance.comparator import StringComparator

__all__ = ["BraintrustScorer"]


def BraintrustScorer(
    comparator: StringComparator,
) -> Any:
    """Create a Braintrust-compatible scorer function.

    Args:
        comparator: A ``StringComparator`` instance to use for scoring.  Its
            LRU cache is reused across every scored example.

    Returns:
        A callable ``_scorer(input, output, expected=None, metadata=None)``
        that returns the normalized similarity of ``str(output)`` and
        ``str(expected)`` as a ``float`` in ``[0.0, 1.0]``, or ``None`` when
        no ``expected`` is provided.  The function name is set to
        ``"text_similarity"`` for Braintrust display purposes.
    """

    def _scorer(
        input: Any,
        output: Any,
        expected: Any = None,
        metadata: Any = None,
    ) -> float | None:
        if expected is None:
            return None
        return comparator.compare(str(output), str(expected)).normalized_similarity

    _scorer.__name__ = "text_similarity"
    return _scorer
