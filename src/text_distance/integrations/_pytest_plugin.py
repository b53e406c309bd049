"""pytest plugin for text-distance.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from text_distance import DistanceConfig, compare


@pytest.fixture(scope="session")
def assert_text_similar() -> Any:
    """Fixture that returns a callable string similarity asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to compare() which creates a fresh StringComparator per call).

    Usage in tests::

        def test_typo(assert_text_similar):
            assert_text_similar("accommodation", "acommodation")

        def test_unrelated(assert_text_similar):
            with pytest.raises(AssertionError, match=r"similarity="):
                assert_text_similar("apple", "zebra")

    Returns:
        A callable ``_assert(actual, expected, threshold=0.85, config=None) -> None``
        that raises ``AssertionError`` when the normalized similarity is below
        threshold.
    """

    def _assert(
        actual: str,
        expected: str,
        threshold: float = 0.85,
        config: DistanceConfig | None = None,
    ) -> None:
        """Assert that two strings are at least ``threshold`` similar.

        Args:
            actual:    The string produced by the code under test.
            expected:  The reference string.
            threshold: Minimum normalized similarity. Defaults to 0.85.
            config:    Optional DistanceConfig selecting the metric.

        Raises:
            AssertionError: When normalized_similarity < threshold, with a
                message including the metric, score, threshold and both inputs.
        """
        result = compare(actual, expected, config=config)
        if result.normalized_similarity < threshold:
            raise AssertionError(
                f"Strings not similar ({result.metric}): "
                f"similarity={result.normalized_similarity:.4f} < threshold={threshold}\n"
                f"  actual:   {actual!r}\n"
                f"  expected: {expected!r}\n"
                f"  distance: {result.distance}"
            )

    return _assert
