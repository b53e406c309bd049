"""Integration tests for the text-distance pytest plugin.

These tests verify that the assert_text_similar fixture is auto-discovered
via the pytest11 entry point and behaves correctly.

NOTE: These tests require text-distance to be installed (even in editable mode
via ``pip install -e .``). The pytest11 entry point is only registered at
install time -- running from a raw source checkout without installing will not
discover the fixture.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Any

import pytest

from text_distance import DistanceConfig, Metric


def test_fixture_passes_single_typo(assert_text_similar: Any) -> None:
    """One missing letter in a long word passes the default threshold."""
    assert_text_similar("accommodation", "acommodation")


def test_fixture_fails_unrelated_strings(assert_text_similar: Any) -> None:
    with pytest.raises(AssertionError, match=r"similarity="):
        assert_text_similar("apple", "zebra")


def test_fixture_custom_threshold(assert_text_similar: Any) -> None:
    """Custom threshold parameter should be respected."""
    assert_text_similar("abc", "xyz", threshold=0.0)

    with pytest.raises(AssertionError, match=r"similarity="):
        assert_text_similar("abc", "abd", threshold=1.0)


def test_fixture_custom_config(assert_text_similar: Any) -> None:
    """Custom DistanceConfig should be forwarded to compare()."""
    # Levenshtein: 1 - 2/6 = 0.67; Jaro-Winkler: 0.96.
    with pytest.raises(AssertionError):
        assert_text_similar("martha", "marhta")
    assert_text_similar(
        "martha",
        "marhta",
        config=DistanceConfig(metric=Metric.JARO_WINKLER),
    )


def test_fixture_error_message_contents(assert_text_similar: Any) -> None:
    with pytest.raises(AssertionError) as exc_info:
        assert_text_similar("apple", "zebra")

    error_message = str(exc_info.value)
    assert "similarity=" in error_message
    assert "threshold=" in error_message
    assert "levenshtein" in error_message
    assert "'apple'" in error_message
    assert "'zebra'" in error_message


def test_fixture_returns_callable(assert_text_similar: Any) -> None:
    assert callable(assert_text_similar)


def test_plugin_discovery() -> None:
    """Verify assert_text_similar appears in pytest --fixtures output."""
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "--fixtures", "-q"],
        capture_output=True,
        text=True,
        cwd=str(Path(__file__).resolve().parents[2]),
    )
    assert "assert_text_similar" in result.stdout, (
        f"assert_text_similar not found in pytest --fixtures output.\n"
        f"stdout:\n{result.stdout}\n"
        f"stderr:\n{result.stderr}"
    )
