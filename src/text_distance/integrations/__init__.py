"""Integrations subpackage for text-distance.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point)
- Braintrust scorer adapter (BraintrustScorer)

BraintrustScorer has no SDK dependency and is always available.  The pytest
plugin is loaded by pytest itself and is not re-exported here.
"""

from __future__ import annotations

from text_distance.integrations._braintrust import BraintrustScorer

__all__ = ["BraintrustScorer"]
