"""Matching engine exports.

Search-select modes only depend on ``find`` and the ``Match`` record.
"""

from __future__ import annotations

from .matching import Match, find, fuzzy_score, substring_index

__all__ = [
    "Match",
    "find",
    "fuzzy_score",
    "substring_index",
]
