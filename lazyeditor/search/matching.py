from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

# Bonus applied when a query character lands at the start of a word.
WORD_BOUNDARY_CHARS = "/_- ."


@dataclass(frozen=True)
class Match:
    """One ranked candidate returned by :func:`find`."""

    candidate: str
    index: int
    score: int


def fuzzy_score(query: str, candidate: str) -> int | None:
    if not query:
        return 0
    query_folded = query.casefold()
    candidate_folded = candidate.casefold()

    score = 0
    prev_idx = -1
    run = 0
    for needle in query_folded:
        idx = candidate_folded.find(needle, prev_idx + 1)
        if idx < 0:
            return None
        if idx == prev_idx + 1:
            run += 1
            score += 20 + min(16, run * 4)
        else:
            gap = idx - prev_idx - 1
            run = 0
            score -= min(40, gap * 2)
        if idx == 0 or candidate_folded[idx - 1] in WORD_BOUNDARY_CHARS:
            score += 35
        prev_idx = idx

    score -= len(candidate_folded) // 5
    return score


def substring_index(query: str, candidate: str) -> int | None:
    if not query:
        return 0
    idx = candidate.casefold().find(query.casefold())
    if idx < 0:
        return None
    return idx


def find(query: str, candidates: Sequence[str], limit: int) -> list[Match]:
    """Rank ``candidates`` against ``query`` and return at most ``limit`` matches.

    Case-insensitive substring hits win outright, ordered by hit position then
    length. Only when nothing contains the query verbatim does the subsequence
    scorer run. An empty query or a non-positive limit matches nothing.
    """
    if not query or limit <= 0:
        return []

    substring_scored: list[tuple[int, int, str, int]] = []
    for idx, candidate in enumerate(candidates):
        substr_idx = substring_index(query, candidate)
        if substr_idx is None:
            continue
        substring_scored.append((substr_idx, len(candidate), candidate, idx))
    if substring_scored:
        substring_scored.sort(key=lambda item: (item[0], item[1], item[2]))
        return [
            Match(candidate=candidate, index=idx, score=10_000 - (substr_idx * 50) - length)
            for substr_idx, length, candidate, idx in substring_scored[:limit]
        ]

    scored: list[tuple[int, int, str, int]] = []
    for idx, candidate in enumerate(candidates):
        score = fuzzy_score(query, candidate)
        if score is None:
            continue
        scored.append((score, len(candidate), candidate, idx))
    scored.sort(key=lambda item: (-item[0], item[1], item[2]))
    return [Match(candidate=candidate, index=idx, score=score) for score, _, candidate, idx in scored[:limit]]
