"""
Per-field fuzzy match classification.

A query is compared against one text field using a fixed ladder of
strategies, cheapest first. The first strategy that succeeds decides the
result; edit distance is only computed when every cheaper strategy fails.

Strategy ladder:
    1. EXACT        normalized query equals normalized text, score 1.0
    2. CONTAINS     text contains query, score min(len(q)/len(t) + 0.2, 1.0)
    3. STARTS_WITH  text starts with query, score min(len(q)/len(t) + 0.1, 1.0)
    4. WORD_START   some whitespace-separated word starts with query, score 0.8
    5. PARTIAL      enough query tokens occur in text, score ratio * weight in [0, 1]
    6. FUZZY        similarity >= threshold, score similarity * 0.6

Scores are dampened per tier so lower tiers rarely outscore higher ones, but
ranked search orders by strategy first regardless.
"""

from __future__ import annotations

from ..core.config import DEFAULT_MATCH_THRESHOLD, MatchOptions, clamp_threshold
from ..core.types import MatchResult, MatchStrategy
from .fuzzy import similarity

CONTAINS_BONUS = 0.2
STARTS_WITH_BONUS = 0.1
WORD_START_SCORE = 0.8
FUZZY_WEIGHT = 0.6


def _partial_ratio(query: str, text: str) -> float | None:
    """Share of query tokens (longer than one character) found in text, or None without tokens."""
    tokens = [token for token in query.split() if len(token) > 1]
    if not tokens:
        return None
    matching = sum(1 for token in tokens if token in text)
    return matching / len(tokens)


def classify(query: str, text: str, options: MatchOptions | None = None) -> MatchResult:
    """
    Decide whether ``query`` matches ``text`` and under which strategy.

    Args:
        query: Search query; an empty query never matches
        text: Candidate text field; an empty field never matches
        options: Matching options (defaults to MatchOptions())

    Returns:
        MatchResult. When nothing matches, ``score`` carries the raw
        similarity for diagnostics and ``matched`` is False.
    """
    if options is None:
        options = MatchOptions()

    if not query or not text:
        return MatchResult.no_match()

    q = query if options.case_sensitive else query.lower()
    t = text if options.case_sensitive else text.lower()

    if q == t:
        return MatchResult(True, 1.0, MatchStrategy.EXACT)

    if q in t:
        return MatchResult(True, min(len(q) / len(t) + CONTAINS_BONUS, 1.0), MatchStrategy.CONTAINS)

    if t.startswith(q):
        return MatchResult(
            True, min(len(q) / len(t) + STARTS_WITH_BONUS, 1.0), MatchStrategy.STARTS_WITH
        )

    if any(word.startswith(q) for word in t.split()):
        return MatchResult(True, WORD_START_SCORE, MatchStrategy.WORD_START)

    if options.include_partial_matches:
        ratio = _partial_ratio(q, t)
        if (
            ratio is not None
            and ratio > 0
            and ratio >= clamp_threshold(options.partial_ratio_threshold)
        ):
            return MatchResult(
                True, clamp_threshold(ratio * options.partial_weight), MatchStrategy.PARTIAL
            )

    score = similarity(q, t)
    if score >= options.effective_threshold:
        return MatchResult(True, score * FUZZY_WEIGHT, MatchStrategy.FUZZY)

    return MatchResult.no_match(score)


def fuzzy_match(query: str, text: str, threshold: float = DEFAULT_MATCH_THRESHOLD) -> bool:
    """Quick case-insensitive check: substring hit or similarity at or above threshold."""
    if not query or not text:
        return False

    q = query.lower()
    t = text.lower()
    if q in t:
        return True
    return similarity(q, t) >= clamp_threshold(threshold)
