"""
Generic ranked search over caller-supplied record collections.

Records are opaque: the engine only sees the text fields produced by a field
extractor, which is either a callable ``record -> iterable of str`` or a list
of field names read from mappings (by key) or objects (by attribute).

Example:
    >>> from fuzzyrank.search.ranking import search
    >>> clusters = [{"title": "Kuching Waterfront"}, {"title": "Miri Heritage Trail"}]
    >>> [r.record["title"] for r in search("kuching", clusters, ["title"])]
    ['Kuching Waterfront']
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any, TypeVar, Union

from ..core.config import SearchOptions
from ..core.types import MatchResult, MatchStrategy, RankedRecord
from ..utils.logging_config import get_logger
from .matchers import classify

T = TypeVar("T")

FieldExtractor = Union[Callable[[T], Iterable[Any]], Sequence[str], str]


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def extract_fields(record: Any, fields: FieldExtractor) -> list[str]:
    """
    Searchable text fields of one record, in declared order.

    Missing attributes, missing keys and ``None`` values become empty strings.
    Exceptions raised by a callable extractor propagate unchanged.
    """
    if callable(fields):
        return [_as_text(value) for value in fields(record)]

    names = [fields] if isinstance(fields, str) else fields
    if isinstance(record, Mapping):
        return [_as_text(record.get(name)) for name in names]
    return [_as_text(getattr(record, name, None)) for name in names]


def strategy_sort_key(ranked: RankedRecord[Any]) -> tuple[int, float]:
    """Sort key placing higher strategies first, then higher scores."""
    return (-int(ranked.strategy), -ranked.score)


def sort_ranked(results: list[RankedRecord[T]]) -> list[RankedRecord[T]]:
    """Stable relevance sort; strategy rank always dominates score."""
    return sorted(results, key=strategy_sort_key)


def _best_match(query: str, texts: Iterable[str], options: SearchOptions) -> MatchResult | None:
    match_options = options.match_options()
    best: MatchResult | None = None
    for text in texts:
        result = classify(query, text, match_options)
        # Strictly greater keeps the earliest field on ties
        if result.matched and (best is None or result.score > best.score):
            best = result
    return best


def search(
    query: str,
    items: Iterable[T] | None,
    fields: FieldExtractor,
    options: SearchOptions | None = None,
) -> list[RankedRecord[T]]:
    """
    Rank records in ``items`` against ``query``.

    Args:
        query: Free-text query; a blank query returns every item unranked
        items: Records to search; never mutated
        fields: Field extractor callable or list of field names
        options: Search options (defaults to SearchOptions())

    Returns:
        RankedRecord list holding each matching record with the best score
        and strategy found across its fields.
    """
    if options is None:
        options = SearchOptions()
    if not items:
        return []

    logger = get_logger()
    candidates = list(items)

    if not query.strip():
        return [RankedRecord(item, 0.0, MatchStrategy.NONE) for item in candidates]

    if options.max_results is not None and options.max_results <= 0:
        return []

    start = time.perf_counter()
    logger.log_search_start(query, len(candidates))

    results: list[RankedRecord[T]] = []
    for item in candidates:
        best = _best_match(query, extract_fields(item, fields), options)
        if best is not None:
            results.append(RankedRecord(item, best.score, best.strategy))

    if options.sort_by_relevance:
        results = sort_ranked(results)

    if options.max_results is not None:
        results = results[: options.max_results]

    elapsed_ms = (time.perf_counter() - start) * 1000.0
    logger.log_search_complete(query, len(results), elapsed_ms)
    return results
