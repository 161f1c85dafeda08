"""
High-level searcher bound to one record shape.

The web client searches several entity collections (tourism clusters, events,
grant applications), each with its own searchable fields. RecordSearcher binds
a field extractor and default options once per collection type so call sites
only pass the query and the current records.

Example:
    >>> from fuzzyrank import RecordSearcher, SearchOptions
    >>> clusters = RecordSearcher(["name", "description", "location"])
    >>> events = RecordSearcher(
    ...     lambda e: [e["title"], e.get("venue") or ""],
    ...     SearchOptions(max_results=5),
    ... )
    >>> hits = clusters.search("kuching", cluster_rows)
    >>> for hit in hits:
    ...     print(clusters.highlight(hit.record["name"], "kuching"))
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace
from typing import Any, Generic, TypeVar

from ..search.ranking import FieldExtractor, search
from ..utils.formatter import highlight_match
from .config import SearchOptions
from .types import RankedRecord

T = TypeVar("T")


class RecordSearcher(Generic[T]):
    def __init__(self, fields: FieldExtractor, options: SearchOptions | None = None) -> None:
        self.fields = fields
        self.options = options or SearchOptions()

    def search(
        self, query: str, items: Iterable[T] | None, **overrides: Any
    ) -> list[RankedRecord[T]]:
        """
        Rank ``items`` against ``query`` using the bound fields and options.

        Keyword overrides replace individual SearchOptions fields for this call
        only, e.g. ``searcher.search(q, rows, max_results=3)``.
        """
        options = replace(self.options, **overrides) if overrides else self.options
        return search(query, items, self.fields, options)

    def highlight(self, text: str, query: str, class_name: str | None = None) -> str:
        if class_name is None:
            return highlight_match(text, query)
        return highlight_match(text, query, class_name)
