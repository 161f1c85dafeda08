"""Tests for fuzzyrank.core.api module."""

from __future__ import annotations

from fuzzyrank import RecordSearcher, SearchOptions
from fuzzyrank.core.types import MatchStrategy


class TestRecordSearcher:
    def test_defaults(self):
        searcher = RecordSearcher(["name"])
        assert searcher.fields == ["name"]
        assert searcher.options == SearchOptions()

    def test_search_with_field_names(self, clusters):
        searcher = RecordSearcher(["name", "location"], SearchOptions(threshold=0.9))
        results = searcher.search("kuching", clusters)
        assert [r.record["id"] for r in results] == [1, 4, 3]

    def test_search_with_extractor(self, events):
        searcher = RecordSearcher(lambda e: [e["title"], e["venue"] or ""])
        results = searcher.search("cultural village", events)
        assert results[0].record["title"] == "Rainforest World Music Festival"
        assert results[0].strategy == MatchStrategy.CONTAINS

    def test_overrides_apply_to_one_call(self, clusters):
        searcher = RecordSearcher(["name", "location"], SearchOptions(threshold=0.9))
        assert len(searcher.search("kuching", clusters, max_results=1)) == 1
        assert searcher.options.max_results is None
        assert len(searcher.search("kuching", clusters)) == 3

    def test_highlight(self):
        searcher = RecordSearcher(["name"])
        assert searcher.highlight("Kuching Waterfront", "water") == (
            'Kuching <span class="bg-yellow-200 dark:bg-yellow-800">Water</span>front'
        )
        assert searcher.highlight("Kuching", "kuching", class_name="hit") == (
            '<span class="hit">Kuching</span>'
        )
