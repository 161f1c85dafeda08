"""
End-to-end search over the collections the tourism portal exposes:
clusters, events and grant applications, each searched through its own
RecordSearcher the way the dashboard search boxes use it.
"""

from __future__ import annotations

import pytest

from fuzzyrank import (
    MatchStrategy,
    RecordSearcher,
    SearchOptions,
    highlight_match,
    search,
)

pytestmark = pytest.mark.integration


@pytest.fixture
def cluster_searcher():
    return RecordSearcher(["name", "category", "location", "description"])


@pytest.fixture
def event_searcher():
    return RecordSearcher(lambda e: [e["title"], e.get("venue") or ""], SearchOptions(max_results=2))


@pytest.fixture
def grant_searcher():
    return RecordSearcher(lambda g: [g.project_title, g.applicant, g.notes or ""])


def test_kuching_across_clusters(cluster_searcher, clusters):
    results = cluster_searcher.search("kuching", clusters, threshold=0.9)

    ids = [r.record["id"] for r in results]
    assert ids == [1, 4, 3]
    assert results[0].strategy == MatchStrategy.EXACT


def test_category_filter_style_query(cluster_searcher, clusters):
    results = cluster_searcher.search("nature", clusters, threshold=0.9)
    assert sorted(r.record["id"] for r in results) == [4, 5]
    assert all(r.strategy == MatchStrategy.EXACT for r in results)


def test_event_search_is_capped(event_searcher, events):
    results = event_searcher.search("festival", events)
    assert len(results) == 2
    assert {r.record["title"] for r in results} == {
        "Rainforest World Music Festival",
        "Borneo Jazz Festival",
    }
    assert results[0].record["title"] == "Borneo Jazz Festival"


def test_grant_search_by_applicant(grant_searcher, grants):
    results = grant_searcher.search("bako boat", grants)
    assert results[0].record.applicant == "Bako Boat Operators"
    assert results[0].strategy == MatchStrategy.CONTAINS


def test_typing_sequence_never_fails(cluster_searcher, clusters):
    query = "kuching waterfront"
    for end in range(len(query) + 1):
        results = cluster_searcher.search(query[:end], clusters)
        if not query[:end].strip():
            assert len(results) == len(clusters)
        else:
            assert all(0.0 <= r.score <= 1.0 for r in results)

    final = cluster_searcher.search(query, clusters)
    assert final[0].record["name"] == "Kuching Waterfront"
    assert final[0].strategy == MatchStrategy.EXACT


def test_rank_then_highlight(attraction_titles):
    results = search("kuching", attraction_titles, ["title"])
    rendered = [highlight_match(r.record["title"], "kuching", "hit") for r in results]
    assert rendered == [
        '<span class="hit">Kuching</span> Waterfront',
        '<span class="hit">Kuching</span> Cultural Village',
    ]
