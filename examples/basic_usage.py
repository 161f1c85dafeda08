#!/usr/bin/env python3
"""
Example: ranking tourism records

Demonstrates:
- Ranked search over clusters by field names
- Typo-tolerant search with a lower threshold
- A bound RecordSearcher for event records
- Highlighting hits for display
"""

from __future__ import annotations

from fuzzyrank import RecordSearcher, SearchOptions, classify, highlight, search

CLUSTERS = [
    {"name": "Kuching Waterfront", "location": "Kuching"},
    {"name": "Miri Heritage Trail", "location": "Miri"},
    {"name": "Kuching Cultural Village", "location": "Santubong"},
    {"name": "Bako National Park", "location": "Kuching"},
]

EVENTS = [
    {"title": "Rainforest World Music Festival", "venue": "Sarawak Cultural Village"},
    {"title": "Borneo Jazz Festival", "venue": "Miri"},
    {"title": "Kuching Food Fair", "venue": None},
]


def section(title: str) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}\n")


def demo_ranked_search() -> None:
    section("1. Ranked search over clusters")
    for hit in search("kuching", CLUSTERS, ["name", "location"]):
        print(f"  {hit.strategy.tag:<10} {hit.score:.3f}  {hit.record['name']}")


def demo_typo() -> None:
    section("2. Typo-tolerant search")
    print(classify("waterfal", "Kuching Waterfront"))
    for hit in search("waterfal", CLUSTERS, ["name"], SearchOptions(threshold=0.3)):
        print(f"  {hit.strategy.tag:<10} {hit.score:.3f}  {hit.record['name']}")


def demo_bound_searcher() -> None:
    section("3. Event search box")
    events = RecordSearcher(lambda e: [e["title"], e["venue"] or ""], SearchOptions(max_results=2))
    for hit in events.search("festival", EVENTS):
        print("  " + highlight(hit.record["title"], "festival", lambda m: f"**{m}**"))


def main() -> None:
    demo_ranked_search()
    demo_typo()
    demo_bound_searcher()


if __name__ == "__main__":
    main()
