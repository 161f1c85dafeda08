"""
Shared test fixtures for fuzzyrank tests.

Provides small tourism-coordination collections (clusters, events and grant
applications) in the shapes the web client hands to the search engine.
"""

import json
from dataclasses import dataclass
from pathlib import Path

import pytest

from fuzzyrank.utils import logging_config


@dataclass
class GrantApplication:
    applicant: str
    project_title: str
    status: str
    notes: str | None = None


ATTRACTION_TITLES = [
    {"title": "Kuching Waterfront"},
    {"title": "Miri Heritage Trail"},
    {"title": "Kuching Cultural Village"},
]

CLUSTERS = [
    {
        "id": 1,
        "name": "Kuching Waterfront",
        "category": "Culture",
        "location": "Kuching",
        "description": "Riverside promenade along the Sarawak River",
    },
    {
        "id": 2,
        "name": "Miri Heritage Trail",
        "category": "Heritage",
        "location": "Miri",
        "description": "Walking trail through the old oil town",
    },
    {
        "id": 3,
        "name": "Kuching Cultural Village",
        "category": "Culture",
        "location": "Santubong",
        "description": "Living museum of longhouses",
    },
    {
        "id": 4,
        "name": "Bako National Park",
        "category": "Nature",
        "location": "Kuching",
        "description": "Proboscis monkeys and coastal cliffs",
    },
    {
        "id": 5,
        "name": "Niah Caves",
        "category": "Nature",
        "location": "Miri",
        "description": None,
    },
]

EVENTS = [
    {"title": "Rainforest World Music Festival", "venue": "Sarawak Cultural Village"},
    {"title": "Borneo Jazz Festival", "venue": "Miri"},
    {"title": "Kuching Food Fair", "venue": None},
]

GRANTS = [
    GrantApplication("Kuching Homestay Association", "Homestay signage upgrade", "submitted"),
    GrantApplication("Miri Craft Collective", "Heritage craft workshop", "approved"),
    GrantApplication("Bako Boat Operators", "Jetty repairs", "rejected", notes="Resubmit in Q3"),
]


@pytest.fixture(autouse=True)
def reset_global_logger(monkeypatch):
    """Give every test a fresh global logger."""
    monkeypatch.setattr(logging_config, "_global_logger", None)
    yield


@pytest.fixture
def attraction_titles():
    return [dict(item) for item in ATTRACTION_TITLES]


@pytest.fixture
def clusters():
    return [dict(item) for item in CLUSTERS]


@pytest.fixture
def events():
    return [dict(item) for item in EVENTS]


@pytest.fixture
def grants():
    return list(GRANTS)


@pytest.fixture
def records_file(tmp_path: Path) -> Path:
    path = tmp_path / "clusters.json"
    path.write_text(json.dumps(CLUSTERS), encoding="utf-8")
    return path


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "cli: CLI-related tests")
