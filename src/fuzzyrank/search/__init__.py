"""
Matching and ranking.

- ``fuzzy``: edit distance and normalized similarity
- ``matchers``: per-field strategy classification
- ``ranking``: ranked search over record collections
"""

from .fuzzy import edit_distance, similarity
from .matchers import classify, fuzzy_match
from .ranking import extract_fields, search, sort_ranked, strategy_sort_key

__all__ = [
    "edit_distance",
    "similarity",
    "classify",
    "fuzzy_match",
    "extract_fields",
    "search",
    "sort_ranked",
    "strategy_sort_key",
]
