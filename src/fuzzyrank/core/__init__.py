"""
Core data types, options and the bound record searcher.
"""

from .types import MatchResult, MatchStrategy, OutputFormat, RankedRecord
from .config import MatchOptions, SearchOptions, clamp_threshold
from .api import RecordSearcher

__all__ = [
    "MatchResult",
    "MatchStrategy",
    "OutputFormat",
    "RankedRecord",
    "MatchOptions",
    "SearchOptions",
    "clamp_threshold",
    "RecordSearcher",
]
