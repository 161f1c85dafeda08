"""
fuzzyrank: fuzzy text matching and relevance ranking for in-memory records.

Search heterogeneous entity collections (tourism clusters, events, grant
applications, ...) by free-text query and get back ranked results annotated
with the best match score and strategy.

Key Features:
    - **Edit distance primitives**: Levenshtein distance and normalized similarity
    - **Strategy ladder**: exact, contains, starts-with, word-start, partial
      token overlap and fuzzy similarity, tried cheapest first
    - **Generic ranked search**: any record type, fields picked by name or by
      a caller-supplied extractor
    - **Strategy-first ordering**: substring matches always outrank approximate ones
    - **Highlighting**: wrap query hits for display (HTML, plain markers, rich console)
    - **Command line**: ``fuzzyrank search`` over JSON record files

Core Modules:
    core.types: MatchStrategy, MatchResult, RankedRecord
    core.config: MatchOptions and SearchOptions
    core.api: RecordSearcher bound to one record shape
    search.fuzzy: edit_distance and similarity
    search.matchers: classify and fuzzy_match
    search.ranking: search over record collections
    utils.formatter: highlighting and result rendering
    cli: command-line interface

Example Usage:
    >>> from fuzzyrank import search, highlight
    >>> clusters = [
    ...     {"title": "Kuching Waterfront"},
    ...     {"title": "Miri Heritage Trail"},
    ...     {"title": "Kuching Cultural Village"},
    ... ]
    >>> for hit in search("kuching", clusters, ["title"]):
    ...     print(hit.strategy.tag, round(hit.score, 2), hit.record["title"])
    contains 0.59 Kuching Waterfront
    contains 0.49 Kuching Cultural Village
    >>> highlight("Kuching Waterfront", "kuching", lambda m: f"<mark>{m}</mark>")
    '<mark>Kuching</mark> Waterfront'
"""

from .core import (
    MatchOptions,
    MatchResult,
    MatchStrategy,
    OutputFormat,
    RankedRecord,
    RecordSearcher,
    SearchOptions,
)
from .search import classify, edit_distance, fuzzy_match, search, similarity
from .utils import (
    ConfigurationError,
    RecordLoadError,
    SearchError,
    configure_logging,
    disable_logging,
    enable_debug_logging,
    get_logger,
)
from .utils.formatter import highlight, highlight_match

# Package metadata
__version__ = "0.1.0"
__license__ = "MIT"
__description__ = "Fuzzy text matching and relevance ranking for in-memory records"

# Public API
__all__ = [
    # Primitives and matching
    "edit_distance",
    "similarity",
    "classify",
    "fuzzy_match",
    # Ranked search
    "search",
    "RecordSearcher",
    # Highlighting
    "highlight",
    "highlight_match",
    # Data types
    "MatchStrategy",
    "MatchResult",
    "RankedRecord",
    "MatchOptions",
    "SearchOptions",
    "OutputFormat",
    # Logging
    "configure_logging",
    "get_logger",
    "enable_debug_logging",
    "disable_logging",
    # Exception classes
    "SearchError",
    "ConfigurationError",
    "RecordLoadError",
    # Package metadata
    "__version__",
    "__license__",
    "__description__",
]
