"""
Configuration module for fuzzyrank.

Defines the option objects accepted by the classifier and by ranked search.
Options are plain dataclasses; out-of-range thresholds are clamped when they
are used so that a search call never fails on a bad option.

Classes:
    MatchOptions: Options for comparing a query against a single text field
    SearchOptions: Options for ranking a whole record collection

Example:
    >>> from fuzzyrank.core.config import SearchOptions
    >>> options = SearchOptions(threshold=0.4, max_results=10)
    >>> options.match_options().threshold
    0.4

    Loading options from a JSON document with the web client's key names:
        >>> SearchOptions.from_mapping({"maxResults": 5, "caseSensitive": True}).max_results
        5
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from ..utils.error_handling import ConfigurationError

DEFAULT_MATCH_THRESHOLD = 0.6
DEFAULT_SEARCH_THRESHOLD = 0.3
# Token-overlap constants for the partial strategy; uncalibrated.
DEFAULT_PARTIAL_RATIO_THRESHOLD = 0.5
DEFAULT_PARTIAL_WEIGHT = 0.7

_CAMEL_ALIASES = {
    "caseSensitive": "case_sensitive",
    "includePartialMatches": "include_partial_matches",
    "partialRatioThreshold": "partial_ratio_threshold",
    "partialWeight": "partial_weight",
    "maxResults": "max_results",
    "sortByRelevance": "sort_by_relevance",
}


def clamp_threshold(value: float) -> float:
    """Clamp a threshold or score into [0, 1]; NaN is treated as 0."""
    if math.isnan(value):
        return 0.0
    return min(1.0, max(0.0, value))


def _coerce_options(cls: type, data: Mapping[str, Any]) -> dict[str, Any]:
    known = {f.name: f for f in fields(cls)}
    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        name = _CAMEL_ALIASES.get(key, key)
        if name not in known:
            raise ConfigurationError(
                f"Unknown option: {key!r}",
                suggestions=[f"Valid options: {', '.join(sorted(known))}"],
                context={"option": key},
            )
        expected = known[name].type
        if "bool" in expected:
            if not isinstance(value, bool):
                raise ConfigurationError(
                    f"Option {key!r} must be a boolean, got {type(value).__name__}",
                    context={"option": key, "value": value},
                )
        elif "int" in expected:
            if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
                raise ConfigurationError(
                    f"Option {key!r} must be an integer or null, got {type(value).__name__}",
                    context={"option": key, "value": value},
                )
        elif "float" in expected:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(
                    f"Option {key!r} must be a number, got {type(value).__name__}",
                    context={"option": key, "value": value},
                )
            value = float(value)
        kwargs[name] = value
    return kwargs


@dataclass(slots=True)
class MatchOptions:
    threshold: float = DEFAULT_MATCH_THRESHOLD
    case_sensitive: bool = False
    include_partial_matches: bool = True
    partial_ratio_threshold: float = DEFAULT_PARTIAL_RATIO_THRESHOLD
    partial_weight: float = DEFAULT_PARTIAL_WEIGHT

    @property
    def effective_threshold(self) -> float:
        return clamp_threshold(self.threshold)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> MatchOptions:
        return cls(**_coerce_options(cls, data))


@dataclass(slots=True)
class SearchOptions:
    threshold: float = DEFAULT_SEARCH_THRESHOLD
    case_sensitive: bool = False
    include_partial_matches: bool = True
    max_results: int | None = None
    sort_by_relevance: bool = True
    partial_ratio_threshold: float = DEFAULT_PARTIAL_RATIO_THRESHOLD
    partial_weight: float = DEFAULT_PARTIAL_WEIGHT

    @property
    def effective_threshold(self) -> float:
        return clamp_threshold(self.threshold)

    def match_options(self) -> MatchOptions:
        """Options handed to the classifier for every candidate field."""
        return MatchOptions(
            threshold=self.effective_threshold,
            case_sensitive=self.case_sensitive,
            include_partial_matches=self.include_partial_matches,
            partial_ratio_threshold=self.partial_ratio_threshold,
            partial_weight=self.partial_weight,
        )

    def merged(self, data: Mapping[str, Any]) -> SearchOptions:
        """Return a copy with the given (snake_case or camelCase) options applied."""
        current = {f.name: getattr(self, f.name) for f in fields(self)}
        current.update(_coerce_options(type(self), data))
        return SearchOptions(**current)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SearchOptions:
        return cls(**_coerce_options(cls, data))
