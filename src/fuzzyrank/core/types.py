"""
Core data types for fuzzyrank.

Everything here is created, used and discarded within a single search call;
nothing is cached between calls.

Classes:
    MatchStrategy: Ranked tag naming the heuristic that produced a match
    MatchResult: Outcome of comparing a query against one text field
    RankedRecord: A caller record annotated with its best match
    OutputFormat: Rendering modes used by the command line
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class MatchStrategy(IntEnum):
    """
    Match strategies, valued by priority.

    Comparisons between members follow the priority directly, so
    ``MatchStrategy.CONTAINS > MatchStrategy.FUZZY`` holds.
    """

    NONE = 0
    FUZZY = 1
    PARTIAL = 2
    WORD_START = 3
    STARTS_WITH = 4
    CONTAINS = 5
    EXACT = 6

    @property
    def tag(self) -> str:
        """Short wire name, e.g. ``"startsWith"``."""
        return _TAGS[self]

    @classmethod
    def from_tag(cls, tag: str) -> MatchStrategy:
        """Look up a strategy by its wire name; raises ValueError for unknown tags."""
        for member, name in _TAGS.items():
            if name == tag:
                return member
        raise ValueError(f"Unknown match strategy tag: {tag!r}")


_TAGS: dict[MatchStrategy, str] = {
    MatchStrategy.NONE: "none",
    MatchStrategy.FUZZY: "fuzzy",
    MatchStrategy.PARTIAL: "partial",
    MatchStrategy.WORD_START: "wordStart",
    MatchStrategy.STARTS_WITH: "startsWith",
    MatchStrategy.CONTAINS: "contains",
    MatchStrategy.EXACT: "exact",
}


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"
    HIGHLIGHT = "highlight"


@dataclass(frozen=True, slots=True)
class MatchResult:
    matched: bool
    score: float  # 0.0 to 1.0
    strategy: MatchStrategy

    @classmethod
    def no_match(cls, score: float = 0.0) -> MatchResult:
        return cls(matched=False, score=score, strategy=MatchStrategy.NONE)


@dataclass(frozen=True, slots=True)
class RankedRecord(Generic[T]):
    """A record paired with the best score and strategy found across its fields."""

    record: T
    score: float
    strategy: MatchStrategy

    def to_dict(self) -> dict[str, Any]:
        """
        Serializable view of the ranked record.

        Mapping records are shallow-copied with ``_searchScore`` and
        ``_matchType`` keys added; other records are nested under ``record``.
        """
        if isinstance(self.record, Mapping):
            annotated = dict(self.record)
            annotated["_searchScore"] = self.score
            annotated["_matchType"] = self.strategy.tag
            return annotated
        return {"record": self.record, "score": self.score, "strategy": self.strategy.tag}
