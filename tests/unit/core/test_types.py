"""Tests for fuzzyrank.core.types module."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from fuzzyrank.core.types import MatchResult, MatchStrategy, OutputFormat, RankedRecord


class TestMatchStrategy:
    def test_priorities(self):
        assert [int(s) for s in MatchStrategy] == [0, 1, 2, 3, 4, 5, 6]
        assert MatchStrategy.EXACT == 6
        assert MatchStrategy.NONE == 0

    def test_total_order(self):
        ladder = [
            MatchStrategy.EXACT,
            MatchStrategy.CONTAINS,
            MatchStrategy.STARTS_WITH,
            MatchStrategy.WORD_START,
            MatchStrategy.PARTIAL,
            MatchStrategy.FUZZY,
            MatchStrategy.NONE,
        ]
        assert sorted(MatchStrategy, reverse=True) == ladder

    def test_tags(self):
        assert MatchStrategy.STARTS_WITH.tag == "startsWith"
        assert MatchStrategy.WORD_START.tag == "wordStart"
        assert MatchStrategy.NONE.tag == "none"

    @pytest.mark.parametrize("strategy", list(MatchStrategy))
    def test_from_tag_round_trip(self, strategy):
        assert MatchStrategy.from_tag(strategy.tag) is strategy

    def test_from_tag_unknown(self):
        with pytest.raises(ValueError, match="Unknown match strategy"):
            MatchStrategy.from_tag("phonetic")


class TestOutputFormat:
    def test_values(self):
        assert OutputFormat.TEXT == "text"
        assert OutputFormat.JSON == "json"
        assert OutputFormat.HIGHLIGHT == "highlight"


class TestMatchResult:
    def test_no_match(self):
        result = MatchResult.no_match(0.25)
        assert result == MatchResult(False, 0.25, MatchStrategy.NONE)

    def test_frozen(self):
        result = MatchResult(True, 1.0, MatchStrategy.EXACT)
        with pytest.raises(FrozenInstanceError):
            result.score = 0.5


class TestRankedRecord:
    def test_to_dict_mapping_record(self):
        record = {"id": 1, "name": "Kuching Waterfront"}
        ranked = RankedRecord(record, 0.5, MatchStrategy.CONTAINS)

        assert ranked.to_dict() == {
            "id": 1,
            "name": "Kuching Waterfront",
            "_searchScore": 0.5,
            "_matchType": "contains",
        }
        assert "_searchScore" not in record

    def test_to_dict_other_record(self):
        ranked = RankedRecord("Niah Caves", 0.2, MatchStrategy.FUZZY)
        assert ranked.to_dict() == {"record": "Niah Caves", "score": 0.2, "strategy": "fuzzy"}
