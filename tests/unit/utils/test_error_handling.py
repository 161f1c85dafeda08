"""Tests for fuzzyrank.utils.error_handling module."""

from __future__ import annotations

from pathlib import Path

from fuzzyrank.utils.error_handling import (
    ConfigurationError,
    ErrorCategory,
    ErrorSeverity,
    RecordLoadError,
    SearchError,
)


class TestEnums:
    def test_severity_values(self):
        assert ErrorSeverity.LOW == "low"
        assert ErrorSeverity.CRITICAL == "critical"

    def test_category_values(self):
        assert ErrorCategory.CONFIGURATION == "configuration"
        assert ErrorCategory.FILE_ACCESS == "file_access"
        assert ErrorCategory.PARSING == "parsing"


class TestSearchError:
    def test_defaults(self):
        error = SearchError("something broke")
        assert str(error) == "something broke"
        assert error.category == ErrorCategory.UNKNOWN
        assert error.severity == ErrorSeverity.MEDIUM
        assert error.suggestions == []
        assert error.context == {}
        assert error.timestamp > 0

    def test_with_file_path(self):
        error = SearchError("bad file", file_path=Path("events.json"))
        assert str(error) == "bad file (events.json)"


class TestConfigurationError:
    def test_fields(self):
        error = ConfigurationError("Unknown option: 'limit'", context={"option": "limit"})
        assert isinstance(error, SearchError)
        assert error.category == ErrorCategory.CONFIGURATION
        assert error.severity == ErrorSeverity.HIGH
        assert error.context["option"] == "limit"


class TestRecordLoadError:
    def test_default_category(self):
        error = RecordLoadError("Cannot read file", Path("missing.json"))
        assert error.category == ErrorCategory.FILE_ACCESS
        assert error.file_path == Path("missing.json")
        assert error.suggestions

    def test_parsing_category(self):
        error = RecordLoadError("Invalid JSON", Path("bad.json"), category=ErrorCategory.PARSING)
        assert error.category == ErrorCategory.PARSING
        assert "JSON" in error.suggestions[0]
