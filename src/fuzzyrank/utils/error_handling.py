"""
Error types for fuzzyrank.

The ranking engine itself is total: empty queries, empty collections and
out-of-range options all produce documented results. Errors are raised only
when options are loaded from external data or when the command line cannot
read a record file. Exceptions raised by caller-supplied field extractors are
never wrapped; they reach the caller unchanged.

Classes:
    ErrorSeverity: Error severity levels (LOW, MEDIUM, HIGH, CRITICAL)
    ErrorCategory: Error classification categories
    SearchError: Base exception class for fuzzyrank errors
    ConfigurationError: Invalid option mapping
    RecordLoadError: Record file could not be read or parsed

Example:
    >>> from fuzzyrank.core.config import SearchOptions
    >>> from fuzzyrank.utils.error_handling import ConfigurationError
    >>> try:
    ...     SearchOptions.from_mapping({"limit": 5})
    ... except ConfigurationError as e:
    ...     print(e.category.value, e.suggestions[0])
    configuration Valid options: ...
"""

from __future__ import annotations

import time
from enum import Enum
from pathlib import Path
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Error categories for classification."""

    FILE_ACCESS = "file_access"
    ENCODING = "encoding"
    PARSING = "parsing"
    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    UNKNOWN = "unknown"


class SearchError(Exception):
    """Base exception for search-related errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        file_path: Path | None = None,
        suggestions: list[str] | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message: str = message
        self.category: ErrorCategory = category
        self.severity: ErrorSeverity = severity
        self.file_path: Path | None = file_path
        self.suggestions: list[str] = suggestions or []
        self.context: dict[str, Any] = context or {}
        self.timestamp: float = time.time()

    def __str__(self) -> str:
        if self.file_path is not None:
            return f"{self.message} ({self.file_path})"
        return self.message


class ConfigurationError(SearchError):
    """Invalid search or match options."""

    def __init__(
        self,
        message: str,
        suggestions: list[str] | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.HIGH,
            suggestions=suggestions,
            context=context,
        )


class RecordLoadError(SearchError):
    """A record collection could not be loaded."""

    def __init__(
        self,
        message: str,
        file_path: Path,
        category: ErrorCategory = ErrorCategory.FILE_ACCESS,
        context: dict[str, Any] | None = None,
    ) -> None:
        suggestions = {
            ErrorCategory.FILE_ACCESS: ["Check that the file exists and is readable"],
            ErrorCategory.ENCODING: ["Save the record file as UTF-8"],
            ErrorCategory.PARSING: ["Check the file is valid JSON"],
            ErrorCategory.VALIDATION: ["The top-level JSON value must be an array of records"],
        }.get(category, [])
        super().__init__(
            message,
            category=category,
            severity=ErrorSeverity.HIGH,
            file_path=file_path,
            suggestions=suggestions,
            context=context,
        )
