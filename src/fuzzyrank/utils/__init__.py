"""
Utility modules.

This package contains the ambient helpers shared across fuzzyrank:
- Error types raised when loading options or records
- Logging configuration
- Match highlighting and result formatting (``fuzzyrank.utils.formatter``)

The formatter is imported by its full module path; it depends on the search
package, which in turn depends on the helpers exported here.
"""

from .error_handling import (
    ConfigurationError,
    ErrorCategory,
    ErrorSeverity,
    RecordLoadError,
    SearchError,
)
from .logging_config import (
    LogFormat,
    LogLevel,
    SearchLogger,
    configure_logging,
    disable_logging,
    enable_debug_logging,
    get_logger,
)

__all__ = [
    # Error handling
    "ConfigurationError",
    "ErrorCategory",
    "ErrorSeverity",
    "RecordLoadError",
    "SearchError",
    # Logging
    "LogFormat",
    "LogLevel",
    "SearchLogger",
    "configure_logging",
    "disable_logging",
    "enable_debug_logging",
    "get_logger",
]
