"""
Logging configuration for fuzzyrank.

Wraps the standard library logger named ``fuzzyrank`` with selectable output
formats and an optional rotating log file. Ranked search reports the start and
completion of every non-blank search at DEBUG level.

Example:
    >>> from fuzzyrank.utils.logging_config import LogFormat, LogLevel, configure_logging
    >>> logger = configure_logging(level=LogLevel.DEBUG, format_type=LogFormat.STRUCTURED)
    >>> logger.debug("ranking events", operation="demo")
"""

from __future__ import annotations

import json
import logging
import logging.handlers
import sys
import time
from enum import Enum
from pathlib import Path
from typing import Any

# LogRecord attributes that are not user-supplied extra fields
_RESERVED_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "message",
        "asctime",
    }
)


class LogLevel(str, Enum):
    """Available log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Available log formats."""

    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"
    STRUCTURED = "structured"


class SearchLogger:
    """
    Centralized logger for fuzzyrank with multiple output formats
    and configurable levels.
    """

    def __init__(
        self,
        name: str = "fuzzyrank",
        level: LogLevel = LogLevel.INFO,
        format_type: LogFormat = LogFormat.SIMPLE,
        log_file: Path | None = None,
        max_file_size: int = 10 * 1024 * 1024,  # 10MB
        backup_count: int = 5,
        enable_console: bool = True,
        enable_file: bool = False,
    ):
        self.name = name
        self.level = level
        self.format_type = format_type
        self.log_file = log_file
        self.max_file_size = max_file_size
        self.backup_count = backup_count
        self.enable_console = enable_console
        self.enable_file = enable_file

        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.value))

        # Clear existing handlers
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        self._setup_handlers()

    def _setup_handlers(self) -> None:
        if self.enable_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(getattr(logging, self.level.value))
            console_handler.setFormatter(self._get_formatter())
            self.logger.addHandler(console_handler)

        if self.enable_file and self.log_file:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                self.log_file,
                maxBytes=self.max_file_size,
                backupCount=self.backup_count,
                encoding="utf-8",
            )
            file_handler.setLevel(getattr(logging, self.level.value))
            file_handler.setFormatter(self._get_formatter())
            self.logger.addHandler(file_handler)

    def _get_formatter(self) -> logging.Formatter:
        if self.format_type == LogFormat.DETAILED:
            return logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
            )
        elif self.format_type == LogFormat.JSON:
            return JsonFormatter()
        elif self.format_type == LogFormat.STRUCTURED:
            return StructuredFormatter()
        return logging.Formatter("%(levelname)s: %(message)s")

    def debug(self, message: str, **kwargs: Any) -> None:
        self.logger.debug(message, extra=kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self.logger.info(message, extra=kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self.logger.warning(message, extra=kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self.logger.error(message, extra=kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        """Log exception with traceback."""
        self.logger.exception(message, extra=kwargs)

    def log_search_start(self, query: str, candidates: int, **kwargs: Any) -> None:
        self.debug(
            f"Starting search for query: '{query}' over {candidates} records",
            operation="search_start",
            query=query,
            candidates=candidates,
            **kwargs,
        )

    def log_search_complete(
        self, query: str, results_count: int, elapsed_ms: float, **kwargs: Any
    ) -> None:
        self.debug(
            f"Search completed: query='{query}', results={results_count}, time={elapsed_ms:.2f}ms",
            operation="search_complete",
            query=query,
            results_count=results_count,
            elapsed_ms=elapsed_ms,
            **kwargs,
        )

    def log_load_error(self, file_path: str, error: str, **kwargs: Any) -> None:
        self.error(
            f"Record load error: {file_path} - {error}",
            operation="load_error",
            file_path=file_path,
            error=error,
            **kwargs,
        )


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {k: v for k, v in record.__dict__.items() if k not in _RESERVED_ATTRS}


class JsonFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": time.time(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        log_entry.update(_extra_fields(record))

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


class StructuredFormatter(logging.Formatter):
    """Human-readable formatter that appends extra fields as key=value pairs."""

    def format(self, record: logging.LogRecord) -> str:
        asctime = self.formatTime(record, self.datefmt)
        base = f"{asctime} [{record.levelname}] {record.name}: {record.getMessage()}"

        extra = [f"{key}={value}" for key, value in _extra_fields(record).items()]
        if extra:
            base += f" | {' '.join(extra)}"

        if record.exc_info:
            base += f"\n{self.formatException(record.exc_info)}"

        return base


# Global logger instance
_global_logger: SearchLogger | None = None


def get_logger() -> SearchLogger:
    """Get the global logger instance."""
    global _global_logger
    if _global_logger is None:
        _global_logger = SearchLogger()
    return _global_logger


def configure_logging(
    level: LogLevel = LogLevel.INFO,
    format_type: LogFormat = LogFormat.SIMPLE,
    log_file: Path | None = None,
    enable_console: bool = True,
    enable_file: bool = False,
    **kwargs: Any,
) -> SearchLogger:
    """Configure global logging settings."""
    global _global_logger
    _global_logger = SearchLogger(
        level=level,
        format_type=format_type,
        log_file=log_file,
        enable_console=enable_console,
        enable_file=enable_file,
        **kwargs,
    )
    return _global_logger


def disable_logging() -> None:
    """Disable all logging."""
    get_logger().logger.setLevel(logging.CRITICAL + 1)


def enable_debug_logging() -> None:
    """Enable debug logging for troubleshooting."""
    logger = get_logger()
    logger.level = LogLevel.DEBUG
    logger.logger.setLevel(logging.DEBUG)
    for handler in logger.logger.handlers:
        handler.setLevel(logging.DEBUG)
