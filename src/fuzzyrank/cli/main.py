"""
Command-line interface for fuzzyrank.

Runs ranked fuzzy search over JSON record files and exposes the matching
primitives for quick experiments.

Main Commands:
    search: Rank the records of a JSON array file against a query
    match: Classify a query against a single piece of text
    distance: Print edit distance and similarity of two strings

Example Usage:
    Rank tourism clusters by name and description:
        $ fuzzyrank search kuching --records clusters.json \\
          --field name --field description --max-results 5

    Typo-tolerant search with JSON output:
        $ fuzzyrank search waterfal --records clusters.json --field name \\
          --threshold 0.3 --format json

    Inspect a single comparison:
        $ fuzzyrank match "heritage festival" "Miri Heritage Trail"
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import click
import orjson

from ..core.config import MatchOptions, SearchOptions
from ..core.types import OutputFormat
from ..search.fuzzy import edit_distance, similarity
from ..search.matchers import classify
from ..search.ranking import search
from ..utils.error_handling import (
    ConfigurationError,
    ErrorCategory,
    RecordLoadError,
    SearchError,
)
from ..utils.formatter import format_results, render_highlight_console
from ..utils.logging_config import LogFormat, LogLevel, configure_logging, get_logger


def _read_json(path: Path) -> Any:
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise RecordLoadError(f"Cannot read file: {e.strerror or e}", path) from e
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise RecordLoadError(
            f"File is not valid UTF-8: {e.reason} at byte {e.start}",
            path,
            category=ErrorCategory.ENCODING,
        ) from e
    try:
        return orjson.loads(text)
    except orjson.JSONDecodeError as e:
        raise RecordLoadError(f"Invalid JSON: {e}", path, category=ErrorCategory.PARSING) from e


def load_records(path: Path) -> list[Any]:
    """Load a JSON array of records."""
    data = _read_json(path)
    if not isinstance(data, list):
        raise RecordLoadError(
            f"Expected a JSON array of records, got {type(data).__name__}",
            path,
            category=ErrorCategory.VALIDATION,
        )
    return data


def load_options(path: Path) -> SearchOptions:
    """Load SearchOptions from a JSON object (snake_case or camelCase keys)."""
    data = _read_json(path)
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Expected a JSON object of options in {path}, got {type(data).__name__}",
            context={"file_path": str(path)},
        )
    return SearchOptions.from_mapping(data)


def _fail(error: SearchError) -> None:
    if isinstance(error, RecordLoadError):
        get_logger().log_load_error(
            str(error.file_path), error.message, category=error.category.value
        )
    else:
        get_logger().debug(
            f"Command failed: {error}", operation="cli_error", category=error.category.value
        )
    click.echo(f"Error: {error}", err=True)
    for suggestion in error.suggestions:
        click.echo(f"  - {suggestion}", err=True)
    sys.exit(1)


@click.group()
@click.version_option(package_name="fuzzyrank")
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging")
@click.option(
    "--log-level",
    type=click.Choice([lvl.value for lvl in LogLevel]),
    default=LogLevel.WARNING.value,
    help="Log level",
)
@click.option(
    "--log-format",
    type=click.Choice([fmt.value for fmt in LogFormat]),
    default=LogFormat.SIMPLE.value,
    help="Log format",
)
@click.option("--log-file", type=click.Path(path_type=Path), default=None, help="Log file path")
def cli(debug: bool, log_level: str, log_format: str, log_file: Path | None) -> None:
    """fuzzyrank - fuzzy search and relevance ranking for record collections"""
    configure_logging(
        level=LogLevel.DEBUG if debug else LogLevel(log_level),
        format_type=LogFormat(log_format),
        log_file=log_file,
        enable_file=log_file is not None,
        enable_console=True,
    )


@cli.command("search")
@click.argument("query")
@click.option(
    "--records",
    "records_path",
    required=True,
    type=click.Path(path_type=Path),
    help="JSON file holding an array of records",
)
@click.option("--field", "fields", multiple=True, required=True, help="Searchable field, repeatable")
@click.option("--threshold", type=float, default=None, help="Minimum fuzzy similarity (0.0-1.0)")
@click.option("--max-results", type=int, default=None, help="Maximum number of results")
@click.option("--case-sensitive", is_flag=True, default=False, help="Compare case-sensitively")
@click.option("--no-partial", is_flag=True, default=False, help="Disable token-overlap matches")
@click.option("--no-sort", is_flag=True, default=False, help="Keep input order instead of relevance")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    default=None,
    help="JSON file with search options",
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice([e.value for e in OutputFormat]),
    default=OutputFormat.TEXT.value,
    help="Output format",
)
def search_cmd(
    query: str,
    records_path: Path,
    fields: tuple[str, ...],
    threshold: float | None,
    max_results: int | None,
    case_sensitive: bool,
    no_partial: bool,
    no_sort: bool,
    config_path: Path | None,
    fmt: str,
) -> None:
    try:
        options = load_options(config_path) if config_path else SearchOptions()
        records = load_records(records_path)
    except SearchError as e:
        _fail(e)
        return

    overrides: dict[str, Any] = {}
    if threshold is not None:
        overrides["threshold"] = threshold
    if max_results is not None:
        overrides["max_results"] = max_results
    if case_sensitive:
        overrides["case_sensitive"] = True
    if no_partial:
        overrides["include_partial_matches"] = False
    if no_sort:
        overrides["sort_by_relevance"] = False
    if overrides:
        options = options.merged(overrides)

    field_names = list(fields)
    results = search(query, records, field_names, options)

    output = OutputFormat(fmt)
    if output == OutputFormat.HIGHLIGHT and sys.stdout.isatty():
        render_highlight_console(results, field_names, query)
    else:
        click.echo(format_results(results, output, field_names, query))


@cli.command("match")
@click.argument("query")
@click.argument("text")
@click.option(
    "--threshold", type=float, default=MatchOptions().threshold, help="Minimum fuzzy similarity"
)
@click.option("--case-sensitive", is_flag=True, default=False, help="Compare case-sensitively")
@click.option("--no-partial", is_flag=True, default=False, help="Disable token-overlap matches")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print JSON")
def match_cmd(
    query: str,
    text: str,
    threshold: float,
    case_sensitive: bool,
    no_partial: bool,
    as_json: bool,
) -> None:
    options = MatchOptions(
        threshold=threshold,
        case_sensitive=case_sensitive,
        include_partial_matches=not no_partial,
    )
    result = classify(query, text, options)
    if as_json:
        payload = {"matched": result.matched, "score": result.score, "strategy": result.strategy.tag}
        click.echo(orjson.dumps(payload).decode("utf-8"))
    else:
        click.echo(
            f"matched={str(result.matched).lower()} strategy={result.strategy.tag} score={result.score:.4f}"
        )


@cli.command("distance")
@click.argument("a")
@click.argument("b")
def distance_cmd(a: str, b: str) -> None:
    click.echo(f"distance={edit_distance(a, b)} similarity={similarity(a, b):.4f}")


def main() -> None:
    cli(prog_name="fuzzyrank")


if __name__ == "__main__":
    main()
