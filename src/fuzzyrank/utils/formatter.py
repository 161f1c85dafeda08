from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from typing import Any

import orjson
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..core.types import OutputFormat, RankedRecord
from ..search.ranking import FieldExtractor, extract_fields

DEFAULT_HIGHLIGHT_CLASS = "bg-yellow-200 dark:bg-yellow-800"
HIGHLIGHT_STYLE = "bold black on yellow"


def find_match_spans(text: str, query: str) -> list[tuple[int, int]]:
    """Non-overlapping, case-insensitive occurrences of ``query`` in ``text``, left to right."""
    if not query or not text:
        return []
    return [m.span() for m in re.finditer(re.escape(query), text, re.IGNORECASE)]


def highlight_spans(
    line: str, spans: list[tuple[int, int]], wrap: Callable[[str], str]
) -> str:
    """Wrap each (start, end) span of ``line``; spans must be sorted and non-overlapping."""
    if not spans:
        return line
    out: list[str] = []
    last = 0
    for a, b in spans:
        out.append(line[last:a])
        out.append(wrap(line[a:b]))
        last = b
    out.append(line[last:])
    return "".join(out)


def highlight(text: str, query: str, wrap: Callable[[str], str]) -> str:
    """
    Wrap every case-insensitive occurrence of ``query`` in ``text`` with ``wrap``.

    The matched substring keeps its original casing. Empty ``text`` or
    ``query`` returns ``text`` unchanged.
    """
    if not query or not text:
        return text
    return highlight_spans(text, find_match_spans(text, query), wrap)


def highlight_match(text: str, query: str, class_name: str = DEFAULT_HIGHLIGHT_CLASS) -> str:
    """HTML highlighting: each hit is wrapped in ``<span class="...">``."""
    return highlight(text, query, lambda match: f'<span class="{class_name}">{match}</span>')


def _label(ranked: RankedRecord[Any], fields: FieldExtractor) -> str:
    return " | ".join(text for text in extract_fields(ranked.record, fields) if text)


def _json_default(obj: Any) -> Any:
    return str(obj)


def to_json_bytes(results: Sequence[RankedRecord[Any]], query: str = "") -> bytes:
    payload = {
        "query": query,
        "count": len(results),
        "results": [r.to_dict() for r in results],
    }
    return orjson.dumps(payload, default=_json_default, option=orjson.OPT_INDENT_2)


def format_text(
    results: Sequence[RankedRecord[Any]],
    fields: FieldExtractor,
    query: str = "",
    highlight_hits: bool = False,
) -> str:
    out: list[str] = []
    for rank, ranked in enumerate(results, start=1):
        label = _label(ranked, fields)
        if highlight_hits:
            label = highlight(label, query, lambda match: f"[[{match}]]")
        out.append(f"{rank:4d}. [{ranked.strategy.tag} {ranked.score:.3f}] {label}")
    out.append(f"# query={query!r} results={len(results)}")
    return "\n".join(out)


def render_highlight_console(
    results: Sequence[RankedRecord[Any]], fields: FieldExtractor, query: str = ""
) -> None:
    console = Console()
    table = Table(title=f"Results for '{query}'" if query else "Results")
    table.add_column("#", justify="right")
    table.add_column("Strategy")
    table.add_column("Score", justify="right")
    table.add_column("Record")
    for rank, ranked in enumerate(results, start=1):
        label = _label(ranked, fields)
        text = Text(label)
        for a, b in find_match_spans(label, query):
            text.stylize(HIGHLIGHT_STYLE, a, b)
        table.add_row(str(rank), ranked.strategy.tag, f"{ranked.score:.3f}", text)
    console.print(table)
    console.print(f"[dim]results={len(results)}[/dim]")


def format_results(
    results: Sequence[RankedRecord[Any]],
    fmt: OutputFormat,
    fields: FieldExtractor,
    query: str = "",
) -> str:
    if fmt == OutputFormat.JSON:
        return to_json_bytes(results, query).decode("utf-8")
    if fmt == OutputFormat.HIGHLIGHT:
        # For non-interactive environments, fall back to text with simple markers
        return format_text(results, fields, query, highlight_hits=True)
    return format_text(results, fields, query)
