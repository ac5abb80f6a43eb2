"""Presentation of parsed TypeIDs and diagnostics for the CLI layer.

All display-related logic lives here; no parsing, no encoding.  Rich is
imported lazily; without it the same rows are printed as aligned plain
text on stderr.
"""

from __future__ import annotations

import json
import sys
from datetime import datetime, timezone
from typing import Any

from typeid_codec.cli.console import console, emit, escape
from typeid_codec.core.generator import is_uuid7
from typeid_codec.core.models import Diagnostic, ParsedTypeId


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms, no I/O)
# ---------------------------------------------------------------------------

def _format_prefix(prefix: str) -> str:
    """Render an empty prefix as ``"(none)"``."""
    return prefix if prefix else "(none)"


def _format_timestamp(parsed: ParsedTypeId) -> str:
    """Render the embedded timestamp as ISO-8601 UTC, or ``"n/a"``.

    Only version-7 values carry a timestamp.
    """
    if not is_uuid7(parsed.value):
        return "n/a"
    moment = datetime.fromtimestamp(parsed.timestamp_ms / 1000, tz=timezone.utc)
    return moment.isoformat(timespec="milliseconds")


def build_rows(parsed: ParsedTypeId) -> list[tuple[str, str]]:
    """Return ``(label, value)`` rows describing *parsed*."""
    return [
        ("TypeID", parsed.typeid),
        ("Prefix", _format_prefix(parsed.prefix)),
        ("Suffix", parsed.suffix),
        ("UUID", str(parsed.uuid)),
        ("Version", str(parsed.uuid.version) if parsed.uuid.version else "n/a"),
        ("Timestamp", _format_timestamp(parsed)),
    ]


def to_json(parsed: ParsedTypeId) -> str:
    """Serialise *parsed* as a JSON object (value as canonical UUID)."""
    payload: dict[str, Any] = {
        "typeid": parsed.typeid,
        "prefix": parsed.prefix,
        "suffix": parsed.suffix,
        "uuid": str(parsed.uuid),
    }
    return json.dumps(payload, sort_keys=True)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _print_plain_rows(rows: list[tuple[str, str]]) -> None:
    """Render rows without Rich."""
    for label, value in rows:
        print(f"{label:<10} {value}", file=sys.stderr)


def render_parsed(parsed: ParsedTypeId, *, as_json: bool = False) -> None:
    """Show *parsed* as a table, or as one JSON line on stdout."""
    if as_json:
        emit(to_json(parsed))
        return

    rows = build_rows(parsed)
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_rows(rows)
        return

    table = Table(
        title="TypeID",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=10)
    table.add_column("Value")
    for label, value in rows:
        table.add_row(label, escape(value))
    console.print(table)


def render_diagnostic(diagnostic: Diagnostic) -> None:
    """Describe why an input was rejected."""
    console.print(
        f"[bold red]Invalid:[/bold red] {escape(diagnostic.message)} "
        f"[dim]({diagnostic.kind.value})[/dim]"
    )
    if diagnostic.position is not None:
        console.print(f"[yellow]Position:[/yellow] {diagnostic.position}")
    if diagnostic.symbol is not None:
        console.print(f"[yellow]Symbol:[/yellow] {escape(repr(diagnostic.symbol))}")
    if diagnostic.pattern is not None:
        console.print(f"[yellow]Pattern:[/yellow] {escape(diagnostic.pattern)}")
    if diagnostic.hint:
        console.print(f"[yellow]Hint:[/yellow] {escape(diagnostic.hint)}")
