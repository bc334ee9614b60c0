"""
CLI utility helpers — settings overrides, dispatcher wiring, output.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import typer
from rich.console import Console
from rich.table import Table

from expo_directory.config import DirectorySchema, DirectorySettings, get_settings
from expo_directory.core.result import Result
from expo_directory.ops.dispatcher import DirectoryDispatcher
from expo_directory.ops.envelopes import Envelope
from expo_directory.sources import create_source

console = Console()
err_console = Console(stderr=True)


# ── Wiring ───────────────────────────────────────────────────────────────


def load_settings(workbook_dir: Path | None = None) -> DirectorySettings:
    """Cached settings, or a fresh copy pointed at ``workbook_dir``."""
    settings = get_settings()
    if workbook_dir is not None:
        settings = settings.model_copy(update={"workbook_dir": workbook_dir, "source_kind": "csv"})
    return settings


def make_dispatcher(workbook_dir: Path | None = None) -> DirectoryDispatcher:
    settings = load_settings(workbook_dir)
    schema = DirectorySchema.from_settings(settings)
    return DirectoryDispatcher(create_source(settings, schema), schema)


# ── Output helpers ───────────────────────────────────────────────────────


def output_result(
    result: Result[Envelope],
    *,
    reply: Callable[[Result[Envelope]], Envelope],
) -> None:
    """Print the reply envelope as JSON; errors go to stderr with exit code 1."""
    if result.is_err():
        err_console.print(f"[bold red]Error[/bold red]: {result.message}")
        raise typer.Exit(code=1)
    print_json(reply(result))


def print_json(payload: Any) -> None:
    console.print_json(json.dumps(payload, default=str))


def print_table(rows: list[dict[str, Any]], *, title: str = "") -> None:
    """Render a list of dicts as a Rich table."""
    if not rows:
        console.print("[dim]No items.[/dim]")
        return
    table = Table(title=title or None, show_lines=False, pad_edge=False)
    for col in rows[0]:
        table.add_column(col, overflow="fold")
    for row in rows:
        table.add_row(*(str(v) for v in row.values()))
    console.print(table)
