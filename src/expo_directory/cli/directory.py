"""
CLI: ``expo-directory query | add | sheets`` — directory operations.

Each command builds a ``DirectoryDispatcher`` over the configured row
source (or ``--workbook-dir``) and prints the same envelope the HTTP API
would return.
"""

from __future__ import annotations

from pathlib import Path

import typer

from expo_directory.cli.utils import err_console, make_dispatcher, output_result, print_table
from expo_directory.core.errors import DirectoryError
from expo_directory.ops.envelopes import query_reply, submit_reply
from expo_directory.ops.requests import AppendExhibitorRequest, DirectoryQuery

WorkbookDir = typer.Option(
    None,
    "--workbook-dir",
    "-w",
    help="Directory holding <sheet>.csv files [default: EXPO_WORKBOOK_DIR]",
    file_okay=False,
)


def query(
    entity_type: str | None = typer.Option(None, "--type", "-t", help="exhibitors, team or partners"),
    letter: str | None = typer.Option(None, "--letter", "-l", help="Single letter A-Z"),
    workbook_dir: Path | None = WorkbookDir,
) -> None:
    """Print a directory query envelope as JSON."""
    dispatcher = make_dispatcher(workbook_dir)
    result = dispatcher.query(DirectoryQuery(entity_type=entity_type, letter=letter))
    output_result(result, reply=query_reply)


def add(
    email: str = typer.Option("", "--email", help="Contact email"),
    company: str = typer.Option("", "--company", help="Exhibiting company"),
    person_name: str = typer.Option("", "--person-name", help="Contact person"),
    workbook_dir: Path | None = WorkbookDir,
) -> None:
    """Append one exhibitor row."""
    dispatcher = make_dispatcher(workbook_dir)
    request = AppendExhibitorRequest(email=email, company=company, person_name=person_name)
    output_result(dispatcher.append_exhibitor(request), reply=submit_reply)


def sheets(workbook_dir: Path | None = WorkbookDir) -> None:
    """List the sheets of the configured workbook with their row counts."""
    source = make_dispatcher(workbook_dir).source
    try:
        infos = source.describe()
    except DirectoryError as e:
        err_console.print(f"[bold red]Error[/bold red]: {e.message}")
        raise typer.Exit(code=1) from e
    print_table(
        [{"sheet": info.name, "rows": info.row_count} for info in infos],
        title=f"Sheets in {source.name}",
    )
