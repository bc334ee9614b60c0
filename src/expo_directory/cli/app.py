"""
Root Typer application for the expo-directory CLI.
"""

from __future__ import annotations

import typer
from typer import Typer

from expo_directory.core.logging import configure_logging

app = Typer(
    name="expo-directory",
    help="expo-directory — exhibitor, team and partner lookups.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from importlib.metadata import PackageNotFoundError
        from importlib.metadata import version as pkg_version

        try:
            v = pkg_version("expo-directory")
        except PackageNotFoundError:
            from expo_directory import __version__ as v
        typer.echo(f"expo-directory {v}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG to stderr."),
) -> None:
    """expo-directory CLI — query and update the exhibitor directory."""
    configure_logging(level="DEBUG" if verbose else "WARNING", force=True)


# ── Command registration ─────────────────────────────────────────────────

from expo_directory.cli.directory import add, query, sheets  # noqa: E402
from expo_directory.cli.serve import serve  # noqa: E402

app.command("serve", help="Start the API server.")(serve)
app.command("query", help="Print a directory query as JSON.")(query)
app.command("add", help="Append an exhibitor.")(add)
app.command("sheets", help="List workbook sheets and row counts.")(sheets)
