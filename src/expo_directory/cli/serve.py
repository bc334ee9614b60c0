"""
CLI: ``expo-directory serve`` — start the API server.
"""

from __future__ import annotations

import typer

from expo_directory.cli.utils import console, load_settings


def serve(
    host: str | None = typer.Option(None, "--host", "-h", help="Bind address [default: settings]"),
    port: int | None = typer.Option(None, "--port", "-p", help="Bind port [default: settings]"),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on changes"),
    log_level: str = typer.Option("info", "--log-level"),
) -> None:
    """Start the directory REST API server."""
    import uvicorn

    settings = load_settings()
    host = host or settings.host
    port = port or settings.port

    console.print(f"[bold green]Starting expo-directory API[/bold green] on {host}:{port}")
    uvicorn.run(
        "expo_directory.api:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )
