"""Config command -- print the effective configuration."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from ..exceptions import CompressionReportError
from . import app
from ._common import console, resolve_config


@app.command("config")
def show_config(
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Show the configuration a report run would use."""
    try:
        settings = resolve_config(config=config)
    except CompressionReportError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if as_json:
        print(json.dumps(settings.to_dict(), indent=2))
        return

    console.print("[bold cyan]Compression Report Configuration[/bold cyan]")
    console.print()
    for key, value in settings.to_dict().items():
        console.print(f"{key}: [yellow]{escape(repr(value))}[/yellow]", highlight=False)
