"""Report command -- scan a build directory and print statistics."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape

from ..api import run_report
from ..exceptions import CompressionReportError
from ..formatters import RichFormatter, get_formatter
from ..logging_config import setup_logging
from . import app
from ._common import console, resolve_config


@app.command()
def report(
    path: Path = typer.Argument(
        Path("."),
        help="Build output directory (or single file) to measure",
    ),
    minified_name: Optional[str] = typer.Option(
        None,
        "--minified-name",
        "-m",
        help="Regex marking minified file names (default: \\.min)",
    ),
    include: Optional[List[str]] = typer.Option(
        None,
        "--include",
        "-i",
        help="Glob pattern of files to measure (repeatable)",
    ),
    exclude: Optional[List[str]] = typer.Option(
        None,
        "--exclude",
        "-e",
        help="Glob pattern of files to skip (repeatable)",
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: rich, json, csv",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors (overrides --verbose)",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also append log records to this file",
        dir_okay=False,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
):
    """
    Report raw, minified and gzip sizes of build output.

    Files named with the minified marker (e.g. [cyan]app.min.js[/cyan]) are
    paired with their source ([cyan]app.js[/cyan]) and reported as one file.

    [bold cyan]Examples:[/bold cyan]

      compression-report report dist

      compression-report report dist --include "*.css" --include "*.js"

      compression-report report dist --minified-name "-min" --format json

      compression-report report dist --verbose --log-file report.log
    """
    try:
        settings = resolve_config(
            config=config,
            minified_name=minified_name,
            include=include,
            exclude=exclude,
            output_format=output_format,
            verbose=verbose,
        )
        setup_logging(
            verbose=settings.verbose,
            quiet=quiet,
            log_file=str(log_file) if log_file else None,
        )

        if settings.output_format == "rich":
            formatter = RichFormatter(console)
        else:
            formatter = get_formatter(settings.output_format)

        run_report(path, config=settings, formatter=formatter)

    except CompressionReportError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        raise typer.Exit(130)
