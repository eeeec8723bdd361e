"""CLI entry point — registers all subcommands."""

from typing import Optional

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="compression-report",
    help="Compression Report - minification and gzip statistics for build output",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"compression-report {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """Measure how well build output is minified and compressed."""


# Import subcommands to register them
from .report import report as _report  # noqa: F401, E402
from .show_config import show_config as _show_config  # noqa: F401, E402
