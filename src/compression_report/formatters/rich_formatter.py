"""Rich terminal formatter for Compression Report."""

import io
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..models import ExtensionBucket, FileEntry, ReportData
from ._display import format_bytes, format_percent, opinion, pluralize, start_case
from .base import BaseFormatter

console = Console()

FILE_COLUMNS = [
    "file",
    "size",
    "minified size",
    "gzipped size",
    "min+gzip size",
    "minification ratio",
    "compression ratio",
    "bytes over wire",
]

EXTENSION_COLUMNS = [
    "extension",
    "count",
    "size",
    "minified size",
    "best gzip size",
    "minification ratio",
    "compression ratio",
    "bytes over wire",
]


def _table(title: str, columns: list[str]) -> Table:
    table = Table(title=title, title_justify="left", title_style="bold")
    for i, column in enumerate(columns):
        table.add_column(start_case(column), justify="left" if i == 0 else "right")
    return table


def _file_row(entry: FileEntry) -> list[str]:
    unminified, minified = entry.unminified, entry.minified
    return [
        escape(entry.name),
        format_bytes(unminified.size if unminified else None),
        format_bytes(minified.size if minified else None),
        format_bytes(unminified.gzip_size if unminified else None),
        format_bytes(minified.gzip_size if minified else None),
        format_percent(entry.minification_size_ratio),
        format_percent(entry.compression_size_ratio),
        format_bytes(entry.bytes_over_wire),
    ]


def _extension_row(bucket: ExtensionBucket) -> list[str]:
    return [
        escape(bucket.name),
        str(bucket.count.total),
        format_bytes(bucket.size.unminified),
        format_bytes(bucket.size.minified),
        format_bytes(bucket.size.gzip),
        format_percent(bucket.minification_ratio.size),
        format_percent(bucket.compression_ratio),
        format_bytes(bucket.size.gzip),
    ]


class RichFormatter(BaseFormatter):
    """File count, missing-minification summary and three statistics tables."""

    def __init__(self, output: Optional[Console] = None):
        self.console = output or console

    def render(self, data: ReportData) -> None:
        self._print(self.console, data)

    def format(self, data: ReportData) -> str:
        buffer = io.StringIO()
        capture = Console(file=buffer, width=160, color_system=None, highlight=False)
        self._print(capture, data)
        return buffer.getvalue()

    def _print(self, out: Console, data: ReportData) -> None:
        if data.is_empty:
            out.print("no data")
            return

        out.print(pluralize("file", data.file_count))
        out.print()
        self._print_missing(out, data)
        out.print()

        files = _table("File Statistics", FILE_COLUMNS)
        for entry in data.files:
            files.add_row(*_file_row(entry))
        out.print(files)
        out.print()

        extensions = _table("Extension Statistics", EXTENSION_COLUMNS)
        for bucket in data.extensions.values():
            extensions.add_row(*_extension_row(bucket))
        out.print(extensions)
        out.print()

        overall = _table("Overall Statistics", EXTENSION_COLUMNS)
        overall.add_row(*_extension_row(data.overall))
        out.print(overall)

    def _print_missing(self, out: Console, data: ReportData) -> None:
        missing = data.missing_minification
        if not missing:
            out.print(f"{opinion(True)} all files minified.  Great work!")
            return

        out.print(f"Missing minification: {len(missing)}/{data.file_count}")
        for entry in missing:
            out.print(f"  {opinion(False)} {escape(entry.name)}")
