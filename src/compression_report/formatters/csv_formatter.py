"""CSV formatter for Compression Report."""

import csv
import io
from typing import Optional

from ..models import ExtensionBucket, FileEntry, ReportData
from .base import BaseFormatter

HEADER = [
    "scope", "name", "extension", "count",
    "size", "minified_size", "gzip_size", "min_gzip_size",
    "minification_ratio", "compression_ratio", "bytes_over_wire",
]


def _cell(value: Optional[float]) -> str:
    return "" if value is None else f"{value:.4f}"


def _file_row(f: FileEntry) -> list:
    return [
        "file", f.name, f.extension, 1,
        f.unminified.size if f.unminified else "",
        f.minified.size if f.minified else "",
        f.unminified.gzip_size if f.unminified else "",
        f.minified.gzip_size if f.minified else "",
        _cell(f.minification_size_ratio),
        _cell(f.compression_size_ratio),
        f.bytes_over_wire,
    ]


def _bucket_row(scope: str, bucket: ExtensionBucket) -> list:
    # Buckets only track the gzip size of what ships, so the per-variant
    # gzip columns stay empty.
    return [
        scope, bucket.name, "" if bucket.is_wildcard else bucket.name, bucket.count.total,
        bucket.size.unminified, bucket.size.minified, "", "",
        _cell(bucket.minification_ratio.size),
        _cell(bucket.compression_ratio),
        bucket.size.gzip,
    ]


class CsvFormatter(BaseFormatter):
    """Render statistics as CSV, sizes in bytes.

    One row per file, then one per extension, then the overall totals. The
    ``scope`` column tells them apart.
    """

    def render(self, data: ReportData) -> None:
        print(self.format(data), end="")

    def format(self, data: ReportData) -> str:
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(HEADER)
        if data.is_empty:
            return output.getvalue()

        for f in data.files:
            writer.writerow(_file_row(f))
        for bucket in data.extensions.values():
            writer.writerow(_bucket_row("extension", bucket))
        writer.writerow(_bucket_row("overall", data.overall))
        return output.getvalue()
