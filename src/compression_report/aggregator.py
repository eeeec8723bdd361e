"""Per-file size recording and per-extension roll-up.

An ``Aggregator`` owns the state of one report run:

    aggregator = Aggregator(MinifiedMarker(r"\\.min"))
    for record in aggregator.gather(records):
        ...                      # records pass through unchanged
    data = aggregator.aggregate()

Ingestion is synchronous: each record's sizes are settled before the next
record is taken from the stream.
"""

from __future__ import annotations

import zlib
from collections.abc import Iterable, Iterator
from typing import Dict, Optional

from .exceptions import IngestError
from .logging_config import get_logger
from .math import gzip_size, safe_ratio
from .models import WILDCARD, ExtensionBucket, FileEntry, ReportData, SizeInfo
from .naming import MinifiedMarker
from .sources import FileRecord

logger = get_logger(__name__)


class Aggregator:
    """Collects file sizes and derives minification/compression statistics."""

    def __init__(self, marker: Optional[MinifiedMarker] = None):
        self.marker = marker or MinifiedMarker()
        self.files: Dict[str, FileEntry] = {}
        self.overwrites = 0

    def reset(self) -> None:
        self.files = {}
        self.overwrites = 0

    # ── Ingest ─────────────────────────────────────────────────

    def ingest(self, record: FileRecord) -> Optional[FileEntry]:
        """Record one file's sizes under its normalized name.

        Content-less records are not recorded and return None. If the same
        logical file is seen twice with the same classification, the later
        sizes replace the earlier ones.

        Raises:
            IngestError: If the gzip size cannot be computed
        """
        if record.is_null():
            logger.debug(f"Passing through null record: {record.relative}")
            return None

        name, minified = self.marker.split(record.relative)
        try:
            info = SizeInfo(size=len(record.contents), gzip_size=gzip_size(record.contents))
        except (TypeError, ValueError, zlib.error) as e:
            raise IngestError(record.relative, str(e)) from e

        entry = self.files.get(name)
        if entry is None:
            entry = FileEntry(name=name)
            self.files[name] = entry

        if minified:
            previous, entry.minified = entry.minified, info
        else:
            previous, entry.unminified = entry.unminified, info

        if previous is not None:
            self.overwrites += 1
            logger.debug(
                f"Replacing {'minified' if minified else 'unminified'} sizes for {name} "
                f"with {record.relative}"
            )

        logger.debug(
            f"Recorded {record.relative} as {'minified' if minified else 'unminified'} "
            f"{name}: {info.size} bytes, {info.gzip_size} gzipped"
        )
        return entry

    def gather(self, records: Iterable[FileRecord]) -> Iterator[FileRecord]:
        """Record every record in the stream and pass it on unchanged."""
        for record in records:
            self.ingest(record)
            yield record

    def consume(self, records: Iterable[FileRecord]) -> int:
        """Ingest a whole stream; returns the number of records seen."""
        seen = 0
        for _ in self.gather(records):
            seen += 1
        return seen

    # ── Aggregate ──────────────────────────────────────────────

    def aggregate(self) -> ReportData:
        """Compute per-file ratios and per-extension totals.

        Extension buckets are rebuilt from the recorded files on every call,
        so calling this repeatedly gives identical results.
        """
        names = sorted(self.files)
        overall = ExtensionBucket(WILDCARD)

        if not names:
            return ReportData(files=[], extensions={}, overall=overall)

        buckets: Dict[str, ExtensionBucket] = {}
        for name in names:
            entry = self.files[name]
            compute_file_ratios(entry)

            bucket = buckets.get(entry.extension)
            if bucket is None:
                bucket = buckets[entry.extension] = ExtensionBucket(entry.extension)

            fold_entry(bucket, entry)
            fold_entry(overall, entry)

        for bucket in buckets.values():
            compute_extension_ratios(bucket)
        compute_extension_ratios(overall)

        logger.debug(f"Aggregated {len(names)} files into {len(buckets)} extensions")
        return ReportData(
            files=[self.files[name] for name in names],
            extensions={ext: buckets[ext] for ext in sorted(buckets)},
            overall=overall,
        )


def compute_file_ratios(entry: FileEntry) -> None:
    """Set the minification and compression ratios of a file.

    The compression ratio compares the gzip size of the shipped variant with
    the size of the larger one. The minification ratio needs both variants.
    """
    if entry.unminified is None and entry.minified is None:
        raise ValueError(f"FileEntry {entry.name!r} has no recorded variant")

    entry.compression_size_ratio = safe_ratio(entry.dist.gzip_size, entry.src.size)

    if entry.unminified is not None and entry.minified is not None:
        entry.minification_size_ratio = safe_ratio(entry.minified.size, entry.unminified.size)
    else:
        entry.minification_size_ratio = None


def fold_entry(bucket: ExtensionBucket, entry: FileEntry) -> None:
    """Add one file's counts and sizes to a bucket."""
    has_unminified = entry.unminified is not None
    has_minified = entry.minified is not None

    if has_unminified and has_minified:
        bucket.count.both += 1
    elif has_minified:
        bucket.count.minified += 1
    elif has_unminified:
        bucket.count.unminified += 1
    else:
        raise ValueError(f"FileEntry {entry.name!r} has no recorded variant")

    bucket.size.unminified += entry.unminified.size if has_unminified else 0
    bucket.size.minified += entry.minified.size if has_minified else 0
    bucket.size.src += entry.src.size
    bucket.size.dist += entry.dist.size
    bucket.size.gzip += entry.dist.gzip_size


def compute_extension_ratios(bucket: ExtensionBucket) -> None:
    bucket.minification_ratio.count = safe_ratio(
        bucket.count.minified + bucket.count.both, bucket.count.total
    )
    bucket.minification_ratio.size = safe_ratio(bucket.size.dist, bucket.size.src)
    bucket.compression_ratio = safe_ratio(bucket.size.gzip, bucket.size.src)
