"""Public API for Compression Report.

Example:
    >>> from compression_report import run_report
    >>>
    >>> # Scan a build directory and print the tables
    >>> data = run_report("dist")
    >>>
    >>> # Records from elsewhere, custom marker, no output
    >>> data = run_report(records=stream, minified_name=r"-min", render=False)
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Optional

from .aggregator import Aggregator
from .config import ReportConfig, load_config
from .formatters import BaseFormatter, get_formatter
from .logging_config import get_logger
from .models import ReportData
from .naming import MinifiedMarker
from .sources import FileRecord, scan_paths

logger = get_logger(__name__)


def build_aggregator(config: ReportConfig) -> Aggregator:
    return Aggregator(MinifiedMarker(config.minified_name))


def run_report(
    path: str | Path = ".",
    records: Optional[Iterable[FileRecord]] = None,
    config: Optional[ReportConfig] = None,
    formatter: Optional[BaseFormatter] = None,
    render: bool = True,
    config_file: Optional[Path] = None,
    **overrides,
) -> ReportData:
    """Ingest a stream of files, aggregate, and render the report once.

    Args:
        path: Directory to scan when ``records`` is not given
        records: Pre-built record stream (skips scanning)
        config: Ready configuration; otherwise loaded via load_config
        formatter: Formatter to render with; defaults to config.output_format
        render: Render the report after aggregating
        config_file: Optional explicit config file path
        **overrides: Configuration overrides (e.g., minified_name=r"-min")

    Returns:
        The aggregated ReportData

    Raises:
        CompressionReportError: If configuration or ingestion fails. Nothing
            is rendered in that case.
    """
    if config is None:
        config = load_config(config_file=config_file, **overrides)

    if records is None:
        logger.info(f"Scanning {path}")
        records = scan_paths(Path(path), include=config.include, exclude=config.exclude)

    aggregator = build_aggregator(config)
    seen = aggregator.consume(records)
    logger.info(f"Ingested {len(aggregator.files)} files from {seen} records")

    data = aggregator.aggregate()

    if render:
        (formatter or get_formatter(config.output_format)).render(data)

    return data
