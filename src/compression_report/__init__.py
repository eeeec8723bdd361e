"""
Compression Report - minification and gzip statistics for build output.

Pairs minified files with their sources, measures raw and gzip sizes, and
reports per-file, per-extension and overall ratios.
"""

__version__ = "0.2.0"

from .aggregator import Aggregator
from .api import run_report
from .config import ReportConfig, load_config
from .models import ExtensionBucket, FileEntry, ReportData, SizeInfo
from .naming import MinifiedMarker
from .sources import FileRecord, scan_paths

__all__ = [
    "run_report",  # Main entry point
    "Aggregator",
    "ReportConfig",
    "load_config",
    "MinifiedMarker",
    "FileRecord",
    "scan_paths",
    "FileEntry",
    "ExtensionBucket",
    "ReportData",
    "SizeInfo",
]
