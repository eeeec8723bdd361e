"""Exception hierarchy for Compression Report."""

from .base import CompressionReportError
from .config import ConfigurationError, InvalidConfigError
from .ingest import FileAccessError, IngestError

__all__ = [
    "CompressionReportError",
    "ConfigurationError",
    "InvalidConfigError",
    "IngestError",
    "FileAccessError",
]
