"""Ingestion exceptions: unreadable inputs and size computation failures."""

from .base import CompressionReportError


class IngestError(CompressionReportError):
    """Raised when a file's sizes cannot be computed.

    Ingestion errors are fatal: the run aborts before any report is rendered.
    """

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Cannot record sizes for {path}",
            details={"path": path, "reason": reason},
        )
        self.path = path
        self.reason = reason


class FileAccessError(IngestError):
    """Raised when an input file cannot be read."""

    def __init__(self, path: str, reason: str):
        CompressionReportError.__init__(
            self,
            f"Cannot access file: {path}",
            details={"path": path, "reason": reason},
        )
        self.path = path
        self.reason = reason
