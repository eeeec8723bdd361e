"""Base formatter interface for Compression Report output rendering."""

from abc import ABC, abstractmethod

from ..models import ReportData


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, data: ReportData) -> None:
        """Render the report to the console."""

    @abstractmethod
    def format(self, data: ReportData) -> str:
        """Return formatted string representation of the report."""
