"""JSON formatter for Compression Report."""

import json

from ..models import ReportData
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the statistics as JSON; not-applicable ratios become null."""

    def render(self, data: ReportData) -> None:
        print(self.format(data))

    def format(self, data: ReportData) -> str:
        return json.dumps(data.to_dict(), indent=2)
