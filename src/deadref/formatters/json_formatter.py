"""JSON formatter for deadref."""

import json

from ..models import UsageReport
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the report as JSON with sorted, deduplicated lists."""

    def render(self, report: UsageReport) -> None:
        print(self.format(report))

    def format(self, report: UsageReport) -> str:
        return json.dumps(report.to_dict(), indent=2, ensure_ascii=False)
