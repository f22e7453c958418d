"""Quiet formatter: unused file paths only."""

from ..models import UsageReport, display_path
from .base import BaseFormatter


class QuietFormatter(BaseFormatter):
    """Render just unused file paths, one per line."""

    def render(self, report: UsageReport) -> None:
        print(self.format(report))

    def format(self, report: UsageReport) -> str:
        return "\n".join(sorted(display_path(p) for p in report.unused_imports))
