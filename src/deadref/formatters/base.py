"""Base formatter interface for deadref output rendering."""

from abc import ABC, abstractmethod

from ..models import UsageReport


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, report: UsageReport) -> None:
        """Render the report to stdout/stderr as appropriate."""

    @abstractmethod
    def format(self, report: UsageReport) -> str:
        """Return formatted string representation of the report."""
