"""Rich terminal formatter for deadref."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..models import UsageReport, display_path
from .base import BaseFormatter

console = Console()


class RichFormatter(BaseFormatter):
    """Summary panel followed by unused files and unused packages."""

    def render(self, report: UsageReport) -> None:
        self._print_summary(report)
        self._print_unused(report)

    def format(self, report: UsageReport) -> str:
        # Rich output goes directly to console; return empty string
        self.render(report)
        return ""

    def _print_summary(self, report: UsageReport) -> None:
        stats = report.stats
        lines = [
            f"Files scanned: [bold]{stats.files_scanned}[/bold]",
            f"Specifiers resolved: [bold]{stats.specifiers}[/bold]",
            f"Referenced: [green]{len(report.imports)}[/green]"
            f"  (packages: {len(report.dependencies)})",
            f"Unused files: [red]{len(report.unused_imports)}[/red]",
        ]
        if stats.files_skipped:
            lines.append(f"Skipped (unreadable or unparsable): [yellow]{len(stats.files_skipped)}[/yellow]")
        if stats.moved_files:
            lines.append(f"Moved to backup: [yellow]{len(stats.moved_files)}[/yellow]")
        console.print(Panel("\n".join(lines), title="[bold cyan]deadref[/bold cyan]", expand=False))

    def _print_unused(self, report: UsageReport) -> None:
        if report.unused_imports:
            table = Table(title="Unused files", show_header=False, box=None)
            table.add_column("path", style="red")
            for path in sorted(display_path(p) for p in report.unused_imports):
                table.add_row(escape(path))
            console.print(table)
        else:
            console.print("[green]No unused files found.[/green]")

        if report.unused_dependencies:
            table = Table(title="Declared but never imported", show_header=False, box=None)
            table.add_column("package", style="yellow")
            for name in sorted(report.unused_dependencies):
                table.add_row(escape(display_path(name)))
            console.print(table)

        if report.stats.unresolved:
            table = Table(title="Unresolved specifiers")
            table.add_column("Reason")
            table.add_column("Count", justify="right")
            for reason, count in sorted(report.stats.unresolved.items(), key=lambda x: -x[1]):
                table.add_row(reason, str(count))
            console.print(table)
