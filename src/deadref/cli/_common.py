"""Shared CLI helpers."""

from pathlib import Path

from rich.console import Console

from ..exceptions import DeadrefError
from ..models import UsageReport

console = Console()


def write_report(root: Path, report_file: str, content: str) -> Path:
    """Write ``content`` to ``report_file``, relative paths resolved under ``root``."""
    target = Path(report_file)
    if not target.is_absolute():
        target = root / target
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    except OSError as e:
        raise DeadrefError(f"Cannot write report: {target}", details={"reason": str(e)})
    return target


def exit_code_for(report: UsageReport, fail_on_unused: bool) -> int:
    """0 unless ``fail_on_unused`` is set and unused files were found."""
    return 1 if fail_on_unused and report.unused_imports else 0
