"""Report models for deadref."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


def display_path(path: str) -> str:
    """Path text that encodes as UTF-8; undecodable name bytes become ``\\xNN``."""
    try:
        raw = path.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        # lone surrogates that did not come from os.fsdecode
        return path.encode("utf-8", "backslashreplace").decode("utf-8")
    return raw.decode("utf-8", "backslashreplace")


def _display_sorted(paths: set[str]) -> list[str]:
    return sorted(display_path(p) for p in paths)


@dataclass
class ScanStats:
    """Counters describing one run."""

    files_scanned: int = 0
    files_skipped: list[str] = field(default_factory=list)
    specifiers: int = 0
    unresolved: dict[str, int] = field(default_factory=dict)
    moved_files: list[str] = field(default_factory=list)


@dataclass
class UsageReport:
    """Everything a run produces.

    Attributes:
        imports: Referenced project files plus dependency names
        dependencies: Package specifiers as written in imports
        unused_imports: Scanned files that nothing references
        unused_dependencies: Declared packages never imported, or None when
            no package.json was available
        stats: Run counters, not part of the serialized report
    """

    imports: set[str]
    dependencies: set[str]
    unused_imports: set[str]
    unused_dependencies: Optional[set[str]] = None
    stats: ScanStats = field(default_factory=ScanStats)

    def to_dict(self) -> dict[str, Any]:
        """Report fields as sorted, UTF-8 safe lists, ready for JSON."""
        data: dict[str, Any] = {
            "imports": _display_sorted(self.imports),
            "dependencies": _display_sorted(self.dependencies),
            "unused_imports": _display_sorted(self.unused_imports),
        }
        if self.unused_dependencies is not None:
            data["unused_dependencies"] = _display_sorted(self.unused_dependencies)
        return data
