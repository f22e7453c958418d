"""Source discovery: enumerate project files by glob and read their text.

This is phase (a) of a scan. Every matching file is read up front so that
the set of known paths is complete before any specifier is resolved.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

from ..config import ScanConfig
from ..exceptions import FileReadError
from ..file_ops import safe_read_file
from ..logging_config import get_logger
from .models import SourceFile, SourceKind

logger = get_logger(__name__)

# Output folders that can sit under src/ but never hold project sources.
SKIP_DIRS = frozenset({"node_modules", ".git"})


@dataclass
class ScanResult:
    """Outcome of phase (a).

    Attributes:
        scripts: Readable script files
        stylesheets: Readable stylesheet files
        all_files: Every enumerated path, frozen once the scan ends
        skipped: Paths that were enumerated but could not be read
    """

    scripts: list[SourceFile] = field(default_factory=list)
    stylesheets: list[SourceFile] = field(default_factory=list)
    all_files: frozenset[str] = frozenset()
    skipped: list[str] = field(default_factory=list)


class SourceScanner:
    """Enumerates script and stylesheet files under a project root."""

    def __init__(self, root_dir: Path, config: ScanConfig):
        self.root_dir = Path(root_dir)
        self.config = config
        self._backup_prefix = PurePosixPath(config.backup_dir).as_posix().rstrip("/") + "/"
        logger.debug(f"Initialized {self.__class__.__name__} for {self.root_dir}")

    def enumerate(self, patterns: list[str]) -> list[str]:
        """Project-relative paths matching any of ``patterns``, sorted."""
        found: set[str] = set()
        for pattern in patterns:
            for filepath in self.root_dir.glob(pattern):
                if not filepath.is_file():
                    continue
                rel = filepath.relative_to(self.root_dir).as_posix()
                if any(part in SKIP_DIRS for part in PurePosixPath(rel).parts):
                    continue
                if rel.startswith(self._backup_prefix):
                    continue
                found.add(rel)
        return sorted(found)

    def scan(self) -> ScanResult:
        """Enumerate and read every script and stylesheet.

        Files that fail to read are logged and skipped but still count as
        known paths, so references to them resolve consistently.
        """
        result = ScanResult()
        known: set[str] = set()
        groups = (
            (SourceKind.SCRIPT, self.config.script_patterns, result.scripts),
            (SourceKind.STYLESHEET, self.config.style_patterns, result.stylesheets),
        )

        for kind, patterns, bucket in groups:
            for rel in self.enumerate(patterns):
                known.add(rel)
                try:
                    text = self._read(rel)
                except FileReadError as e:
                    result.skipped.append(rel)
                    logger.warning(f"Skipping {rel}: {e.reason}")
                    continue
                bucket.append(SourceFile(path=rel, kind=kind, text=text))

        result.all_files = frozenset(known)
        logger.info(
            f"Discovered {len(result.all_files)} files "
            f"({len(result.scripts)} scripts, {len(result.stylesheets)} stylesheets, "
            f"{len(result.skipped)} unreadable)"
        )
        return result

    def _read(self, rel: str) -> str:
        filepath = self.root_dir / rel
        try:
            size = filepath.stat().st_size
        except OSError as e:
            raise FileReadError(filepath, f"Cannot stat: {e}")
        if size > self.config.max_file_size_bytes:
            raise FileReadError(filepath, f"File too large ({size} bytes)")
        return safe_read_file(filepath)
