"""SuffixProbe: infer the file behind an extensionless reference."""

from __future__ import annotations

from collections.abc import Set

from .models import ProjectFile, Unresolved

# Tried in order; first member of the known file set wins.
SUFFIX_CANDIDATES = (
    ".ts",
    ".tsx",
    "/index.ts",
    "/index.tsx",
    ".d.ts",
    "/index.d.ts",
)

NOT_FOUND_REASON = (
    "unknown file type: not among the scanned files, "
    "or not a .ts, .tsx or .d.ts file"
)


def probe(path_without_extension: str, all_files: Set[str]) -> ProjectFile | Unresolved:
    """Resolve ``path_without_extension`` against the scanned file set.

    Only ``all_files`` is consulted, never the filesystem, so a result is
    consistent with the rest of the run.
    """
    base = path_without_extension.rstrip("/")
    for suffix in SUFFIX_CANDIDATES:
        candidate = base + suffix
        if candidate in all_files:
            return ProjectFile(candidate)
    return Unresolved(path_without_extension, NOT_FOUND_REASON)
