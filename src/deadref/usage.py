"""UsageAggregator: project-wide used/unused bookkeeping.

Resolutions from both sub-scans are folded into sets, so the order in which
they arrive does not matter. Unused files are only meaningful once every
file has been scanned: a file referenced solely by a not-yet-processed
importer would otherwise look dead. ``complete()`` marks that barrier.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from .exceptions import IncompleteScanError
from .file_ops import is_path_ignored
from .resolution.models import Dependency, ProjectFile, Resolution, Unresolved


class UsageAggregator:
    """Merges resolutions into imported files, dependencies and unused files.

    Attributes:
        all_files: Every scanned project-relative path
        referenced_files: Every ProjectFile path seen, scanned or not
        dependencies: Package names as written in imports
        unresolved: Count of unresolved specifiers per reason
    """

    def __init__(
        self,
        all_files: Iterable[str],
        ignore_files: Iterable[str] = (),
        ignore_suffixes: Iterable[str] = (),
    ) -> None:
        self.all_files: frozenset[str] = frozenset(all_files)
        self.referenced_files: set[str] = set()
        self.dependencies: set[str] = set()
        self.unresolved: Counter[str] = Counter()
        self._ignore_files = list(ignore_files)
        self._ignore_suffixes = tuple(ignore_suffixes)
        self._complete = False

    def add(self, resolution: Resolution) -> None:
        """Record one resolution."""
        if isinstance(resolution, ProjectFile):
            self.referenced_files.add(resolution.path)
        elif isinstance(resolution, Dependency):
            self.dependencies.add(resolution.name)
        elif isinstance(resolution, Unresolved):
            self.unresolved[resolution.reason] += 1

    def add_all(self, resolutions: Iterable[Resolution]) -> None:
        for resolution in resolutions:
            self.add(resolution)

    def complete(self) -> None:
        """Mark the end of the scan; unused files become readable."""
        self._complete = True

    @property
    def is_complete(self) -> bool:
        return self._complete

    @property
    def imported_files(self) -> frozenset[str]:
        """Scanned files referenced at least once."""
        return frozenset(self.referenced_files & self.all_files)

    @property
    def imports(self) -> frozenset[str]:
        """Referenced project files plus dependency names."""
        return frozenset(self.referenced_files | self.dependencies)

    @property
    def unused_files(self) -> frozenset[str]:
        """AllFiles minus ImportedFiles, less anything configured as ignored.

        Raises:
            IncompleteScanError: If called before complete()
        """
        if not self._complete:
            raise IncompleteScanError()
        return frozenset(
            path
            for path in self.all_files - self.referenced_files
            if not self._is_ignored(path)
        )

    def _is_ignored(self, path: str) -> bool:
        if self._ignore_suffixes and path.lower().endswith(self._ignore_suffixes):
            return True
        return is_path_ignored(path, self._ignore_files)
