"""Scan pipeline: discover, then extract and resolve in two concurrent sub-scans.

Phase (a) reads every file so the known-path set is complete. Phase (b) runs
the script and stylesheet sub-scans as a fork/join on a thread pool; both
share one resolver, which is pure over the frozen phase (a) state. Unused
files are computed only after both sub-scans have joined.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .cleanup import move_unused_files
from .config import ScanConfig
from .exceptions import InvalidPathError, ManifestError, ParseError
from .logging_config import get_logger
from .manifest import load_declared_dependencies, unused_declared_dependencies
from .models import ScanStats, UsageReport
from .resolution import PathResolver, Resolution, ResolverConfig
from .scanning import CodeImportExtractor, SourceFile, SourceScanner, StyleImportExtractor
from .usage import UsageAggregator

logger = get_logger(__name__)


@dataclass
class SubScanResult:
    """Output of one sub-scan."""

    resolutions: list[Resolution] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)


class DeadCodeAnalyzer:
    """Runs a full scan of one frontend project."""

    def __init__(self, root_dir: Path, config: Optional[ScanConfig] = None):
        self.root_dir = Path(root_dir)
        self.config = config or ScanConfig()

    def analyze(self) -> UsageReport:
        """Scan the project and build the usage report.

        Raises:
            InvalidPathError: If the project root is not a directory
        """
        root = self.root_dir.resolve()
        if not root.is_dir():
            raise InvalidPathError(self.root_dir, "project root is not a directory")

        # Phase (a): enumerate and read everything
        scan = SourceScanner(root, self.config).scan()

        resolver = PathResolver(
            ResolverConfig(
                project_root=root,
                all_files=scan.all_files,
                alias_prefix=self.config.alias_prefix,
                alias_target=self.config.alias_target,
            )
        )

        # Phase (b): fork/join of the two independent sub-scans
        with ThreadPoolExecutor(max_workers=self.config.workers) as executor:
            scripts_future = executor.submit(self._scan_scripts, scan.scripts, resolver)
            styles_future = executor.submit(self._scan_styles, scan.stylesheets, resolver)
            script_result = scripts_future.result()
            style_result = styles_future.result()

        aggregator = UsageAggregator(
            scan.all_files,
            ignore_files=self.config.ignore_files,
            ignore_suffixes=self.config.ignored_suffixes,
        )
        aggregator.add_all(script_result.resolutions)
        aggregator.add_all(style_result.resolutions)
        aggregator.complete()

        stats = ScanStats(
            files_scanned=len(scan.scripts) + len(scan.stylesheets),
            files_skipped=sorted(scan.skipped + script_result.failed + style_result.failed),
            specifiers=len(script_result.resolutions) + len(style_result.resolutions),
            unresolved=dict(aggregator.unresolved),
        )

        report = UsageReport(
            imports=set(aggregator.imports),
            dependencies=set(aggregator.dependencies),
            unused_imports=set(aggregator.unused_files),
            unused_dependencies=self._unused_dependencies(root, aggregator.dependencies),
            stats=stats,
        )

        if self.config.delete_unused:
            stats.moved_files = move_unused_files(
                root, report.unused_imports, self.config.backup_dir
            )

        logger.info(
            f"Scan complete: {stats.files_scanned} files, {stats.specifiers} specifiers, "
            f"{len(report.unused_imports)} unused"
        )
        return report

    def _scan_scripts(self, files: list[SourceFile], resolver: PathResolver) -> SubScanResult:
        result = SubScanResult()
        # One parser per sub-scan; tree-sitter parsers are not thread-safe
        extractor = CodeImportExtractor()
        for source in files:
            try:
                specifiers = extractor.extract(source)
            except ParseError as e:
                result.failed.append(source.path)
                logger.warning(f"Parse error for {source.path}: {e.reason}")
                continue
            result.resolutions.extend(
                resolver.resolve(spec.origin_file, spec.text, spec.site_kind)
                for spec in specifiers
            )
        return result

    def _scan_styles(self, files: list[SourceFile], resolver: PathResolver) -> SubScanResult:
        result = SubScanResult()
        extractor = StyleImportExtractor()
        for source in files:
            result.resolutions.extend(
                resolver.resolve(spec.origin_file, spec.text, spec.site_kind)
                for spec in extractor.extract(source)
            )
        return result

    def _unused_dependencies(self, root: Path, used: set[str]) -> Optional[set[str]]:
        try:
            declared = load_declared_dependencies(root)
        except ManifestError as e:
            logger.warning(f"Skipping declared-dependency check: {e}")
            return None
        if declared is None:
            return None
        return unused_declared_dependencies(declared, used, self.config.ignore_dependencies)
