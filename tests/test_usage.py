"""Tests for UsageAggregator."""

import pytest

from deadref.exceptions import IncompleteScanError
from deadref.resolution import Dependency, ProjectFile, Unresolved
from deadref.usage import UsageAggregator

ALL_FILES = {"src/a.ts", "src/b.ts", "src/c.less", "src/d.svg.ts"}


class TestAggregation:
    """Folding resolutions into sets."""

    def test_imported_and_unused_partition_all_files(self):
        agg = UsageAggregator(ALL_FILES)
        agg.add_all([ProjectFile("src/a.ts"), ProjectFile("src/c.less")])
        agg.complete()
        assert agg.imported_files == {"src/a.ts", "src/c.less"}
        assert agg.unused_files == {"src/b.ts", "src/d.svg.ts"}
        assert agg.imported_files | agg.unused_files == ALL_FILES
        assert not agg.imported_files & agg.unused_files

    def test_dependencies_collected(self):
        agg = UsageAggregator(ALL_FILES)
        agg.add_all([Dependency("react"), Dependency("react"), Dependency("@mui/material")])
        assert agg.dependencies == {"react", "@mui/material"}

    def test_unresolved_counts_reasons_only(self):
        agg = UsageAggregator(ALL_FILES)
        agg.add_all([Unresolved("~x", "external"), Unresolved("~y", "external")])
        agg.complete()
        assert agg.unresolved == {"external": 2}
        assert agg.imports == frozenset()
        assert agg.unused_files == ALL_FILES

    def test_unscanned_reference_not_imported(self):
        agg = UsageAggregator(ALL_FILES)
        agg.add(ProjectFile("src/assets/logo.png"))
        agg.complete()
        assert agg.imported_files == frozenset()
        assert "src/assets/logo.png" in agg.imports
        assert agg.unused_files <= agg.all_files

    def test_imports_combine_files_and_packages(self):
        agg = UsageAggregator(ALL_FILES)
        agg.add_all([ProjectFile("src/a.ts"), Dependency("react")])
        assert agg.imports == {"src/a.ts", "react"}

    def test_order_independent(self):
        resolutions = [ProjectFile("src/a.ts"), Dependency("react"), ProjectFile("src/b.ts")]
        forward = UsageAggregator(ALL_FILES)
        forward.add_all(resolutions)
        forward.complete()
        backward = UsageAggregator(ALL_FILES)
        backward.add_all(reversed(resolutions))
        backward.complete()
        assert forward.unused_files == backward.unused_files
        assert forward.imports == backward.imports


class TestCompletionBarrier:
    """Unused files only after complete()."""

    def test_unused_before_complete_raises(self):
        agg = UsageAggregator(ALL_FILES)
        with pytest.raises(IncompleteScanError):
            agg.unused_files

    def test_is_complete(self):
        agg = UsageAggregator(ALL_FILES)
        assert not agg.is_complete
        agg.complete()
        assert agg.is_complete

    def test_imported_files_readable_any_time(self):
        agg = UsageAggregator(ALL_FILES)
        agg.add(ProjectFile("src/a.ts"))
        assert agg.imported_files == {"src/a.ts"}


class TestIgnores:
    """Configured ignores never appear as unused."""

    def test_ignore_patterns(self):
        agg = UsageAggregator(ALL_FILES, ignore_files=["src/a.ts", "**/*.less"])
        agg.complete()
        assert agg.unused_files == {"src/b.ts", "src/d.svg.ts"}

    def test_ignore_suffixes_match_last_extension(self):
        agg = UsageAggregator(ALL_FILES, ignore_suffixes=[".less", ".svg"])
        agg.complete()
        assert agg.unused_files == {"src/a.ts", "src/b.ts", "src/d.svg.ts"}

    def test_ignored_files_still_known(self):
        agg = UsageAggregator(ALL_FILES, ignore_files=["src/**"])
        agg.complete()
        assert agg.unused_files == frozenset()
        assert agg.all_files == ALL_FILES

    def test_negated_pattern_reported_unused(self):
        agg = UsageAggregator(ALL_FILES, ignore_files=["src/**", "!src/b.ts"])
        agg.complete()
        assert agg.unused_files == {"src/b.ts"}
