"""Tests for the suffix probe."""

from deadref.resolution import ProjectFile, Unresolved, probe
from deadref.resolution.suffix_probe import NOT_FOUND_REASON, SUFFIX_CANDIDATES


class TestProbe:
    """Candidate order and membership."""

    def test_candidate_order(self):
        assert SUFFIX_CANDIDATES == (
            ".ts",
            ".tsx",
            "/index.ts",
            "/index.tsx",
            ".d.ts",
            "/index.d.ts",
        )

    def test_plain_ts(self):
        assert probe("src/a", {"src/a.ts"}) == ProjectFile("src/a.ts")

    def test_ts_beats_tsx(self):
        assert probe("src/a", {"src/a.ts", "src/a.tsx"}) == ProjectFile("src/a.ts")

    def test_file_beats_directory_index(self):
        files = {"src/Button.tsx", "src/Button/index.ts"}
        assert probe("src/Button", files) == ProjectFile("src/Button.tsx")

    def test_directory_index(self):
        assert probe("src/Button", {"src/Button/index.tsx"}) == ProjectFile("src/Button/index.tsx")

    def test_declaration_files_last(self):
        assert probe("src/types", {"src/types.d.ts"}) == ProjectFile("src/types.d.ts")
        assert probe("src/types", {"src/types/index.d.ts"}) == ProjectFile("src/types/index.d.ts")

    def test_trailing_slash(self):
        assert probe("src/utils/", {"src/utils/index.ts"}) == ProjectFile("src/utils/index.ts")

    def test_not_found(self):
        result = probe("src/missing", {"src/other.ts"})
        assert result == Unresolved("src/missing", NOT_FOUND_REASON)

    def test_only_known_files_consulted(self, tmp_path):
        (tmp_path / "a.ts").write_text("")
        assert isinstance(probe(str(tmp_path / "a"), frozenset()), Unresolved)
