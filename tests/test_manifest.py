"""Tests for the package.json cross-check."""

import pytest

from deadref.exceptions import ManifestError
from deadref.manifest import (
    load_declared_dependencies,
    package_name,
    unused_declared_dependencies,
)


class TestPackageName:
    @pytest.mark.parametrize(
        "spec,expected",
        [
            ("react", "react"),
            ("react-dom/client", "react-dom"),
            ("@mui/material", "@mui/material"),
            ("@mui/material/Button", "@mui/material"),
            ("@scope", "@scope"),
        ],
    )
    def test_package_name(self, spec, expected):
        assert package_name(spec) == expected


class TestLoadDeclaredDependencies:
    def test_no_manifest(self, tmp_path):
        assert load_declared_dependencies(tmp_path) is None

    def test_both_sections(self, write_project):
        root = write_project(
            {},
            package_json={
                "name": "app",
                "dependencies": {"react": "^18"},
                "devDependencies": {"typescript": "^5"},
                "peerDependencies": {"ignored": "*"},
            },
        )
        assert load_declared_dependencies(root) == {"react", "typescript"}

    def test_missing_sections(self, write_project):
        root = write_project({}, package_json={"name": "app"})
        assert load_declared_dependencies(root) == set()

    def test_invalid_json(self, tmp_path):
        (tmp_path / "package.json").write_text("{ not json")
        with pytest.raises(ManifestError):
            load_declared_dependencies(tmp_path)

    def test_wrong_section_type(self, write_project):
        root = write_project({}, package_json={"dependencies": ["react"]})
        with pytest.raises(ManifestError):
            load_declared_dependencies(root)

    def test_top_level_not_object(self, tmp_path):
        (tmp_path / "package.json").write_text("[]")
        with pytest.raises(ManifestError):
            load_declared_dependencies(tmp_path)


class TestUnusedDeclaredDependencies:
    def test_subpath_imports_count_as_use(self):
        declared = {"react", "react-dom", "@mui/material", "lodash"}
        used = {"react", "react-dom/client", "@mui/material/Button"}
        assert unused_declared_dependencies(declared, used) == {"lodash"}

    def test_ignore_patterns(self):
        declared = {"@types/react", "@types/node", "eslint", "lodash"}
        result = unused_declared_dependencies(declared, set(), ["@types/*", "eslint"])
        assert result == {"lodash"}
