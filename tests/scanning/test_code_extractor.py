"""Tests for CodeImportExtractor."""

import pytest

from deadref.exceptions import ParseError
from deadref.scanning import CodeImportExtractor, SiteKind, SourceFile, SourceKind


def _extract(code: str, path: str = "src/sample.tsx"):
    return CodeImportExtractor().extract(SourceFile(path=path, kind=SourceKind.SCRIPT, text=code))


def _texts(code: str, path: str = "src/sample.tsx") -> set:
    return {spec.text for spec in _extract(code, path)}


class TestStaticImports:
    """Import declarations and re-exports."""

    def test_collects_every_import_source(self):
        code = """
import {
  type ImportDeclaration,
  parse,
  type TsType,
} from '@swc/core'
import Visitor from '../visitor'
import { glob } from 'glob'
import path from 'path'
import fs from 'fs'
import { styleText } from 'util'
import { hasFileExtension } from '../common'
"""
        assert _texts(code, "src/tool.ts") == {
            "../common",
            "fs",
            "util",
            "@swc/core",
            "path",
            "glob",
            "../visitor",
        }

    def test_side_effect_and_type_imports(self):
        code = "import './polyfills';\nimport type { Props } from './types';\n"
        assert _texts(code, "src/a.ts") == {"./polyfills", "./types"}

    def test_re_exports_count_as_imports(self):
        code = "export { Button } from './Button';\nexport * from './Input';\n"
        specs = _extract(code, "src/components/index.ts")
        assert {s.text for s in specs} == {"./Button", "./Input"}
        assert all(s.site_kind is SiteKind.STATIC_IMPORT for s in specs)

    def test_local_export_has_no_source(self):
        assert _texts("const a = 1;\nexport { a };\n", "src/a.ts") == set()

    def test_origin_file_recorded(self):
        specs = _extract("import x from './x';\n", "src/pages/home.ts")
        assert specs[0].origin_file == "src/pages/home.ts"


class TestDynamicImports:
    """import() calls at any nesting depth."""

    def test_nested_in_chained_calls(self):
        code = """
const index: Map<number, React.ComponentType<Props>> = new Map()
  .set(
    20,
    React.lazy(() => import('./Type20'))
  )
  .set(
    2,
    React.lazy(() => import('./Type19'))
  );
"""
        specs = _extract(code, "src/steps.ts")
        assert {s.text for s in specs} == {"./Type19", "./Type20"}
        assert all(s.site_kind is SiteKind.DYNAMIC_IMPORT for s in specs)

    def test_non_literal_argument_contributes_nothing(self):
        code = "const name = './x';\nconst load = () => import(name);\n"
        assert _extract(code, "src/a.ts") == []

    def test_template_argument_contributes_nothing(self):
        code = "const load = (n: string) => import(`./pages/${n}`);\n"
        assert _extract(code, "src/a.ts") == []


class TestAssetAttributes:
    """JSX attributes carrying a recognized extension."""

    def test_plain_and_braced_strings(self):
        code = """
export default function DomStringSrcTest() {
  return (
    <div>
      {/* direct string paths */}
      <img src={"./assets/b.jpg"} alt="braced string literal" />
      <img src="./assets/a.jpg" alt="plain string literal" />
    </div>
  );
}
"""
        specs = _extract(code)
        assert {s.text for s in specs} == {"./assets/b.jpg", "./assets/a.jpg"}
        assert all(s.site_kind is SiteKind.ASSET_ATTRIBUTE for s in specs)

    def test_template_literal_segments(self):
        code = "export const Logo = ({ base }) => <img src={`${base}/img/logo.svg`} />;\n"
        assert _texts(code) == {"/img/logo.svg"}

    def test_attributes_without_asset_extension_ignored(self):
        code = (
            'export const A = () => (\n'
            '  <a href="/about" className="link" data-file="notes.txt">About</a>\n'
            ');\n'
        )
        assert _texts(code) == set()

    def test_boolean_attribute_ignored(self):
        assert _texts("export const A = () => <input disabled />;\n") == set()

    def test_jsx_nested_in_callback(self):
        code = (
            "export const List = ({ items }) => (\n"
            "  <ul>{items.map((i) => <li key={i}><img src='./icons/dot.svg' /></li>)}</ul>\n"
            ");\n"
        )
        assert _texts(code) == {"./icons/dot.svg"}


class TestParseFailures:
    """Files that do not parse cleanly."""

    def test_syntax_error_raises_parse_error(self):
        with pytest.raises(ParseError) as exc_info:
            _extract("const = ;\n", "src/broken.ts")
        assert exc_info.value.filepath == "src/broken.ts"
        assert exc_info.value.language == "typescript"

    def test_tsx_path_uses_tsx_grammar(self):
        with pytest.raises(ParseError) as exc_info:
            _extract("export const A = () => <div>;\n", "src/broken.tsx")
        assert exc_info.value.language == "tsx"

    def test_empty_file_has_no_specifiers(self):
        assert _extract("", "src/empty.ts") == []
