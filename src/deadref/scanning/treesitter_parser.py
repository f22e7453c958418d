"""Tree-sitter parser wrapper for TypeScript and TSX.

Usage:
    parser = TreeSitterParser()
    tree = parser.parse(code_bytes, "tsx")
    captures = parser.query(tree, query_str, "tsx")
"""

from __future__ import annotations

from typing import Any

import tree_sitter
import tree_sitter_typescript

# Grammar name -> factory returning the raw language pointer
_GRAMMARS = {
    "typescript": tree_sitter_typescript.language_typescript,
    "tsx": tree_sitter_typescript.language_tsx,
}

Capture = tuple[Any, str]


def get_supported_languages() -> list[str]:
    """Get list of grammar names this parser can handle."""
    return list(_GRAMMARS.keys())


class TreeSitterParser:
    """Wrapper around tree-sitter holding one parser per grammar.

    Parser instances are not thread-safe; use one TreeSitterParser per thread.
    """

    def __init__(self) -> None:
        self._parsers: dict[str, tree_sitter.Parser] = {}
        self._languages: dict[str, tree_sitter.Language] = {}
        self._queries: dict[tuple[str, str], tree_sitter.Query] = {}

        for lang_name, lang_fn in _GRAMMARS.items():
            lang_obj = tree_sitter.Language(lang_fn())
            self._languages[lang_name] = lang_obj
            self._parsers[lang_name] = tree_sitter.Parser(lang_obj)

    def parse(self, code: bytes, language: str) -> tree_sitter.Tree | None:
        """Parse code and return syntax tree.

        Args:
            code: Source code as bytes
            language: Grammar name ("typescript" or "tsx")

        Returns:
            Tree object, or None if the language is not supported
        """
        parser = self._parsers.get(language)
        if parser is None:
            return None
        return parser.parse(code)

    def query(self, tree: tree_sitter.Tree, query_str: str, language: str) -> list[Capture]:
        """Run a query on a syntax tree.

        Args:
            tree: Syntax tree from parse()
            query_str: S-expression query string
            language: Grammar name

        Returns:
            List of (node, capture_name) tuples
        """
        lang = self._languages.get(language)
        if lang is None:
            return []

        key = (language, query_str)
        query = self._queries.get(key)
        if query is None:
            query = tree_sitter.Query(lang, query_str)
            self._queries[key] = query

        # tree-sitter 0.25+: use QueryCursor for execution
        cursor = tree_sitter.QueryCursor(query)
        matches = cursor.matches(tree.root_node)
        # Convert from [(pattern_id, {name: [nodes]})] to [(node, name)]
        result: list[Capture] = []
        for _pattern_id, captures_dict in matches:
            for capture_name, nodes in captures_dict.items():
                for node in nodes:
                    result.append((node, capture_name))
        return result

    def is_language_supported(self, language: str) -> bool:
        """Check if a language is supported."""
        return language in self._parsers
