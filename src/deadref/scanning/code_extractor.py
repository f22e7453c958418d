"""CodeImportExtractor: raw specifiers from a parsed TypeScript/TSX file.

Tree-sitter queries match at any depth, so imports nested inside callbacks,
chained calls or JSX children are all found. Each capture name maps to one
handler that turns the captured node into zero or more specifier strings.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

from ..exceptions import ParseError
from ..logging_config import get_logger
from .languages import grammar_for, has_recognized_extension
from .models import RawSpecifier, SiteKind, SourceFile
from .queries import get_queries
from .treesitter_parser import TreeSitterParser

logger = get_logger(__name__)


def _string_value(node: Any) -> str:
    """Contents of a string literal node without its quotes."""
    raw: bytes = node.text or b""
    return raw[1:-1].decode("utf-8", errors="replace")


def _template_segments(node: Any) -> list[str]:
    """Literal segments of a template string, split at ``${...}`` holes."""
    source: bytes = node.text or b""
    base = node.start_byte
    cursor = 1  # skip opening backtick
    segments: list[str] = []
    for child in node.children:
        if child.type != "template_substitution":
            continue
        segments.append(source[cursor : child.start_byte - base].decode("utf-8", errors="replace"))
        cursor = child.end_byte - base
    segments.append(source[cursor:-1].decode("utf-8", errors="replace"))
    return [segment for segment in segments if segment]


def _attribute_values(node: Any) -> Iterator[str]:
    """Candidate string values of a JSX attribute node."""
    if node.named_child_count < 2:
        return
    value = node.named_children[-1]
    if value.type == "jsx_expression":
        if value.named_child_count == 0:
            return
        value = value.named_children[0]

    if value.type == "string":
        yield _string_value(value)
    elif value.type == "template_string":
        yield from _template_segments(value)


def _static_import(node: Any) -> Iterator[str]:
    yield _string_value(node)


def _asset_attribute(node: Any) -> Iterator[str]:
    for value in _attribute_values(node):
        if has_recognized_extension(value):
            yield value


# capture name -> (site kind, handler)
_HANDLERS: dict[str, tuple[SiteKind, Callable[[Any], Iterator[str]]]] = {
    "import.source": (SiteKind.STATIC_IMPORT, _static_import),
    "export.source": (SiteKind.STATIC_IMPORT, _static_import),
    "dynamic_import.source": (SiteKind.DYNAMIC_IMPORT, _static_import),
    "attribute": (SiteKind.ASSET_ATTRIBUTE, _asset_attribute),
}


class CodeImportExtractor:
    """Extracts raw specifiers from script files.

    Usage:
        extractor = CodeImportExtractor()
        specifiers = extractor.extract(source_file)
    """

    def __init__(self, parser: Optional[TreeSitterParser] = None) -> None:
        self._parser = parser or TreeSitterParser()

    def extract(self, source: SourceFile) -> list[RawSpecifier]:
        """Collect every import-like reference in ``source``.

        Raises:
            ParseError: If the file cannot be parsed cleanly
        """
        language = grammar_for(source.path)
        try:
            code = source.text.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ParseError(source.path, language, f"Encoding error: {e}")

        tree = self._parser.parse(code, language)
        if tree is None:
            raise ParseError(source.path, language, "no parser for grammar")
        if tree.root_node.has_error:
            raise ParseError(source.path, language, "source contains syntax errors")

        specifiers: list[RawSpecifier] = []
        for query_str in (get_queries(language) or {}).values():
            for node, capture_name in self._parser.query(tree, query_str, language):
                entry = _HANDLERS.get(capture_name)
                if entry is None:
                    continue
                site_kind, handler = entry
                for text in handler(node):
                    specifiers.append(RawSpecifier(source.path, text, site_kind))

        logger.debug(f"{source.path}: {len(specifiers)} specifiers")
        return specifiers
