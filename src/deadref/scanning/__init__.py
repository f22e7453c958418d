"""Source discovery and import extraction for TypeScript and stylesheets."""

from .code_extractor import CodeImportExtractor
from .discovery import ScanResult, SourceScanner
from .languages import RECOGNIZED_EXTENSIONS, has_recognized_extension
from .models import RawSpecifier, SiteKind, SourceFile, SourceKind
from .style_extractor import StyleImportExtractor, extract_style_paths
from .treesitter_parser import TreeSitterParser, get_supported_languages

__all__ = [
    "CodeImportExtractor",
    "StyleImportExtractor",
    "extract_style_paths",
    "SourceScanner",
    "ScanResult",
    "RECOGNIZED_EXTENSIONS",
    "has_recognized_extension",
    "RawSpecifier",
    "SiteKind",
    "SourceFile",
    "SourceKind",
    "TreeSitterParser",
    "get_supported_languages",
]
