"""StyleImportExtractor: raw paths from stylesheet text.

Handles CSS, Less and SCSS with one pattern set:

    @import "reset.css";
    @import url("theme.css");
    @import (reference) "mixins.less";
    background: url(images/bg.jpg);
"""

from __future__ import annotations

import re

from ..logging_config import get_logger
from .models import RawSpecifier, SiteKind, SourceFile

logger = get_logger(__name__)

# Group 1: @import argument (optionally wrapped in url()), group 2: bare url()
STYLE_REFERENCE_RE = re.compile(
    r"""@import\s+(?:\([^)]*\)\s*)?(?:url\()?['"]?([^'")]+)['"]?\)?"""
    r"""|url\(\s*['"]?([^'")]+)['"]?\s*\)"""
)

# Characters marking interpolated or preprocessor-generated paths
_DYNAMIC_MARKERS = ("{", "$", "#")

# scheme:, scheme://, protocol-relative //
_EXTERNAL_RE = re.compile(r"^(?:[a-z][a-z0-9+.\-]*:|//)", re.IGNORECASE)

_QUERY_OR_FRAGMENT_RE = re.compile(r"[?#]")


def extract_style_paths(code: str) -> list[str]:
    """Return the project-resolvable paths referenced by stylesheet ``code``.

    Dynamic paths and external URLs are dropped; query strings and
    fragments are stripped. Duplicates are kept.

    >>> extract_style_paths("@import 'a.css'; .x { background: url(b.png?v=2) }")
    ['a.css', 'b.png']
    """
    result: list[str] = []
    for match in STYLE_REFERENCE_RE.finditer(code):
        raw_path = match.group(1) or match.group(2)
        if not raw_path:
            continue
        if any(marker in raw_path for marker in _DYNAMIC_MARKERS):
            continue
        path = _QUERY_OR_FRAGMENT_RE.split(raw_path, maxsplit=1)[0].strip()
        if not path or _EXTERNAL_RE.match(path) or path.startswith("/"):
            continue
        result.append(path)
    return result


class StyleImportExtractor:
    """Extracts raw specifiers from stylesheet files."""

    def extract(self, source: SourceFile) -> list[RawSpecifier]:
        specifiers = [
            RawSpecifier(source.path, path, SiteKind.STYLE_IMPORT)
            for path in extract_style_paths(source.text)
        ]
        logger.debug(f"{source.path}: {len(specifiers)} specifiers")
        return specifiers
