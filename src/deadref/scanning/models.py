"""Scan-time data models: source files and raw specifiers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SourceKind(Enum):
    """Which sub-scan a file belongs to."""

    SCRIPT = "script"
    STYLESHEET = "stylesheet"


class SiteKind(Enum):
    """Syntactic site a specifier was found at."""

    STATIC_IMPORT = "static_import"
    DYNAMIC_IMPORT = "dynamic_import"
    ASSET_ATTRIBUTE = "asset_attribute"
    STYLE_IMPORT = "style_import"


@dataclass(frozen=True)
class SourceFile:
    """A scanned project file.

    Attributes:
        path: Canonical project-relative path with forward slashes
        kind: Script or stylesheet
        text: Decoded file content
    """

    path: str
    kind: SourceKind
    text: str


@dataclass(frozen=True)
class RawSpecifier:
    """A literal reference as written in a source file, before resolution."""

    origin_file: str
    text: str
    site_kind: SiteKind
