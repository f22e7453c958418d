"""Resolution outcomes and resolver configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union


@dataclass(frozen=True)
class ProjectFile:
    """A project-owned file: normalized, extension-bearing, root-relative."""

    path: str


@dataclass(frozen=True)
class Dependency:
    """An external package, named exactly as written in the import."""

    name: str


@dataclass(frozen=True)
class Unresolved:
    """A reference that is neither a project file nor a package.

    Not an error: this is an expected terminal classification.
    """

    original_text: str
    reason: str


Resolution = Union[ProjectFile, Dependency, Unresolved]


@dataclass(frozen=True)
class ResolverConfig:
    """Ambient state the resolver needs, passed in explicitly.

    Attributes:
        project_root: Absolute project root directory
        all_files: Every scanned project-relative path (read-only)
        alias_prefix: Specifier prefix rewritten to ``alias_target``
        alias_target: Project-relative directory, with trailing slash
    """

    project_root: Path
    all_files: frozenset[str]
    alias_prefix: str = "@/"
    alias_target: str = "src/"
