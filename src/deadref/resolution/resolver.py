"""PathResolver: classify a raw specifier as project file, package or unresolved.

Rules live in one ordered table; the first rule whose predicate matches
decides the outcome:

    alias        @/x                    -> src/x
    style-tilde  ~@/x (stylesheets)     -> src/x, any other ~x is external
    relative     ./x, ../x, and every
                 remaining stylesheet
                 path                   -> joined with the importer's folder
    src-path     bare path with a src
                 segment                -> root-relative path
    dependency   bare import            -> package, name as written
    fallback     anything else          -> unresolved

Paths without a recognized extension go through the suffix probe. The
resolver never touches the filesystem and reads no process state, so it
can be shared by concurrent sub-scans.
"""

from __future__ import annotations

import posixpath
from collections.abc import Set
from dataclasses import dataclass
from pathlib import PurePath, PurePosixPath
from typing import Callable, Optional

from ..exceptions import PathEncodingError
from ..logging_config import get_logger
from ..scanning.languages import has_recognized_extension
from ..scanning.models import SiteKind
from .models import Dependency, ProjectFile, Resolution, ResolverConfig, Unresolved
from .suffix_probe import probe

logger = get_logger(__name__)

NON_PROJECT_REASON = "non-project code reference"
OUTSIDE_ROOT_REASON = "path leaves the project root"
NODE_MODULES_REASON = "path inside node_modules"
UNKNOWN_FORM_REASON = "not a project path or package"
EMPTY_REASON = "empty specifier"


@dataclass(frozen=True)
class _Request:
    current_file: str
    text: str
    site_kind: SiteKind


Prober = Callable[[str, Set[str]], Resolution]
Rule = tuple[str, Callable[["PathResolver", _Request], bool], Callable[["PathResolver", _Request], Resolution]]


def _check_encodable(text: str) -> None:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise PathEncodingError(text, f"not valid UTF-8 path text: {e.reason}")


def _inside_root(path: str) -> bool:
    return path != ".." and not path.startswith("../") and not path.startswith("/")


class PathResolver:
    """Resolves specifiers found in one project.

    Usage:
        resolver = PathResolver(ResolverConfig(root, all_files))
        resolver.resolve("src/app.tsx", "./App", SiteKind.STATIC_IMPORT)
    """

    def __init__(self, config: ResolverConfig, prober: Prober = probe) -> None:
        self.config = config
        self._prober = prober
        self._root_prefix = PurePath(config.project_root).as_posix().rstrip("/") + "/"

    def resolve(self, current_file: str, raw_specifier: str, site_kind: SiteKind) -> Resolution:
        """Classify ``raw_specifier`` found in ``current_file``."""
        _rule, resolution = self.explain(current_file, raw_specifier, site_kind)
        return resolution

    def explain(
        self, current_file: str, raw_specifier: str, site_kind: SiteKind
    ) -> tuple[str, Resolution]:
        """Like resolve(), also returning the name of the rule that decided."""
        try:
            _check_encodable(raw_specifier)
            _check_encodable(current_file)
        except PathEncodingError as e:
            return "encoding", Unresolved(raw_specifier, e.reason)

        text = raw_specifier.strip().replace("\\", "/")
        if not text:
            return "empty", Unresolved(raw_specifier, EMPTY_REASON)

        importer = self._project_relative(current_file)
        if importer is None:
            return "importer", Unresolved(raw_specifier, OUTSIDE_ROOT_REASON)

        request = _Request(importer, text, site_kind)
        name, _, action = next(
            (rule for rule in RULES if rule[1](self, request)), FALLBACK_RULE
        )
        resolution = _drop_node_modules(action(self, request), raw_specifier)
        logger.debug(f"{importer}: {raw_specifier!r} -> {resolution} [{name}]")
        return name, resolution

    # ── Helpers ────────────────────────────────────────────────

    def _project_relative(self, path: str) -> Optional[str]:
        """Express an importer path relative to the project root."""
        path = path.replace("\\", "/")
        if path.startswith(self._root_prefix):
            path = path[len(self._root_prefix):]
        elif PurePosixPath(path).is_absolute():
            return None
        normalized = posixpath.normpath(path)
        return normalized if _inside_root(normalized) else None

    def _finish(self, path: str, original: str) -> Resolution:
        """Accept an extensioned path, otherwise probe for its suffix."""
        if not _inside_root(path):
            return Unresolved(original, OUTSIDE_ROOT_REASON)
        if has_recognized_extension(path):
            return ProjectFile(path)
        return self._prober(path, self.config.all_files)

    # ── Rule predicates ────────────────────────────────────────

    def _is_alias(self, request: _Request) -> bool:
        return request.text.startswith(self.config.alias_prefix)

    def _is_style_tilde(self, request: _Request) -> bool:
        return request.site_kind is SiteKind.STYLE_IMPORT and request.text.startswith("~")

    def _is_relative(self, request: _Request) -> bool:
        return request.text.startswith(".") or request.site_kind is SiteKind.STYLE_IMPORT

    def _is_src_path(self, request: _Request) -> bool:
        # a whole "src" segment; "srcset-polyfill" is a package name
        if "://" in request.text:
            return False
        return "src" in PurePosixPath(request.text).parts

    def _is_import(self, request: _Request) -> bool:
        return request.site_kind in (SiteKind.STATIC_IMPORT, SiteKind.DYNAMIC_IMPORT)

    def _always(self, request: _Request) -> bool:
        return True

    # ── Rule actions ───────────────────────────────────────────

    def _resolve_alias(self, request: _Request) -> Resolution:
        rest = request.text[len(self.config.alias_prefix):]
        rewritten = posixpath.normpath(self.config.alias_target + rest)
        return self._finish(rewritten, request.text)

    def _resolve_style_tilde(self, request: _Request) -> Resolution:
        if request.text.startswith("~" + self.config.alias_prefix):
            return self._resolve_alias(
                _Request(request.current_file, request.text[1:], request.site_kind)
            )
        return Unresolved(request.text, NON_PROJECT_REASON)

    def _resolve_relative(self, request: _Request) -> Resolution:
        current_dir = posixpath.dirname(request.current_file)
        joined = posixpath.normpath(posixpath.join(current_dir, request.text))
        return self._finish(joined, request.text)

    def _resolve_src_path(self, request: _Request) -> Resolution:
        path = request.text
        if path.startswith(self._root_prefix):
            path = path[len(self._root_prefix):]
        return self._finish(posixpath.normpath(path.lstrip("/")), request.text)

    def _resolve_dependency(self, request: _Request) -> Resolution:
        return Dependency(request.text)

    def _resolve_unknown(self, request: _Request) -> Resolution:
        return Unresolved(request.text, UNKNOWN_FORM_REASON)


def _drop_node_modules(resolution: Resolution, original: str) -> Resolution:
    if isinstance(resolution, ProjectFile) and "node_modules" in resolution.path:
        return Unresolved(original, NODE_MODULES_REASON)
    if isinstance(resolution, Dependency) and "node_modules" in resolution.name:
        return Unresolved(original, NODE_MODULES_REASON)
    return resolution


FALLBACK_RULE: Rule = ("fallback", PathResolver._always, PathResolver._resolve_unknown)

RULES: tuple[Rule, ...] = (
    ("alias", PathResolver._is_alias, PathResolver._resolve_alias),
    ("style-tilde", PathResolver._is_style_tilde, PathResolver._resolve_style_tilde),
    ("relative", PathResolver._is_relative, PathResolver._resolve_relative),
    ("src-path", PathResolver._is_src_path, PathResolver._resolve_src_path),
    ("dependency", PathResolver._is_import, PathResolver._resolve_dependency),
    FALLBACK_RULE,
)
