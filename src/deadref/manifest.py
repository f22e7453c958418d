"""Declared-dependency cross-check against package.json.

An optional derived report: packages listed in ``dependencies`` or
``devDependencies`` that no scanned import refers to.
"""

from __future__ import annotations

import fnmatch
import json
from pathlib import Path
from typing import Iterable, Optional

from .exceptions import ManifestError
from .logging_config import get_logger

logger = get_logger(__name__)

MANIFEST_NAME = "package.json"
_DEPENDENCY_SECTIONS = ("dependencies", "devDependencies")


def package_name(specifier: str) -> str:
    """Package a bare import specifier belongs to.

    >>> package_name("@scope/pkg/sub/path")
    '@scope/pkg'
    >>> package_name("lodash/fp")
    'lodash'
    """
    parts = specifier.split("/")
    if specifier.startswith("@") and len(parts) > 1:
        return "/".join(parts[:2])
    return parts[0]


def load_declared_dependencies(root: Path) -> Optional[set[str]]:
    """Names declared in ``root/package.json``, or None if there is none.

    Raises:
        ManifestError: If the manifest exists but is unreadable or malformed
    """
    manifest = Path(root) / MANIFEST_NAME
    if not manifest.is_file():
        logger.debug(f"No {MANIFEST_NAME} at {root}; skipping declared-dependency check")
        return None

    try:
        data = json.loads(manifest.read_text(encoding="utf-8"))
    except OSError as e:
        raise ManifestError(manifest, f"OS error: {e}")
    except json.JSONDecodeError as e:
        raise ManifestError(manifest, f"Invalid JSON: {e}")

    if not isinstance(data, dict):
        raise ManifestError(manifest, "top-level value must be an object")

    declared: set[str] = set()
    for section in _DEPENDENCY_SECTIONS:
        entries = data.get(section) or {}
        if not isinstance(entries, dict):
            raise ManifestError(manifest, f"'{section}' must be an object")
        declared.update(entries)
    return declared


def unused_declared_dependencies(
    declared: Iterable[str],
    used_specifiers: Iterable[str],
    ignore_patterns: Iterable[str] = (),
) -> set[str]:
    """Declared packages never imported, minus ignored name patterns."""
    used = {package_name(spec) for spec in used_specifiers}
    patterns = list(ignore_patterns)
    return {
        name
        for name in set(declared) - used
        if not any(fnmatch.fnmatchcase(name, pattern) for pattern in patterns)
    }
