"""
File operations for deadref.

Reading sources, matching ignore patterns and relocating unused files.
"""

import shutil
from functools import lru_cache
from pathlib import Path

import pathspec

from .exceptions import FileReadError


def safe_read_file(filepath: Path, encoding: str = "utf-8", errors: str = "replace") -> str:
    """
    Read a file, wrapping every failure in FileReadError.

    Args:
        filepath: File to read
        encoding: Text encoding
        errors: How to handle encoding errors

    Returns:
        File contents as string

    Raises:
        FileReadError: If file cannot be read
    """
    try:
        with open(filepath, encoding=encoding, errors=errors) as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise FileReadError(filepath, f"Encoding error: {e}")
    except OSError as e:
        raise FileReadError(filepath, f"OS error: {e}")


@lru_cache(maxsize=32)
def _ignore_spec(patterns: tuple[str, ...]) -> pathspec.GitIgnoreSpec:
    return pathspec.GitIgnoreSpec.from_lines(patterns)


def is_path_ignored(rel_path: str, patterns: list[str]) -> bool:
    """
    Check a project-relative path against gitignore patterns.

    Matching follows .gitignore rules: ``dir/`` ignores everything below a
    directory of that name at any depth, a pattern containing ``/`` is
    anchored at the project root, and a later ``!pattern`` re-includes
    what an earlier pattern ignored.

    Args:
        rel_path: Project-relative path with forward slashes
        patterns: gitignore lines, blank entries skipped

    Returns:
        True if the path ends up ignored
    """
    lines = tuple(p.strip() for p in patterns if p.strip())
    if not lines:
        return False
    return bool(_ignore_spec(lines).match_file(rel_path))


def move_into_backup(root: Path, rel_path: str, backup_dir: str) -> Path:
    """
    Move ``root/rel_path`` to ``root/backup_dir/rel_path``.

    Args:
        root: Project root
        rel_path: Project-relative path of the file to move
        backup_dir: Backup folder relative to root

    Returns:
        Destination path

    Raises:
        FileReadError: If the move fails
    """
    source = root / rel_path
    destination = root / backup_dir / rel_path
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.move(str(source), str(destination))
    except OSError as e:
        raise FileReadError(source, f"Move failed: {e}")
    return destination
