"""Relocate unused files into a backup folder instead of deleting them."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from .exceptions import FileReadError
from .file_ops import move_into_backup
from .logging_config import get_logger

logger = get_logger(__name__)


def move_unused_files(root: Path, unused_files: Iterable[str], backup_dir: str) -> list[str]:
    """Move each unused file under ``root/backup_dir``, keeping its relative path.

    Returns:
        Project-relative paths that were moved. Failures are logged and
        left in place.
    """
    moved: list[str] = []
    for rel_path in sorted(unused_files):
        try:
            move_into_backup(root, rel_path, backup_dir)
        except FileReadError as e:
            logger.warning(f"Could not move {rel_path}: {e.reason}")
            continue
        moved.append(rel_path)
    logger.info(f"Moved {len(moved)} unused files into {backup_dir}/")
    return moved
