"""Public API for deadref.

Example:
    >>> from deadref import analyze
    >>> report = analyze("/path/to/frontend")
    >>> sorted(report.unused_imports)[:3]
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from .config import load_config
from .core import DeadCodeAnalyzer
from .models import UsageReport


def analyze(
    path: str = ".",
    config_file: Optional[Path] = None,
    **overrides: Any,
) -> UsageReport:
    """Scan a frontend project and return its usage report.

    Args:
        path: Project root (default: current directory)
        config_file: Optional explicit config file path
        **overrides: Configuration overrides (e.g. ignore_files=[...])

    Returns:
        UsageReport with imports, dependencies and unused files

    Raises:
        ConfigurationError: If configuration is invalid
        InvalidPathError: If ``path`` is not a directory
    """
    root = Path(path)
    config = load_config(root, config_file=config_file, **overrides)
    return DeadCodeAnalyzer(root, config).analyze()
