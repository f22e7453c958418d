"""Exception hierarchy for deadref."""

from .analysis import (
    AnalysisError,
    FileReadError,
    IncompleteScanError,
    ManifestError,
    ParseError,
    PathEncodingError,
)
from .base import DeadrefError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)

__all__ = [
    "DeadrefError",
    "AnalysisError",
    "FileReadError",
    "ParseError",
    "PathEncodingError",
    "IncompleteScanError",
    "ManifestError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]
