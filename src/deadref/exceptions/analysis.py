"""Analysis-related exceptions: file reads, parsing, path text, aggregation."""

from pathlib import Path

from .base import DeadrefError


class AnalysisError(DeadrefError):
    """Base class for analysis-related errors."""
    pass


class FileReadError(AnalysisError):
    """Raised when a source file cannot be read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot read file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class ParseError(AnalysisError):
    """Raised when a script file cannot be parsed."""

    def __init__(self, filepath: str, language: str, reason: str):
        super().__init__(
            f"Failed to parse {language} file: {filepath}",
            details={"filepath": filepath, "language": language, "reason": reason},
        )
        self.filepath = filepath
        self.language = language
        self.reason = reason


class PathEncodingError(AnalysisError):
    """Raised when specifier text cannot be represented as a path."""

    def __init__(self, text: str, reason: str):
        super().__init__(
            "Non-representable path text",
            details={"text": ascii(text), "reason": reason},
        )
        self.text = text
        self.reason = reason


class IncompleteScanError(AnalysisError):
    """Raised when unused files are requested before the scan has finished."""

    def __init__(self) -> None:
        super().__init__(
            "Unused files are only known after every file has been scanned",
            details={"hint": "call complete() once all resolutions are added"},
        )


class ManifestError(AnalysisError):
    """Raised when package.json exists but cannot be used."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Invalid package manifest: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason
