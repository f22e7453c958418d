"""Configuration loading and management for deadref.

Configuration sources are merged in priority order:
    1. Defaults (defined in ScanConfig)
    2. Project config (<root>/deadref.toml)
    3. Explicit config file (--config)
    4. Environment variables (DEADREF_* prefix)
    5. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(Path("."), verbose=True, delete_unused=False)
    >>> config.verbosity
    'verbose'
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

Verbosity = Literal["quiet", "normal", "verbose"]

PROJECT_CONFIG_NAME = "deadref.toml"
ENV_PREFIX = "DEADREF_"


@dataclass(frozen=True)
class ScanConfig:
    """Configuration for one scan of a frontend project.

    Attributes:
        File enumeration:
            script_patterns: Glob patterns (relative to root) for script files
            style_patterns: Glob patterns (relative to root) for stylesheets
            max_file_size_mb: Files larger than this are skipped

        Resolution:
            alias_prefix: Specifier prefix rewritten to the source root
            alias_target: Project-relative directory the alias points at

        Report filtering:
            ignore_files: Glob patterns for files never reported as unused
            ignore_extensions: Extensions (without dot) never reported as unused
            ignore_dependencies: Glob patterns for declared packages never
                reported as unused

        Output and side effects:
            report_file: Report path, relative to the project root
            delete_unused: Move unused files into backup_dir after the scan
            backup_dir: Folder (relative to root) receiving moved files
            workers: Threads used for the script/stylesheet fork-join
            verbosity: Logging verbosity level
    """

    script_patterns: list[str] = field(
        default_factory=lambda: ["src/**/*.ts", "src/**/*.tsx"]
    )
    style_patterns: list[str] = field(
        default_factory=lambda: ["src/**/*.css", "src/**/*.less", "src/**/*.scss"]
    )
    max_file_size_mb: float = 10.0

    alias_prefix: str = "@/"
    alias_target: str = "src/"

    ignore_files: list[str] = field(default_factory=list)
    ignore_extensions: list[str] = field(default_factory=list)
    ignore_dependencies: list[str] = field(default_factory=list)

    report_file: str = "deadref.report.json"
    delete_unused: bool = False
    backup_dir: str = "deadref-deleted-files"
    workers: int = 2
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.script_patterns and not self.style_patterns:
            raise InvalidConfigError(
                "script_patterns", self.script_patterns, "at least one file pattern is required"
            )
        if self.max_file_size_mb <= 0:
            raise InvalidConfigError(
                "max_file_size_mb", self.max_file_size_mb, "must be positive"
            )
        if not self.alias_prefix:
            raise InvalidConfigError("alias_prefix", self.alias_prefix, "must not be empty")
        if not self.alias_target.endswith("/"):
            raise InvalidConfigError(
                "alias_target", self.alias_target, "must end with '/'"
            )
        if self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )
        if not self.report_file:
            raise InvalidConfigError("report_file", self.report_file, "must not be empty")
        if not self.backup_dir or Path(self.backup_dir).is_absolute():
            raise InvalidConfigError(
                "backup_dir", self.backup_dir, "must be a path relative to the project root"
            )

    @property
    def max_file_size_bytes(self) -> int:
        """Get max file size in bytes."""
        return int(self.max_file_size_mb * 1024 * 1024)

    @property
    def ignored_suffixes(self) -> set[str]:
        """Ignored extensions normalized to '.ext' form."""
        return {"." + ext.lstrip(".").lower() for ext in self.ignore_extensions}


def load_config(
    root: Path, config_file: Optional[Path] = None, **overrides: Any
) -> ScanConfig:
    """Load configuration for the project at ``root``.

    Args:
        root: Project root; ``deadref.toml`` is discovered there
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags)

    Returns:
        Validated ScanConfig instance

    Raises:
        ConfigurationError: If a config file is unreadable or has unknown keys
        InvalidConfigError: If a value fails validation
    """
    merged: dict[str, Any] = {}

    project_config = Path(root) / PROJECT_CONFIG_NAME
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())
    merged.update(_cli_overrides(overrides))

    try:
        return ScanConfig(**merged)
    except TypeError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _cli_overrides(overrides: dict[str, Any]) -> dict[str, Any]:
    """Drop unset flags and fold --verbose/--quiet into ``verbosity``."""
    result = {
        k: v for k, v in overrides.items() if v is not None and k not in ("verbose", "quiet")
    }
    if overrides.get("quiet"):
        result["verbosity"] = "quiet"
    elif overrides.get("verbose"):
        result["verbosity"] = "verbose"
    return result


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from DEADREF_* environment variables.

    List fields accept comma-separated values, e.g.
    ``DEADREF_IGNORE_FILES="src/index.ts,src/core/**"``.
    """
    result: dict[str, Any] = {}
    for field_name, type_hint in get_type_hints(ScanConfig).items():
        env_key = ENV_PREFIX + field_name.upper()
        raw = os.environ.get(env_key)
        if raw is None:
            continue
        try:
            result[field_name] = _parse_env_value(raw, type_hint)
        except ValueError as e:
            raise InvalidConfigError(field_name, raw, f"{env_key}: {e}")
    return result


_TRUE_WORDS = frozenset({"true", "1", "yes", "on"})
_FALSE_WORDS = frozenset({"false", "0", "no", "off"})


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Convert an environment string to the field's type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    if getattr(type_hint, "__origin__", None) is list:
        return [item.strip() for item in value.split(",") if item.strip()]
    if type_hint is bool:
        word = value.strip().lower()
        if word not in _TRUE_WORDS | _FALSE_WORDS:
            raise ValueError(f"expected a boolean, got '{value}'")
        return word in _TRUE_WORDS
    if type_hint in (int, float):
        return type_hint(value)
    # str and the Verbosity literal
    return value


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load a TOML file, accepting an optional [deadref] table.

    Raises:
        ConfigurationError: If the file cannot be read or parsed
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file '{path}': {e}")
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")

    section = data.get("deadref", data)
    if not isinstance(section, dict):
        raise ConfigurationError(f"Invalid config file '{path}': [deadref] must be a table")
    return dict(section)
