"""Configuration loading and management for Churn Forensics.

Configuration sources are merged in priority order:
    1. Defaults (defined in ForensicsConfig)
    2. Global config (~/.churn-forensics.toml)
    3. Project config (./churn-forensics.toml)
    4. Explicit config file
    5. Environment variables (FORENSICS_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(top_files=5)
    >>> config.top_files
    5
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Literal, Optional, get_args, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]
SortKey = Literal["churn", "commits", "authors", "name"]

ENV_PREFIX = "FORENSICS_"
CONFIG_FILE_NAME = "churn-forensics.toml"


@dataclass(frozen=True)
class ForensicsConfig:
    """Settings for reporting on aggregated commit statistics.

    Attributes:
        top_files: Number of files listed by the ``files`` command
        sort_by: Ordering of the file listing (churn, commits, authors, name)
        show_deleted: Include files whose last change deleted them
        verbosity: Logging verbosity level
        log_file: Optional file that receives a copy of the log stream
    """

    top_files: int = 20
    sort_by: SortKey = "churn"
    show_deleted: bool = True
    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        if self.top_files < 1:
            raise InvalidConfigError("top_files", self.top_files, "must be at least 1")
        if self.sort_by not in get_args(SortKey):
            raise InvalidConfigError(
                "sort_by", self.sort_by, f"expected one of {', '.join(get_args(SortKey))}"
            )
        if self.verbosity not in get_args(Verbosity):
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"expected one of {', '.join(get_args(Verbosity))}"
            )

    @property
    def verbose(self) -> bool:
        return self.verbosity == "verbose"

    @property
    def quiet(self) -> bool:
        return self.verbosity == "quiet"


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> ForensicsConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags); ``None``
            values are ignored so unset CLI options keep file/env values

    Returns:
        Validated ForensicsConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
        InvalidConfigError: If a value fails validation
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / f".{CONFIG_FILE_NAME}"
    if global_config.exists():
        merged.update(_load_toml_section(global_config))

    project_config = Path.cwd() / CONFIG_FILE_NAME
    if project_config.exists():
        merged.update(_load_toml_section(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_section(config_file))

    merged.update(_load_env_vars())

    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"
    merged.update({k: v for k, v in overrides.items() if v is not None})

    known = {f.name for f in fields(ForensicsConfig)}
    unknown = sorted(set(merged) - known)
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

    return ForensicsConfig(**merged)


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from FORENSICS_* environment variables.

    Supported environment variables:
        FORENSICS_TOP_FILES: int
        FORENSICS_SORT_BY: churn/commits/authors/name
        FORENSICS_SHOW_DELETED: bool (true/false/1/0)
        FORENSICS_VERBOSITY: quiet/normal/verbose
        FORENSICS_LOG_FILE: path
    """
    type_hints = get_type_hints(ForensicsConfig)
    result: dict[str, Any] = {}

    for field_name in ForensicsConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue
        try:
            result[field_name] = _parse_env_value(env_value, type_hints[field_name])
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type."""
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        if lower in ("false", "0", "no", "off"):
            return False
        raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    return value


def _load_toml_section(path: Path) -> dict[str, Any]:
    """Read a TOML file, accepting either top-level keys or a [forensics] table."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")

    section = data.get("forensics", data)
    if not isinstance(section, dict):
        raise ConfigurationError(f"Invalid config file '{path}': [forensics] must be a table")
    return dict(section)
