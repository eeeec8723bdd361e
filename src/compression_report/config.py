"""Configuration loading and management for Compression Report.

Configuration sources are merged in priority order:
    1. Defaults (defined in ReportConfig)
    2. Project config (./compression-report.toml)
    3. Explicit config file (TOML, or a pyproject.toml with a
       [tool.compression-report] table)
    4. Environment variables (COMPRESSION_REPORT_* prefix)
    5. Overrides (passed as kwargs, typically from the CLI)

Unrecognized keys are ignored so that a shared config file can carry
options for other tools.

Example:
    >>> config = load_config(minified_name=r"[.-]min")
    >>> config.minified_name
    '[.-]min'
"""

from __future__ import annotations

import os
import re
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError
from .logging_config import get_logger

logger = get_logger(__name__)

OutputFormat = Literal["rich", "json", "csv"]
OUTPUT_FORMATS = ("rich", "json", "csv")

DEFAULT_MINIFIED_NAME = r"\.min"
PROJECT_CONFIG_NAME = "compression-report.toml"
ENV_PREFIX = "COMPRESSION_REPORT_"

# Option names used by the gulp plugin this tool grew out of.
_ALIASES = {
    "minifiedName": "minified_name",
    "outputFormat": "output_format",
    "format": "output_format",
}


@dataclass(frozen=True)
class ReportConfig:
    """Options for a report run.

    Attributes:
        minified_name: Regular expression marking a file name as minified.
            All matches are stripped to get the normalized name.
        verbose: Enable debug logging. Has no effect on the statistics.
        include: Glob patterns a scanned file must match (any of).
        exclude: Glob patterns that drop a scanned file.
        output_format: Formatter used to render the report.
    """

    minified_name: str = DEFAULT_MINIFIED_NAME
    verbose: bool = False
    include: list[str] = field(default_factory=lambda: ["*"])
    exclude: list[str] = field(default_factory=list)
    output_format: OutputFormat = "rich"

    def __post_init__(self) -> None:
        if not self.minified_name:
            raise InvalidConfigError("minified_name", self.minified_name, "must not be empty")
        try:
            re.compile(self.minified_name)
        except re.error as e:
            raise InvalidConfigError("minified_name", self.minified_name, str(e))

        if self.output_format not in OUTPUT_FORMATS:
            raise InvalidConfigError(
                "output_format",
                self.output_format,
                f"expected one of {', '.join(OUTPUT_FORMATS)}",
            )

        if not self.include:
            raise InvalidConfigError("include", self.include, "at least one pattern is required")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


default_config = ReportConfig()


def load_config(config_file: Optional[Path] = None, **overrides) -> ReportConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides; ``None`` values are ignored

    Returns:
        Validated ReportConfig instance

    Raises:
        ConfigurationError: If a config file is missing or unparsable
        InvalidConfigError: If a value fails validation
    """
    merged: dict[str, Any] = {}

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        merged.update(_read_config_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_read_config_file(config_file))

    merged.update(_load_env_vars())

    merged.update({k: v for k, v in overrides.items() if v is not None})

    known = _known_fields(merged)
    logger.debug(f"Effective configuration overrides: {known}")
    return ReportConfig(**known)


def _known_fields(raw: dict[str, Any]) -> dict[str, Any]:
    """Resolve aliases and drop options ReportConfig does not define."""
    names = {f.name for f in fields(ReportConfig)}
    result: dict[str, Any] = {}
    for key, value in raw.items():
        key = _ALIASES.get(key, key)
        if key not in names:
            logger.debug(f"Ignoring unrecognized option '{key}'")
            continue
        if key in ("include", "exclude") and isinstance(value, str):
            value = [value]
        result[key] = value
    return result


def _read_config_file(path: Path) -> dict[str, Any]:
    try:
        data = _load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")

    if path.name == "pyproject.toml":
        return data.get("tool", {}).get("compression-report", {})
    return data


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from COMPRESSION_REPORT_* environment variables.

    Supported environment variables:
        COMPRESSION_REPORT_MINIFIED_NAME: regex
        COMPRESSION_REPORT_VERBOSE: bool (true/false/1/0)
        COMPRESSION_REPORT_OUTPUT_FORMAT: rich/json/csv

    List options (include/exclude) are not read from the environment.
    """
    type_hints = get_type_hints(ReportConfig)
    result: dict[str, Any] = {}

    for f in fields(ReportConfig):
        env_key = f"{ENV_PREFIX}{f.name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hints[f.name])
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
        if parsed is not None:
            result[f.name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Returns None for types that cannot be expressed as a single string.
    """
    origin = getattr(type_hint, "__origin__", None)

    if origin is list or type_hint is list:
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If tomllib/tomli not available
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
