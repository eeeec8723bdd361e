"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import ReportConfig, load_config

console = Console()


def resolve_config(
    config: Optional[Path] = None,
    minified_name: Optional[str] = None,
    include: Optional[list[str]] = None,
    exclude: Optional[list[str]] = None,
    output_format: Optional[str] = None,
    verbose: bool = False,
) -> ReportConfig:
    """Build configuration from CLI options; unset options fall through."""
    overrides = {
        "minified_name": minified_name,
        "include": include or None,
        "exclude": exclude or None,
        "output_format": output_format,
    }
    if verbose:
        overrides["verbose"] = True
    return load_config(config_file=config, **overrides)
