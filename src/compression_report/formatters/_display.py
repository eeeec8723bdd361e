"""Shared value rendering for formatters."""

import math
from typing import Optional

import humanize

PLACEHOLDER = "--"


def format_bytes(num: Optional[int]) -> str:
    """Human-readable byte count (decimal units, e.g. ``1.2 kB``)."""
    if num is None:
        return PLACEHOLDER
    return humanize.naturalsize(num)


def format_percent(ratio: Optional[float]) -> str:
    """Nearest whole percent; exact halves round up (``0.125`` -> ``13%``)."""
    if ratio is None or not math.isfinite(ratio):
        return PLACEHOLDER
    return f"{math.floor(100 * ratio + 0.5)}%"


def pluralize(thing: str, count: int) -> str:
    return f"{count} {thing}" if count == 1 else f"{count} {thing}s"


def opinion(good: bool) -> str:
    return "[green]✓[/green]" if good else "[red]✗[/red]"


def start_case(name: str) -> str:
    """``"min+gzip size"`` -> ``"Min+Gzip Size"``."""
    return " ".join(
        "+".join(part[:1].upper() + part[1:] for part in word.split("+"))
        for word in name.split()
    )
