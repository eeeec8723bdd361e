"""Ratios that may have no value."""

import math
from typing import Optional


def safe_ratio(numerator: float, denominator: float) -> Optional[float]:
    """Return ``numerator / denominator``, or None when it is not a finite number.

    A zero denominator (an empty file, an empty bucket) yields None, which
    formatters render as "not applicable".
    """
    if denominator == 0:
        return None
    value = numerator / denominator
    if not math.isfinite(value):
        return None
    return value
