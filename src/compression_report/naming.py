"""Minified-name detection and filename normalization.

A build usually emits ``app.js`` next to ``app.min.js``. Both are variants of
the same logical file; the marker (``.min`` by default) is stripped to get the
name they share.
"""

from __future__ import annotations

import re
from typing import Callable, Optional, Union

from .config import DEFAULT_MINIFIED_NAME

Pattern = Union[str, "re.Pattern[str]"]
MarkerRule = Union[Pattern, Callable[[str], bool]]
StripRule = Union[Pattern, Callable[[str], str]]


def _compile(rule: Pattern) -> "re.Pattern[str]":
    return rule if isinstance(rule, re.Pattern) else re.compile(rule)


def _is_pattern(rule: object) -> bool:
    return isinstance(rule, (str, re.Pattern))


class MinifiedMarker:
    """Detects and strips the minified marker from file names.

    The rule may be a regex string, a compiled pattern, or a predicate. A
    pattern both detects and strips the marker. A predicate only detects it,
    so it must come with a ``strip`` rule: a pattern whose matches are removed,
    or a callable returning the normalized name. ``strip`` may also be given
    with a pattern rule to normalize differently from how names are detected.

    Every occurrence of a strip pattern is removed, so ``a.min.min.js``
    normalizes to ``a.js``.

    Raises:
        TypeError: If a predicate rule is given without a strip rule
        re.error: If a pattern does not compile
    """

    def __init__(self, rule: MarkerRule = DEFAULT_MINIFIED_NAME, strip: Optional[StripRule] = None):
        self.pattern: Optional[re.Pattern[str]] = None
        if _is_pattern(rule):
            pattern = self.pattern = _compile(rule)
            self._detect: Callable[[str], bool] = lambda name: pattern.search(name) is not None
        elif callable(rule):
            if strip is None:
                raise TypeError(
                    "A predicate marker rule needs a strip rule to produce the normalized name"
                )
            self._detect = rule
        else:
            raise TypeError(f"Unsupported marker rule: {rule!r}")

        self._rule = rule
        self._strip = strip
        if strip is None:
            strip = self.pattern
        if _is_pattern(strip):
            strip_pattern = _compile(strip)
            self._normalize: Callable[[str], str] = lambda name: strip_pattern.sub("", name)
        elif callable(strip):
            self._normalize = strip
        else:
            raise TypeError(f"Unsupported strip rule: {strip!r}")

    def __repr__(self) -> str:
        rule = self.pattern.pattern if self.pattern is not None else self._rule
        if self._strip is None:
            return f"MinifiedMarker({rule!r})"
        strip = self._strip.pattern if isinstance(self._strip, re.Pattern) else self._strip
        return f"MinifiedMarker({rule!r}, strip={strip!r})"

    def normalize(self, filename: str) -> str:
        return self._normalize(filename)

    def is_minified(self, filename: str) -> bool:
        return bool(self._detect(filename))

    def split(self, filename: str) -> tuple[str, bool]:
        """Return ``(normalized_name, is_minified)``."""
        return self.normalize(filename), self.is_minified(filename)


_default_marker = MinifiedMarker()


def normalize_filename(filename: str, marker: MinifiedMarker | None = None) -> str:
    return (marker or _default_marker).normalize(filename)


def is_minified(filename: str, marker: MinifiedMarker | None = None) -> bool:
    return (marker or _default_marker).is_minified(filename)
