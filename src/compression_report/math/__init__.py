"""Size arithmetic: gzip sizes and guarded ratios."""

from .compression import Compression, gzip_size
from .ratios import safe_ratio

__all__ = ["Compression", "gzip_size", "safe_ratio"]
