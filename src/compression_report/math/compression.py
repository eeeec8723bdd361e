"""Gzip sizes of file contents.

The size reported is the length of a complete gzip member (header, deflate
stream and trailer), which is what a server sends for ``Content-Encoding:
gzip``. The header timestamp is pinned so sizes are reproducible.
"""

import gzip


class Compression:
    """Compression size measurements."""

    GZIP_LEVEL = 9

    @staticmethod
    def gzip_size(content: bytes, level: int = GZIP_LEVEL) -> int:
        """Compute the gzip-compressed size of ``content`` in bytes.

        Args:
            content: Raw bytes to compress.
            level: Compression level (0-9, default: 9 for maximum).

        Returns:
            Compressed size in bytes. Empty content has size 0.

        Raises:
            TypeError: If content is not bytes-like.
        """
        if not isinstance(content, (bytes, bytearray, memoryview)):
            raise TypeError(f"expected bytes-like content, got {type(content).__name__}")
        if len(content) == 0:
            return 0
        return len(gzip.compress(bytes(content), compresslevel=level, mtime=0))


gzip_size = Compression.gzip_size
