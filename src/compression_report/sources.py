"""Input records and directory scanning.

A ``FileRecord`` is what flows through the pipeline: a path relative to the
build root plus the file's bytes, or ``None`` for entries with no content
(directories, placeholders) that must pass through untouched.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .exceptions import FileAccessError
from .logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class FileRecord:
    relative: str
    contents: Optional[bytes] = None

    def is_null(self) -> bool:
        return self.contents is None


def _matches(path: Path, patterns: Iterable[str]) -> bool:
    return any(path.match(pattern) for pattern in patterns)


def scan_paths(
    root: Path,
    include: Optional[list[str]] = None,
    exclude: Optional[list[str]] = None,
) -> Iterator[FileRecord]:
    """
    Walk ``root`` and yield a record for every matching file.

    Files are visited in sorted path order so that runs are reproducible.
    Directories are yielded as null records, mirroring a build stream.

    Args:
        root: Directory to scan (a single file is also accepted)
        include: Glob patterns a file must match; defaults to everything
        exclude: Glob patterns that drop a file

    Raises:
        FileAccessError: If root does not exist or a file cannot be read
    """
    root = Path(root)
    include = include or ["*"]
    exclude = exclude or []

    if not root.exists():
        raise FileAccessError(str(root), "path does not exist")

    if root.is_file():
        candidates = [root]
        base = root.parent
    else:
        candidates = sorted(root.rglob("*"))
        base = root

    scanned = 0
    skipped = 0
    for filepath in candidates:
        relative = filepath.relative_to(base)

        if filepath.is_dir():
            yield FileRecord(relative.as_posix())
            continue

        if not _matches(relative, include) or _matches(relative, exclude):
            skipped += 1
            logger.debug(f"Skipped (pattern): {relative}")
            continue

        try:
            contents = filepath.read_bytes()
        except OSError as e:
            raise FileAccessError(str(filepath), e.strerror or str(e)) from e

        scanned += 1
        yield FileRecord(relative.as_posix(), contents)

    logger.info(f"Scan complete: {scanned} read, {skipped} skipped")
