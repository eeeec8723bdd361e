"""Data models for Compression Report"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

# Bucket key holding totals across every extension.
WILDCARD = "*"


@dataclass
class SizeInfo:
    """Raw and gzip size of one variant of a file"""

    size: int
    gzip_size: int


@dataclass
class FileEntry:
    """One logical file: its unminified and/or minified variant.

    ``name`` is the normalized name (minified marker stripped). At least one
    of ``unminified``/``minified`` is set once the entry has been recorded.
    """

    name: str
    unminified: Optional[SizeInfo] = None
    minified: Optional[SizeInfo] = None

    # Filled by Aggregator.aggregate()
    minification_size_ratio: Optional[float] = None
    compression_size_ratio: Optional[float] = None

    @property
    def extension(self) -> str:
        # A name without a dot is its own extension.
        return self.name.rsplit(".", 1)[-1].lower()

    @property
    def src(self) -> SizeInfo:
        """The larger representation: unminified if present, else minified."""
        variant = self.unminified if self.unminified is not None else self.minified
        if variant is None:
            raise ValueError(f"FileEntry {self.name!r} has no recorded variant")
        return variant

    @property
    def dist(self) -> SizeInfo:
        """The shipped representation: minified if present, else unminified."""
        variant = self.minified if self.minified is not None else self.unminified
        if variant is None:
            raise ValueError(f"FileEntry {self.name!r} has no recorded variant")
        return variant

    @property
    def bytes_over_wire(self) -> int:
        return self.dist.gzip_size

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["extension"] = self.extension
        data["bytes_over_wire"] = self.bytes_over_wire
        return data


@dataclass
class CountStats:
    """File counts; each file lands in exactly one field"""

    minified: int = 0
    unminified: int = 0
    both: int = 0

    @property
    def total(self) -> int:
        return self.minified + self.unminified + self.both


@dataclass
class SizeStats:
    """Summed sizes in bytes.

    ``src`` sums the unminified size of each file (minified when that is all
    there is); ``dist`` sums the minified size (unminified when that is all
    there is); ``gzip`` sums the gzip size of whatever fed ``dist``.
    """

    minified: int = 0
    unminified: int = 0
    src: int = 0
    dist: int = 0
    gzip: int = 0


@dataclass
class MinificationRatio:
    count: Optional[float] = None
    size: Optional[float] = None


@dataclass
class ExtensionBucket:
    """Totals for one lowercased extension, or for WILDCARD"""

    name: str
    count: CountStats = field(default_factory=CountStats)
    size: SizeStats = field(default_factory=SizeStats)

    # Filled by Aggregator.aggregate()
    minification_ratio: MinificationRatio = field(default_factory=MinificationRatio)
    compression_ratio: Optional[float] = None

    @property
    def is_wildcard(self) -> bool:
        return self.name == WILDCARD

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["count"]["total"] = self.count.total
        return data


@dataclass
class ReportData:
    """Finalized statistics handed to formatters."""

    files: List[FileEntry]  # sorted by name
    extensions: Dict[str, ExtensionBucket]  # sorted by extension, WILDCARD excluded
    overall: ExtensionBucket

    @property
    def file_count(self) -> int:
        return len(self.files)

    @property
    def is_empty(self) -> bool:
        return not self.files

    @property
    def missing_minification(self) -> List[FileEntry]:
        return [f for f in self.files if f.minified is None]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file_count": self.file_count,
            "missing_minification": [f.name for f in self.missing_minification],
            "files": [f.to_dict() for f in self.files],
            "extensions": {name: b.to_dict() for name, b in self.extensions.items()},
            "overall": self.overall.to_dict(),
        }
