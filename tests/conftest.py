"""Shared test fixtures for Compression Report."""

import logging

import pytest
from rich.logging import RichHandler

from compression_report.aggregator import Aggregator
from compression_report.models import FileEntry, SizeInfo
from compression_report.sources import FileRecord


@pytest.fixture
def aggregator():
    """A fresh aggregator with the default `.min` marker."""
    return Aggregator()


@pytest.fixture
def fixed_gzip(monkeypatch):
    """Make gzip size a fixed fifth of the raw size, for exact expectations."""
    monkeypatch.setattr(
        "compression_report.aggregator.gzip_size", lambda content: len(content) // 5
    )


@pytest.fixture
def reset_logging():
    """Drop the handlers ``setup_logging`` installs once the test is done."""
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if isinstance(handler, RichHandler) or type(handler) is logging.FileHandler:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(logging.WARNING)
    logging.getLogger("compression_report").setLevel(logging.NOTSET)


@pytest.fixture
def build_dir(tmp_path):
    """A small build output tree with paired and unpaired files."""
    root = tmp_path / "dist"
    (root / "css").mkdir(parents=True)
    (root / "js").mkdir()
    (root / "css" / "app.css").write_bytes(b"body { color: red; }\n" * 50)
    (root / "css" / "app.min.css").write_bytes(b"body{color:red}" * 50)
    (root / "js" / "lib.js").write_bytes(b"function f() { return 1; }\n" * 40)
    (root / "README").write_bytes(b"")
    return root


def make_record(name, size=None, fill=b"a"):
    """Record with `size` bytes of content, or a null record when size is None."""
    if size is None:
        return FileRecord(name)
    return FileRecord(name, fill * size)


def make_entry(name, unminified=None, minified=None):
    """FileEntry from (size, gzip_size) tuples."""
    return FileEntry(
        name=name,
        unminified=SizeInfo(*unminified) if unminified else None,
        minified=SizeInfo(*minified) if minified else None,
    )
