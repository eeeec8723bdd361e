"""Tests for directory scanning."""

from pathlib import Path

import pytest

from compression_report.exceptions import FileAccessError
from compression_report.sources import FileRecord, scan_paths


class TestFileRecord:
    def test_null(self):
        assert FileRecord("dir").is_null()
        assert not FileRecord("empty.js", b"").is_null()


class TestScanPaths:
    def test_files_and_directories(self, build_dir):
        records = list(scan_paths(build_dir))
        files = {r.relative: r.contents for r in records if not r.is_null()}
        dirs = [r.relative for r in records if r.is_null()]

        assert sorted(files) == ["README", "css/app.css", "css/app.min.css", "js/lib.js"]
        assert files["README"] == b""
        assert sorted(dirs) == ["css", "js"]

    def test_sorted_order(self, build_dir):
        relatives = [r.relative for r in scan_paths(build_dir)]
        assert relatives == sorted(relatives)

    def test_include(self, build_dir):
        files = [r.relative for r in scan_paths(build_dir, include=["*.css"]) if not r.is_null()]
        assert files == ["css/app.css", "css/app.min.css"]

    def test_exclude(self, build_dir):
        files = [
            r.relative
            for r in scan_paths(build_dir, exclude=["*.min.css", "README"])
            if not r.is_null()
        ]
        assert files == ["css/app.css", "js/lib.js"]

    def test_single_file(self, build_dir):
        records = list(scan_paths(build_dir / "js" / "lib.js"))
        assert [r.relative for r in records] == ["lib.js"]

    def test_missing_root(self, tmp_path):
        with pytest.raises(FileAccessError):
            list(scan_paths(tmp_path / "missing"))

    def test_read_failure_keeps_cause(self, build_dir, monkeypatch):
        denied = PermissionError(13, "Permission denied")

        def fail(self):
            raise denied

        monkeypatch.setattr(Path, "read_bytes", fail)
        with pytest.raises(FileAccessError, match="Cannot access file") as excinfo:
            list(scan_paths(build_dir))

        assert excinfo.value.__cause__ is denied
