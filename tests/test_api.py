"""Tests for the one-shot run_report pipeline."""

import pytest

from compression_report import run_report
from compression_report.config import ReportConfig
from compression_report.exceptions import IngestError
from compression_report.formatters import BaseFormatter
from compression_report.sources import FileRecord

from conftest import make_record


class RecordingFormatter(BaseFormatter):
    def __init__(self):
        self.rendered = []

    def render(self, data):
        self.rendered.append(data)

    def format(self, data):
        return ""


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("COMPRESSION_REPORT_MINIFIED_NAME", raising=False)
    monkeypatch.delenv("COMPRESSION_REPORT_OUTPUT_FORMAT", raising=False)


class TestRunReport:
    def test_scans_directory(self, build_dir):
        data = run_report(build_dir, render=False)

        assert [f.name for f in data.files] == ["README", "css/app.css", "js/lib.js"]
        assert data.extensions["css"].count.both == 1
        assert data.extensions["js"].count.unminified == 1
        assert data.overall.count.total == 3

    def test_records_instead_of_scan(self, fixed_gzip):
        records = [make_record("app.js", 500), make_record("app-min.js", 200)]
        data = run_report(records=records, render=False, minified_name="-min")

        (entry,) = data.files
        assert entry.minification_size_ratio == pytest.approx(0.4)

    def test_renders_once(self, build_dir):
        formatter = RecordingFormatter()
        data = run_report(build_dir, formatter=formatter)
        assert formatter.rendered == [data]

    def test_empty_stream(self):
        formatter = RecordingFormatter()
        data = run_report(records=[FileRecord("dir")], formatter=formatter)
        assert data.is_empty
        assert formatter.rendered == [data]

    def test_explicit_config(self, build_dir):
        config = ReportConfig(include=["*.js"])
        data = run_report(build_dir, config=config, render=False)
        assert [f.name for f in data.files] == ["js/lib.js"]

    def test_ingest_failure_aborts_before_render(self):
        formatter = RecordingFormatter()
        records = [make_record("a.js", 10), FileRecord("b.js", "not bytes")]

        with pytest.raises(IngestError):
            run_report(records=records, formatter=formatter)
        assert formatter.rendered == []
