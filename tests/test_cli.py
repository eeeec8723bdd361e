"""Tests for the command line interface."""

import json
import logging

import pytest
from typer.testing import CliRunner

from compression_report import __version__
from compression_report.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for key in ("MINIFIED_NAME", "VERBOSE", "OUTPUT_FORMAT"):
        monkeypatch.delenv(f"COMPRESSION_REPORT_{key}", raising=False)


class TestReportCommand:
    def test_json_output(self, build_dir):
        result = runner.invoke(app, ["report", str(build_dir), "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["file_count"] == 3
        assert data["missing_minification"] == ["README", "js/lib.js"]

    def test_rich_output(self, build_dir):
        result = runner.invoke(app, ["report", str(build_dir)])

        assert result.exit_code == 0
        assert "3 files" in result.stdout
        assert "Missing minification: 2/3" in result.stdout

    def test_include_filter(self, build_dir):
        result = runner.invoke(
            app, ["report", str(build_dir), "--include", "*.css", "--format", "json"]
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout)["missing_minification"] == []

    def test_custom_marker(self, tmp_path):
        (tmp_path / "app.js").write_bytes(b"x" * 100)
        (tmp_path / "app-min.js").write_bytes(b"x" * 40)

        result = runner.invoke(
            app, ["report", str(tmp_path), "--minified-name", "-min", "--format", "json"]
        )

        assert result.exit_code == 0
        files = json.loads(result.stdout)["files"]
        assert [f["name"] for f in files] == ["app.js"]
        assert files[0]["minification_size_ratio"] == pytest.approx(0.4)

    def test_empty_directory(self, tmp_path):
        empty = tmp_path / "empty"
        empty.mkdir()
        result = runner.invoke(app, ["report", str(empty)])

        assert result.exit_code == 0
        assert "no data" in result.stdout
        assert "File Statistics" not in result.stdout

    def test_missing_path(self, tmp_path):
        result = runner.invoke(app, ["report", str(tmp_path / "missing")])
        assert result.exit_code == 1
        assert "Error:" in result.stdout

    def test_invalid_marker(self, build_dir):
        result = runner.invoke(app, ["report", str(build_dir), "--minified-name", "("])
        assert result.exit_code == 1
        assert "minified_name" in result.stdout

    def test_config_file(self, build_dir, tmp_path):
        config = tmp_path / "report.toml"
        config.write_text('output_format = "csv"\n')

        result = runner.invoke(app, ["report", str(build_dir), "--config", str(config)])

        assert result.exit_code == 0
        assert result.stdout.splitlines()[0].startswith("scope,name,extension,count")

    @pytest.mark.usefixtures("reset_logging")
    def test_log_file(self, build_dir, tmp_path):
        log_file = tmp_path / "report.log"
        result = runner.invoke(
            app, ["report", str(build_dir), "--verbose", "--log-file", str(log_file)]
        )

        assert result.exit_code == 0
        for handler in logging.getLogger().handlers:
            handler.flush()
        text = log_file.read_text()
        assert "Scan complete: 4 read, 0 skipped" in text
        assert "Recorded css/app.min.css as minified css/app.css" in text

    @pytest.mark.usefixtures("reset_logging")
    def test_quiet(self, build_dir):
        result = runner.invoke(app, ["report", str(build_dir), "--verbose", "--quiet"])

        assert result.exit_code == 0
        assert logging.getLogger("compression_report").level == logging.ERROR
        assert "3 files" in result.stdout


class TestConfigCommand:
    def test_json(self):
        result = runner.invoke(app, ["config", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["minified_name"] == "\\.min"
        assert data["output_format"] == "rich"

    def test_rich(self):
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 0
        assert "minified_name" in result.stdout


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout
