"""Unit tests for configuration settings."""

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.shared.config import Config


class TestSettings:
    """Test Config settings class."""

    def test_default_settings(self):
        """Test default configuration values."""
        settings = Config()
        assert settings.output_dir == Path(".")
        assert settings.output_filename == "output.png"
        assert settings.system_a_label == "Golang"
        assert settings.system_b_label == "Node.js"
        assert settings.line_chart_alignment == "bucket"
        assert settings.canvas_headline == "line_chart"
        assert settings.keep_intermediate_charts is False
        assert settings.summary_csv_path is None

    def test_output_path(self):
        """Test the canvas path joins directory and filename."""
        settings = Config(output_dir=Path("/tmp/reports"), output_filename="run.png")
        assert settings.output_path == Path("/tmp/reports/run.png")

    @patch.dict(os.environ, {"LOAD_REPORT_SYSTEM_A_LABEL": "Rust"})
    def test_env_override_label(self):
        """Test overriding a label via environment variable."""
        settings = Config()
        assert settings.system_a_label == "Rust"

    @patch.dict(os.environ, {"LOAD_REPORT_LINE_CHART_ALIGNMENT": "index"})
    def test_env_override_alignment(self):
        """Test selecting index alignment via environment variable."""
        settings = Config()
        assert settings.line_chart_alignment == "index"

    @patch.dict(os.environ, {"LOAD_REPORT_SYSTEM_B_LABEL": "Deno"})
    def test_env_beats_init(self):
        """Test environment variables take precedence over constructor kwargs."""
        settings = Config(system_b_label="Bun")
        assert settings.system_b_label == "Deno"

    @patch.dict(os.environ, {"LOAD_REPORT_CANVAS_HEADLINE": "pie_chart"})
    def test_invalid_headline_rejected(self):
        """Test unknown canvas headlines fail validation."""
        with pytest.raises(ValidationError):
            Config()

    def test_json_config_file(self, tmp_path, monkeypatch):
        """Test values from config.json in the working directory."""
        (tmp_path / "config.json").write_text(json.dumps({
            "output_dir": "reports",
            "keep_intermediate_charts": True,
            "summary_csv_path": "reports/summary.csv",
        }))
        monkeypatch.chdir(tmp_path)

        settings = Config()

        assert settings.output_dir == Path("reports")
        assert settings.keep_intermediate_charts is True
        assert settings.summary_csv_path == Path("reports/summary.csv")
