"""End-to-end tests: record logs in, combined report image out."""

import os
from unittest.mock import patch

import pytest
from PIL import Image

from src.shared.config import Config
from src.load_report.cli import main
from src.load_report.runner import ReportRunner
from src.load_report.result_exporter import ResultExporter
from src.load_report.exceptions import EmptyDatasetError, RecordParseError
from tests.test_const import TEST_TITLE, record_line

BAR_CHART_FILES = ["success_rate.png", "p99_latency.png", "avg_latency.png", "min_latency.png", "max_latency.png"]
# max(800, 400 + 12 + 400) x (400 + 400 + 400 + 4 * 10 + 40 + 2 * 2)
CANVAS_PX = (812, 1284)


class TestReportPipeline:
    """Test the full read, summarize, render and compose pipeline."""

    def test_scenario_report(self, scenario_logs, report_config, capsys):
        """Test the two-system scenario end to end."""
        report = ReportRunner(report_config).run(*scenario_logs, TEST_TITLE)

        metrics_a, metrics_b = report.metrics
        assert (metrics_a.success_rate, metrics_a.p99_latency, metrics_a.avg_latency,
                metrics_a.min_latency, metrics_a.max_latency) == (100.0, 5.0, 5.0, 5.0, 5.0)
        assert (metrics_b.success_rate, metrics_b.p99_latency, metrics_b.avg_latency,
                metrics_b.min_latency, metrics_b.max_latency) == (0.0, 10.0, 10.0, 10.0, 10.0)

        output_dir = report_config.output_dir
        assert report.output_path == output_dir / "output.png"
        with Image.open(report.output_path) as img:
            assert img.size == CANVAS_PX
        assert report.line_chart_path.exists()
        for name in BAR_CHART_FILES:
            assert not (output_dir / name).exists()

        out = capsys.readouterr().out
        assert TEST_TITLE in out
        assert "Success Rate: 100.00%" in out
        assert "Maximum Latency: 10.00ms" in out

    def test_repeat_runs_give_identical_numbers(self, scenario_logs, report_config):
        """Test summary numbers do not vary between runs."""
        first = ReportRunner(report_config).run(*scenario_logs, TEST_TITLE)
        second = ReportRunner(report_config).run(*scenario_logs, TEST_TITLE)

        assert first.metrics == second.metrics

    def test_keep_intermediate_charts(self, scenario_logs, tmp_path):
        """Test per-metric charts can be kept for inspection."""
        config = Config(output_dir=tmp_path / "out", keep_intermediate_charts=True)

        ReportRunner(config).run(*scenario_logs, TEST_TITLE)

        for name in BAR_CHART_FILES:
            assert (tmp_path / "out" / name).exists()

    def test_success_rate_headline_canvas(self, scenario_logs, tmp_path):
        """Test the layout with the success-rate chart on top."""
        config = Config(output_dir=tmp_path / "out", canvas_headline="success_rate", line_chart_alignment="index")

        report = ReportRunner(config).run(*scenario_logs, TEST_TITLE)

        with Image.open(report.output_path) as img:
            assert img.size == CANVAS_PX

    def test_summary_csv_export(self, scenario_logs, tmp_path):
        """Test metrics are written to CSV when configured."""
        csv_path = tmp_path / "summary.csv"
        config = Config(output_dir=tmp_path / "out", summary_csv_path=csv_path)

        report = ReportRunner(config).run(*scenario_logs, TEST_TITLE)

        loaded = ResultExporter.load_summary(csv_path)
        assert list(loaded.values()) == report.metrics

    def test_empty_dataset_aborts_without_output(self, write_log, report_config):
        """Test an empty log fails before anything is written."""
        path_a = write_log("a.txt", [record_line(1)])
        path_b = write_log("b.txt", [])

        with pytest.raises(EmptyDatasetError):
            ReportRunner(report_config).run(path_a, path_b, TEST_TITLE)

        assert not report_config.output_dir.exists()

    def test_parse_error_aborts_without_output(self, write_log, report_config):
        """Test a malformed record fails the whole run."""
        path_a = write_log("a.txt", [record_line(1), '{"seq": 2, "code": 200}'])
        path_b = write_log("b.txt", [record_line(1)])

        with pytest.raises(RecordParseError):
            ReportRunner(report_config).run(path_a, path_b, TEST_TITLE)

        assert not report_config.output_dir.exists()


@patch('src.load_report.cli.LoggingManager')
class TestCli:
    """Test the command line contract."""

    @pytest.mark.parametrize("args", [[], ["a.txt"], ["a.txt", "b.txt"], ["a.txt", "b.txt", "title", "extra"]])
    def test_wrong_argument_count(self, mock_logging_manager, args, capsys):
        """Test anything but three arguments is a usage error."""
        status = main(["gun_metrics"] + args)

        assert status == 2
        assert "Usage: gun_metrics <system_a_metrics> <system_b_metrics> <title>" in capsys.readouterr().err
        mock_logging_manager.setup_logging.assert_not_called()

    def test_successful_run(self, mock_logging_manager, scenario_logs, tmp_path):
        """Test a valid invocation writes the report and exits 0."""
        path_a, path_b = scenario_logs
        with patch.dict(os.environ, {"LOAD_REPORT_OUTPUT_DIR": str(tmp_path / "cli")}):
            status = main(["load-report", str(path_a), str(path_b), TEST_TITLE])

        assert status == 0
        assert (tmp_path / "cli" / "output.png").exists()

    def test_failed_run(self, mock_logging_manager, tmp_path):
        """Test a fatal report error exits 1."""
        with patch.dict(os.environ, {"LOAD_REPORT_OUTPUT_DIR": str(tmp_path / "cli")}):
            status = main(["load-report", str(tmp_path / "missing_a.txt"), str(tmp_path / "missing_b.txt"), TEST_TITLE])

        assert status == 1
