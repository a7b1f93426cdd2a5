"""Shared test configuration and fixtures for all tests."""

import pytest

from src.shared.config import Config
from src.load_report.models import ResultRecord
from tests.test_const import (
    record_dict, record_line, NS_PER_SECOND, SCENARIO_RECORDS,
    SCENARIO_A_LATENCY_NS, SCENARIO_B_LATENCY_NS
)


@pytest.fixture
def make_records():
    """Build ResultRecords from (code, latency_ns, offset_ns) tuples."""
    def _make(rows):
        return [
            ResultRecord(**record_dict(i + 1, code, latency, offset))
            for i, (code, latency, offset) in enumerate(rows)
        ]
    return _make


@pytest.fixture
def write_log(tmp_path):
    """Write newline-delimited records (or raw lines) to a file in tmp_path."""
    def _write(name, lines):
        path = tmp_path / name
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def report_config(tmp_path):
    """Configuration writing every artifact into a per-test output directory."""
    output_dir = tmp_path / "out"
    return Config(output_dir=output_dir)


@pytest.fixture
def scenario_logs(write_log):
    """System A: all 200 at 5ms. System B: all 500 at 10ms. Ten requests per second."""
    step = NS_PER_SECOND // 10
    lines_a = [record_line(i + 1, 200, SCENARIO_A_LATENCY_NS, i * step) for i in range(SCENARIO_RECORDS)]
    lines_b = [record_line(i + 1, 500, SCENARIO_B_LATENCY_NS, i * step) for i in range(SCENARIO_RECORDS)]
    return write_log("go_metrics.txt", lines_a), write_log("node_metrics.txt", lines_b)
