"""Data models for the report generator."""
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import ReportConstants


# YYYY-MM-DDTHH:MM:SS[.fraction](Z|+HH:MM|-HH:MM)
_RFC3339_PATTERN = re.compile(r'\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d{1,9})?(Z|[+-]\d{2}:\d{2})')


def parse_timestamp(value: str) -> pd.Timestamp:
    """Parse an RFC3339 timestamp keeping nanosecond precision."""
    if not isinstance(value, str) or not _RFC3339_PATTERN.fullmatch(value):
        raise ValueError(f"timestamp {value!r} is not RFC3339 with a UTC offset")
    try:
        return pd.to_datetime(value, format="ISO8601")
    except (ValueError, TypeError) as e:
        raise ValueError(f"unparseable timestamp {value!r}") from e


class ResultRecord(BaseModel):
    """One logged outcome of a single load-test request."""

    seq: int = Field(..., description="Sequence number, monotonic per source")
    code: int = Field(..., description="HTTP status code")
    latency: int = Field(..., description="Request latency in nanoseconds")
    timestamp: str = Field(..., description="RFC3339 timestamp with nanosecond precision")

    model_config = ConfigDict(frozen=True, strict=True)

    @field_validator('timestamp')
    @classmethod
    def validate_timestamp(cls, value: str) -> str:
        parse_timestamp(value)
        return value

    @property
    def parsed_timestamp(self) -> pd.Timestamp:
        return parse_timestamp(self.timestamp)

    @property
    def is_success(self) -> bool:
        return ReportConstants.SUCCESS_STATUS_MIN <= self.code < ReportConstants.SUCCESS_STATUS_MAX


# Ordered records read from one source, in file order
Dataset = List[ResultRecord]

# Elapsed-second offset -> mean latency
BucketedSeries = Dict[int, float]


@dataclass(frozen=True)
class SummaryMetrics:
    """Container for one dataset's summary statistics. Latencies are in ms."""
    success_rate: float
    p99_latency: float
    avg_latency: float
    min_latency: float
    max_latency: float
    total_requests: int = 0


@dataclass(frozen=True)
class BarChartSpec:
    """A single-metric, two-bar chart."""
    filename: str
    title: str
    y_label: str
    labels: List[str]
    values: List[float]
    colors: List[str]
    has_legend: bool = False


@dataclass(frozen=True)
class ComparisonReport:
    """Artifacts and numbers produced by one comparison run."""
    title: str
    line_chart_path: Path
    bar_chart_paths: List[Path]
    output_path: Path
    labels: List[str]
    metrics: List[SummaryMetrics] = field(default_factory=list)
    summary_csv_path: Optional[Path] = None
