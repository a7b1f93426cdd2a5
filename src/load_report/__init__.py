"""Load-test comparison report package initialization."""
from .models import ResultRecord, SummaryMetrics, BarChartSpec, ComparisonReport
from .constants import ReportConstants
from .exceptions import (
    LoadReportError, UsageError, ReportIOError, RecordReadError,
    RecordParseError, RenderError, EmptyDatasetError
)
from .record_reader import RecordReader
from .bucket_aggregator import BucketAggregator
from .latency_analyzer import LatencyAnalyzer
from .chart_renderer import ChartRenderer
from .canvas_composer import CanvasComposer
from .result_exporter import ResultExporter
from .report_generator import ReportGenerator
from .runner import ReportRunner

__all__ = [
    'ResultRecord',
    'SummaryMetrics',
    'BarChartSpec',
    'ComparisonReport',
    'ReportConstants',
    'LoadReportError',
    'UsageError',
    'ReportIOError',
    'RecordReadError',
    'RecordParseError',
    'RenderError',
    'EmptyDatasetError',
    'RecordReader',
    'BucketAggregator',
    'LatencyAnalyzer',
    'ChartRenderer',
    'CanvasComposer',
    'ResultExporter',
    'ReportGenerator',
    'ReportRunner'
]
