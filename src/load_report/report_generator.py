"""Main class for generating load-test comparison reports."""
import logging
from pathlib import Path
from typing import List, Sequence, Tuple, Union

from src.shared.config import Config
from .models import ComparisonReport, Dataset
from .constants import ReportConstants
from .exceptions import EmptyDatasetError, ReportIOError
from .record_reader import RecordReader
from .bucket_aggregator import BucketAggregator
from .latency_analyzer import LatencyAnalyzer
from .chart_renderer import ChartRenderer
from .canvas_composer import CanvasComposer
from .result_exporter import ResultExporter


# Configure logging
logger = logging.getLogger(__name__)


class ReportGenerator:
    """Runs read, aggregate, summarize, render, compose and cleanup for one comparison."""

    def __init__(self, config: Config):
        self.config = config
        self.record_reader = RecordReader()
        self.bucket_aggregator = BucketAggregator()
        self.latency_analyzer = LatencyAnalyzer()
        self.chart_renderer = ChartRenderer(config)
        self.canvas_composer = CanvasComposer()
        self.result_exporter = ResultExporter()

    @property
    def labels(self) -> List[str]:
        return [self.config.system_a_label, self.config.system_b_label]

    def read_datasets(self, path_a: Union[Path, str], path_b: Union[Path, str]) -> Tuple[Dataset, Dataset]:
        """Read both record logs and make sure neither is empty."""
        datasets = (self.record_reader.read_records(path_a), self.record_reader.read_records(path_b))
        for label, path, records in zip(self.labels, (path_a, path_b), datasets):
            if not records:
                raise EmptyDatasetError(f"No records for {label} in {path}")
        return datasets

    def canvas_layout(self, line_chart: Path, bar_charts: Sequence[Path]) -> Tuple[Path, List[Tuple[Path, Path]]]:
        """
        Pick the canvas headline and the two chart rows.

        Bar charts come in order success rate, p99, average, min, max; rows 2
        and 3 always hold p99/average and min/max. With the line chart as
        headline the success-rate chart is rendered but not placed.
        """
        headline = bar_charts[0] if self.config.canvas_headline == "success_rate" else line_chart
        rows = [(bar_charts[1], bar_charts[2]), (bar_charts[3], bar_charts[4])]
        return headline, rows

    @staticmethod
    def cleanup_intermediate_charts(paths: Sequence[Path], strict: bool = True) -> None:
        """
        Delete the per-metric chart files.

        Args:
            paths: Chart files; missing ones are skipped.
            strict: Raise ReportIOError on a failed delete. When False the
                failure is logged and the remaining files are still removed.
        """
        for path in paths:
            try:
                Path(path).unlink(missing_ok=True)
            except OSError as e:
                if strict:
                    raise ReportIOError(f"Failed to delete intermediate chart {path}") from e
                logger.error(f"Failed to delete intermediate chart {path}: {e}")
        logger.info(f"Removed {len(paths)} intermediate charts")

    def generate(self, path_a: Union[Path, str], path_b: Union[Path, str], title: str) -> ComparisonReport:
        """
        Build the comparison report for two record logs.

        Args:
            path_a: Record log of system A.
            path_b: Record log of system B.
            title: Title drawn on the combined image.

        Returns:
            ComparisonReport describing the written files and metrics.
        """
        records_a, records_b = self.read_datasets(path_a, path_b)

        series_a = self.bucket_aggregator.average_by_second(records_a)
        series_b = self.bucket_aggregator.average_by_second(records_b)

        metrics_a = self.latency_analyzer.compute_metrics(records_a)
        metrics_b = self.latency_analyzer.compute_metrics(records_b)

        output_dir = Path(self.config.output_dir)
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ReportIOError(f"Failed to create output directory {output_dir}") from e

        line_chart = self.chart_renderer.plot_line_chart(series_a, series_b, output_dir / ReportConstants.LINE_CHART_FILENAME)

        # All bar chart paths this run may write, removed even if rendering stops part way
        bar_charts = [output_dir / name for name in ReportConstants.BAR_CHART_FILENAMES]
        keep = self.config.keep_intermediate_charts
        try:
            bar_charts = self.chart_renderer.generate_bar_charts(metrics_a, metrics_b, output_dir)
            headline, rows = self.canvas_layout(line_chart, bar_charts)
            output_path = self.canvas_composer.combine_images_with_title(headline, rows, self.config.output_path, title)
        except Exception:
            if not keep:
                self.cleanup_intermediate_charts(bar_charts, strict=False)
            raise
        if not keep:
            self.cleanup_intermediate_charts(bar_charts)

        summary_csv_path = self.config.summary_csv_path
        if summary_csv_path is not None:
            self.result_exporter.save_summary(self.labels, [metrics_a, metrics_b], summary_csv_path)

        return ComparisonReport(
            title=title,
            line_chart_path=line_chart,
            bar_chart_paths=bar_charts,
            output_path=output_path,
            labels=self.labels,
            metrics=[metrics_a, metrics_b],
            summary_csv_path=summary_csv_path,
        )
