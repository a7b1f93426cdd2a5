"""Renders latency comparison charts."""
import logging
from pathlib import Path
from typing import List, Tuple, Union

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns

from src.shared.config import Config
from .models import BarChartSpec, BucketedSeries, SummaryMetrics
from .constants import ReportConstants
from .exceptions import RenderError, ReportIOError


# Configure logging
logger = logging.getLogger(__name__)


class ChartRenderer:
    """Renders the line chart and the per-metric bar charts as PNG files."""

    def __init__(self, config: Config):
        self.config = config

    @property
    def labels(self) -> List[str]:
        return [self.config.system_a_label, self.config.system_b_label]

    @property
    def colors(self) -> List[str]:
        return [self.config.system_a_color, self.config.system_b_color]

    def build_line_points(self, series_a: BucketedSeries, series_b: BucketedSeries) -> Tuple[List[float], List[float], List[float]]:
        """
        Build x and per-series y values (ms) for the line chart.

        "index" walks keys 0..min(len(a), len(b)) - 1 and plots 0 where a key is
        missing. "bucket" plots the union of keys and leaves missing buckets as gaps.
        """
        to_ms = ReportConstants.NANOSECONDS_PER_MILLISECOND
        if self.config.line_chart_alignment == "index":
            x = list(range(min(len(series_a), len(series_b))))
            y_a = [series_a.get(i, 0.0) / to_ms for i in x]
            y_b = [series_b.get(i, 0.0) / to_ms for i in x]
        else:
            x = sorted(set(series_a) | set(series_b))
            y_a = [series_a[k] / to_ms if k in series_a else np.nan for k in x]
            y_b = [series_b[k] / to_ms if k in series_b else np.nan for k in x]

        for i, a, b in zip(x, y_a, y_b):
            logger.debug(f"{i}: {self.config.system_a_label}: {a:.2f}, {self.config.system_b_label}: {b:.2f}")
        return [float(i) for i in x], y_a, y_b

    def plot_line_chart(self, series_a: BucketedSeries, series_b: BucketedSeries, output_path: Union[Path, str]) -> Path:
        """
        Generate and save the latency-over-seconds line chart.

        Args:
            series_a: Bucketed series of system A.
            series_b: Bucketed series of system B.
            output_path: Path to save plot.

        Raises:
            RenderError: If there are no points to draw.
        """
        logger.info(f"Bucket counts: {self.config.system_a_label}={len(series_a)}, {self.config.system_b_label}={len(series_b)}")
        x, y_a, y_b = self.build_line_points(series_a, series_b)
        if not x:
            raise RenderError("Cannot draw line chart: no bucketed latencies to plot")

        with sns.axes_style("whitegrid"):
            fig, ax = plt.subplots(figsize=ReportConstants.LINE_CHART_SIZE)
            try:
                ax.plot(x, y_a, color=self.config.system_a_color, linestyle='-', label=self.config.system_a_label)
                ax.plot(x, y_b, color=self.config.system_b_color, linestyle='-', label=self.config.system_b_label)
                ax.set_title("Latency over seconds")
                ax.set_xlabel("Seconds elapsed")
                ax.set_ylabel("Latency (ms)")
                ax.legend(loc="upper right")
                self._save(fig, output_path)
            finally:
                plt.close(fig)

        logger.info(f"Line chart saved: {output_path}")
        return Path(output_path)

    def plot_bar_chart(self, output_path: Union[Path, str], chart: BarChartSpec) -> Path:
        """Generate and save one two-bar chart for a single metric."""
        width = ReportConstants.BAR_WIDTH
        positions = [i * (width + ReportConstants.BAR_GAP) for i in range(len(chart.values))]

        with sns.axes_style("whitegrid"):
            fig, ax = plt.subplots(figsize=ReportConstants.BAR_CHART_SIZE)
            try:
                bars = ax.bar(positions, chart.values, width, color=chart.colors, label=chart.labels)

                # Add values on top of bars
                for bar, val in zip(bars, chart.values):
                    ax.text(bar.get_x() + bar.get_width() / 2, bar.get_height(), f'{val:.2f}', ha='center', va='bottom', fontsize=8)

                ax.set_title(chart.title)
                ax.set_ylabel(chart.y_label)
                ax.set_xticks([])
                if chart.has_legend:
                    ax.legend(loc="upper right")
                self._save(fig, output_path)
            finally:
                plt.close(fig)

        logger.info(f"Bar chart saved: {output_path}")
        return Path(output_path)

    def bar_chart_specs(self, metrics_a: SummaryMetrics, metrics_b: SummaryMetrics) -> List[BarChartSpec]:
        """Bar charts in canvas order: success rate, p99, average, min, max."""
        charts = [
            (ReportConstants.SUCCESS_RATE_FILENAME, "Success Rate", "Success Rate (%)", "success_rate", True),
            (ReportConstants.P99_LATENCY_FILENAME, "p99 Latency", "Latency (ms)", "p99_latency", False),
            (ReportConstants.AVG_LATENCY_FILENAME, "Average Latency", "Latency (ms)", "avg_latency", False),
            (ReportConstants.MIN_LATENCY_FILENAME, "Minimum Latency", "Latency (ms)", "min_latency", False),
            (ReportConstants.MAX_LATENCY_FILENAME, "Maximum Latency", "Latency (ms)", "max_latency", False),
        ]
        return [
            BarChartSpec(
                filename=filename,
                title=title,
                y_label=y_label,
                labels=self.labels,
                values=[getattr(metrics_a, attr), getattr(metrics_b, attr)],
                colors=self.colors,
                has_legend=has_legend,
            )
            for filename, title, y_label, attr, has_legend in charts
        ]

    def generate_bar_charts(self, metrics_a: SummaryMetrics, metrics_b: SummaryMetrics, output_dir: Union[Path, str]) -> List[Path]:
        """
        Render the five per-metric bar charts.

        Returns:
            Chart paths in canvas order.
        """
        output_dir = Path(output_dir)
        return [self.plot_bar_chart(output_dir / spec.filename, spec) for spec in self.bar_chart_specs(metrics_a, metrics_b)]

    def _save(self, fig, output_path: Union[Path, str]) -> None:
        try:
            fig.savefig(output_path, dpi=self.config.chart_dpi, facecolor="white")
        except OSError as e:
            logger.error(f"Failed to save chart {output_path}: {e}")
            raise ReportIOError(f"Failed to save chart {output_path}") from e
        except (ValueError, RuntimeError) as e:
            logger.error(f"Failed to render chart {output_path}: {e}")
            raise RenderError(f"Failed to render chart {output_path}") from e
