"""Handles exporting summary metrics to text and CSV."""
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Dict, Sequence, Union
import pandas as pd

from .models import SummaryMetrics
from .exceptions import ReportIOError


# Configure logging
logger = logging.getLogger(__name__)


class ResultExporter:
    """Handles exporting summary metrics to various formats."""

    @staticmethod
    def format_summary(title: str, labels: Sequence[str], metrics: Sequence[SummaryMetrics]) -> str:
        """
        Build the human-readable console summary.

        Args:
            title: Report title.
            labels: System names, in the same order as metrics.
            metrics: Summary metrics per system.
        """
        sections = [title]
        for label, m in zip(labels, metrics):
            sections.append(
                f"{label}\n"
                f"Total Requests: {m.total_requests}\n"
                f"Success Rate: {m.success_rate:.2f}%\n"
                f"p99 Latency: {m.p99_latency:.2f}ms\n"
                f"Average latency: {m.avg_latency:.2f}ms\n"
                f"Minimum Latency: {m.min_latency:.2f}ms\n"
                f"Maximum Latency: {m.max_latency:.2f}ms"
            )
        return "\n\n".join(sections)

    @staticmethod
    def save_summary(labels: Sequence[str], metrics: Sequence[SummaryMetrics], output_path: Union[Path, str]) -> None:
        """
        Save summary metrics to CSV, one row per system.

        Args:
            labels: System names used as the index.
            metrics: Summary metrics per system.
            output_path: Path to save CSV.
        """
        df = pd.DataFrame([asdict(m) for m in metrics], index=list(labels))
        df.index.name = 'system'
        try:
            df.to_csv(output_path)
        except OSError as e:
            logger.error(f"Failed to save summary CSV {output_path}: {e}")
            raise ReportIOError(f"Failed to save summary CSV {output_path}") from e
        logger.info(f"CSV saved: {output_path}")

    @staticmethod
    def load_summary(input_path: Union[Path, str]) -> Dict[str, SummaryMetrics]:
        """
        Load summary metrics saved by save_summary.

        Args:
            input_path: Path to load CSV from.

        Returns:
            Dictionary of metrics keyed by system name, in file order.
        """
        try:
            df = pd.read_csv(input_path, index_col=0)
        except OSError as e:
            logger.error(f"Failed to load summary CSV {input_path}: {e}")
            raise ReportIOError(f"Failed to load summary CSV {input_path}") from e

        results = {}
        for system, row in df.iterrows():
            results[str(system)] = SummaryMetrics(
                success_rate=float(row['success_rate']),
                p99_latency=float(row['p99_latency']),
                avg_latency=float(row['avg_latency']),
                min_latency=float(row['min_latency']),
                max_latency=float(row['max_latency']),
                total_requests=int(row.get('total_requests', 0)),
            )

        logger.info(f"Results loaded from CSV: {input_path}")
        return results
