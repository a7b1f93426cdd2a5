"""Analyzes and computes latency statistics."""
import logging
from typing import Sequence
import numpy as np

from .models import Dataset, SummaryMetrics
from .constants import ReportConstants
from .exceptions import EmptyDatasetError


# Configure logging
logger = logging.getLogger(__name__)


class LatencyAnalyzer:
    """Analyzes and computes latency statistics."""

    @staticmethod
    def percentile(sorted_values: Sequence[float], perc: float) -> float:
        """
        Percentile by linear interpolation between closest ranks.

        Args:
            sorted_values: Values in ascending order.
            perc: Percentile in [0, 100].

        Returns:
            lower + (upper - lower) * frac(index), index = perc / 100 * (n - 1).
        """
        n = len(sorted_values)
        if n == 0:
            raise EmptyDatasetError("Cannot compute a percentile of an empty dataset")

        index = perc / 100 * (n - 1)
        lower_index = int(index)
        upper_index = min(lower_index + 1, n - 1)
        lower = float(sorted_values[lower_index])
        upper = float(sorted_values[upper_index])
        return lower + (upper - lower) * (index - lower_index)

    def compute_metrics(self, records: Dataset) -> SummaryMetrics:
        """
        Compute success rate and p99/avg/min/max latency.

        Args:
            records: Non-empty dataset.

        Returns:
            SummaryMetrics with latencies in milliseconds.

        Raises:
            EmptyDatasetError: If records is empty.
        """
        if not records:
            raise EmptyDatasetError("Cannot compute summary metrics of an empty dataset")

        successes = sum(1 for r in records if r.is_success)
        latencies = np.sort(np.array([r.latency for r in records], dtype=np.float64) / ReportConstants.NANOSECONDS_PER_MILLISECOND)

        metrics = SummaryMetrics(
            success_rate=successes / len(records) * 100,
            p99_latency=self.percentile(latencies, ReportConstants.P99),
            avg_latency=float(np.mean(latencies)),
            min_latency=float(latencies[0]),
            max_latency=float(latencies[-1]),
            total_requests=len(records),
        )
        logger.debug(f"Computed metrics over {len(records)} records: {metrics}")
        return metrics
