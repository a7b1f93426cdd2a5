"""Groups result records into whole-second buckets."""
import logging

import numpy as np
import pandas as pd

from .models import BucketedSeries, Dataset


# Configure logging
logger = logging.getLogger(__name__)


class BucketAggregator:
    """Computes mean latency per elapsed second."""

    @staticmethod
    def elapsed_seconds(records: Dataset) -> np.ndarray:
        """
        Whole seconds elapsed since the first record, truncated toward zero.

        Out-of-order timestamps are not rejected and yield negative offsets.
        Timestamps were already checked as RFC3339 when the records were built.
        """
        timestamps = pd.to_datetime([r.timestamp for r in records], utc=True, format="ISO8601")
        elapsed = (timestamps - timestamps[0]).total_seconds()
        return np.trunc(elapsed.to_numpy()).astype(np.int64)

    def average_by_second(self, records: Dataset) -> BucketedSeries:
        """
        Average the raw nanosecond latencies of each elapsed-second bucket.

        Args:
            records: Dataset in file order.

        Returns:
            Mapping of bucket offset to mean latency in nanoseconds.
        """
        if not records:
            return {}

        df = pd.DataFrame({
            'bucket': self.elapsed_seconds(records),
            'latency': [r.latency for r in records],
        })
        averages = df.groupby('bucket', sort=True)['latency'].mean()

        logger.debug(f"Grouped {len(records)} records into {len(averages)} buckets")
        return {int(sec): float(avg) for sec, avg in averages.items()}
