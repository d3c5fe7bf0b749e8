"""
PURPOSE: Summary statistics over a sample sequence.

Two-pass mean and sample standard deviation: the mean first, then the sum of
squared deviations divided by N - 1. Integer sequences are converted to float
explicitly before either pass. The input is never modified.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable

import numpy as np

from .config import SUMMARY_DECIMALS
from .errors import InvalidParameter


@dataclass(frozen=True)
class SummaryStatistics:
    """Mean and sample standard deviation of a sequence.

    Attributes:
        count (int): Number of values summarized.
        mean (float): Arithmetic mean.
        stddev (float): Sample standard deviation (N - 1 divisor); NaN when count == 1.
    """
    count: int
    mean: float
    stddev: float

    def to_dict(self, decimals: int = SUMMARY_DECIMALS) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "count": self.count,
            "mean": round(self.mean, decimals),
            "stddev": None if math.isnan(self.stddev) else round(self.stddev, decimals),
        }


def summarize(samples: Iterable[float]) -> SummaryStatistics:
    """
    Compute mean and sample standard deviation.

    Args:
        samples: Real or integer values (list, tuple or numpy array).

    Returns:
        SummaryStatistics. stddev is NaN for a single value, since the
        N - 1 divisor leaves it undefined.

    Raises:
        InvalidParameter: If samples is empty.
    """
    values = np.asarray(list(samples) if not isinstance(samples, np.ndarray) else samples, dtype=float)
    if values.ndim != 1:
        values = values.ravel()
    count = values.size
    if count == 0:
        raise InvalidParameter("cannot summarize an empty sample sequence")

    mean = float(np.sum(values) / count)
    if count == 1:
        return SummaryStatistics(count=1, mean=mean, stddev=float("nan"))

    squared_deviations = np.sum((values - mean) ** 2)
    stddev = math.sqrt(squared_deviations / (count - 1))
    return SummaryStatistics(count=int(count), mean=mean, stddev=stddev)
