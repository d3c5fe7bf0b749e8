"""
PURPOSE: Fixed-width histogram binning over a closed range.

RESPONSIBILITIES:
- Map each in-range value to floor((v - min) * bins / (max - min))
- Clamp v == max into the last bin
- Exclude and count values outside [min, max] (and NaN)
- Single responsibility: binning only; redrawing rejected values is the driver's job
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable

import numpy as np

from .errors import InvalidParameter

logger = logging.getLogger(__name__)


@dataclass
class Histogram:
    """Bin counts over [lower, upper].

    Attributes:
        counts (np.ndarray): Occupancy per bin, length `bins`.
        lower (float): Left edge of bin 0.
        upper (float): Right edge of the last bin (inclusive).
        bins (int): Number of bins.
        rejected (int): Inputs excluded for lying outside [lower, upper].
    """
    counts: np.ndarray
    lower: float
    upper: float
    bins: int
    rejected: int = 0

    @property
    def total(self) -> int:
        """Number of values that landed in a bin."""
        return int(self.counts.sum())

    @property
    def bin_edges(self) -> np.ndarray:
        return np.linspace(self.lower, self.upper, self.bins + 1)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "lower": self.lower,
            "upper": self.upper,
            "bins": self.bins,
            "counts": [int(c) for c in self.counts],
            "total": self.total,
            "rejected": self.rejected,
        }


def histogram(samples: Iterable[float], min_val: float, max_val: float, bins: int) -> Histogram:
    """
    Count samples into `bins` equal-width bins over [min_val, max_val].

    Args:
        samples: Real or integer values.
        min_val: Lower edge of the range.
        max_val: Upper edge of the range (inclusive).
        bins: Number of bins, at least 1.

    Returns:
        Histogram whose counts sum to the number of in-range samples.

    Raises:
        InvalidParameter: If bins < 1 or min_val >= max_val.
    """
    try:
        valid_bins = not isinstance(bins, bool) and int(bins) == bins and bins >= 1
    except (TypeError, ValueError, OverflowError):
        valid_bins = False
    if not valid_bins:
        raise InvalidParameter(f"bins must be a positive integer, got {bins!r}")
    bins = int(bins)
    if not min_val < max_val:
        raise InvalidParameter(f"min must be less than max, got min={min_val}, max={max_val}")

    values = np.asarray(list(samples) if not isinstance(samples, np.ndarray) else samples, dtype=float).ravel()
    in_range = (values >= min_val) & (values <= max_val)
    accepted = values[in_range]
    rejected = int(values.size - accepted.size)
    if rejected:
        logger.debug("Histogram excluded %s of %s values outside [%s, %s]", rejected, values.size, min_val, max_val)

    indices = np.floor((accepted - min_val) * bins / (max_val - min_val)).astype(np.int64)
    indices = np.clip(indices, 0, bins - 1)
    counts = np.bincount(indices, minlength=bins)
    return Histogram(counts=counts, lower=min_val, upper=max_val, bins=bins, rejected=rejected)
