"""
Random variate generation, summary statistics and histogram binning.

PURPOSE:
    Turn a seeded uniform pseudo-random source into uniform, normal and
    truncated-normal variates (real and integer), and summarize or bin the
    resulting sequences.

RESPONSIBILITIES:
    - Wrap the uniform [0, 1) source as an explicit, seedable object
    - Expose variate samplers (uniform, Box-Muller normal, truncated normal)
    - Compute two-pass mean and sample standard deviation
    - Bin real sequences into fixed-width histograms
    - Drive reference scenarios to console tables and flat files

SRP/DRY CHECK:
    Each submodule has a single responsibility:
    - uniform_source.py: Seeded uniform draws only
    - distributions.py: Variate sampling only
    - summary.py: Mean / stddev only
    - histogram.py: Binning only
    - scenarios.py: Driving generation runs only
    - outputs.py: Formatting and file output only
"""

from .distributions import (
    DistributionParams,
    VariateGenerator,
    sample_normal,
    sample_normal_int,
    sample_truncated_normal,
    sample_truncated_normal_int,
    sample_uniform_int,
    sample_uniform_real,
    truncation_mass,
)
from .errors import InvalidParameter, RejectionSamplingExhausted, VariateLabError
from .histogram import Histogram, histogram
from .summary import SummaryStatistics, summarize
from .uniform_source import UniformSource

__version__ = "0.1.0"

__all__ = [
    "UniformSource",
    "VariateGenerator",
    "DistributionParams",
    "sample_uniform_real",
    "sample_uniform_int",
    "sample_normal",
    "sample_normal_int",
    "sample_truncated_normal",
    "sample_truncated_normal_int",
    "truncation_mass",
    "summarize",
    "SummaryStatistics",
    "histogram",
    "Histogram",
    "VariateLabError",
    "InvalidParameter",
    "RejectionSamplingExhausted",
]
