"""
PURPOSE: Generation parameters, safety limits and output settings for variate_lab.

RESPONSIBILITIES:
- Define sampling defaults (random seed, rejection-sampling cap)
- Histogram defaults (bin count, sample count, truncation width)
- Output layout and precision for the scenario driver
- Single responsibility: configuration only, no sampling logic
"""

import logging
import os

logger = logging.getLogger(__name__)


def _int_from_env(name, default):
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid %s=%r; defaulting to %s.", name, raw, default)
        return default


# Sampling Parameters
RANDOM_SEED = _int_from_env("VARIATE_LAB_SEED", None)  # None = seed from wall-clock time
MAX_REJECTION_ATTEMPTS = _int_from_env("VARIATE_LAB_MAX_REJECTION_ATTEMPTS", 1_000_000)

# Truncated samplers warn when the window holds less mass than this
LOW_ACCEPTANCE_WARNING = 1e-4

# Histogram Defaults
HISTOGRAM_BINS = 50
HISTOGRAM_SAMPLES = 20000
HISTOGRAM_WIDTH_SIGMAS = 4  # Range is mean +/- width * stddev

# Output Configuration
DATA_DIR = os.environ.get("VARIATE_LAB_DATA_DIR", "DATA")
TABLE_FILENAME = "output.txt"
NUMBERS_FILENAME = "random_numbers.txt"
NUMBERS_COUNT = 100
TABLE_DECIMALS = 5  # Sequence table (console + TSV)
FILE_DECIMALS = 6  # One-value-per-line scenario files
SUMMARY_DECIMALS = 5

# Logging
LOG_LEVEL = os.environ.get("VARIATE_LAB_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_sampling_limits():
    """Return the limits applied to rejection sampling."""
    return {
        "max_rejection_attempts": MAX_REJECTION_ATTEMPTS,
        "low_acceptance_warning": LOW_ACCEPTANCE_WARNING,
    }


def get_histogram_defaults():
    """Return default histogram settings for the driver."""
    return {
        "bins": HISTOGRAM_BINS,
        "count": HISTOGRAM_SAMPLES,
        "width_sigmas": HISTOGRAM_WIDTH_SIGMAS,
    }
