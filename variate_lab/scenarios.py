"""
PURPOSE: Scenario driver that turns distribution parameters into sequences,
summaries, histograms and files.

RESPONSIBILITIES:
- Hold the reference scenarios (mean, stddev, bounds, sample count)
- Write the six per-scenario sequence files plus a summary table
- Build normal histograms, redrawing out-of-range values to keep the count fixed
- Build rows for the uniform/normal/truncated sequence table

CONSTRAINTS:
- Parameters are validated before any value is drawn or any file is opened
- Does NOT format console output; see outputs.py
"""

import logging
import math
import numbers
import os
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from .config import DATA_DIR, HISTOGRAM_BINS, HISTOGRAM_SAMPLES, HISTOGRAM_WIDTH_SIGMAS
from .distributions import DistributionParams, VariateGenerator
from .errors import InvalidParameter
from .histogram import Histogram, histogram
from .outputs import SequenceRow, write_summary_table, write_values
from .summary import SummaryStatistics, summarize

logger = logging.getLogger(__name__)

# Output file name -> variate kind, in the order files are written
SCENARIO_FILES = (
    ("uniform_integers.txt", "uniform_int"),
    ("uniform_real_numbers.txt", "uniform_real"),
    ("normally_distributed_integers.txt", "normal_int"),
    ("normal_distributed_real_numbers.txt", "normal_real"),
    ("truncated_normal_integers.txt", "truncated_normal_int"),
    ("truncated_normal_real_numbers.txt", "truncated_normal_real"),
)
SUMMARY_FILENAME = "summary.tsv"


@dataclass(frozen=True)
class Scenario:
    """One set of generation parameters.

    Attributes:
        name (str): Sub-directory the scenario's files are written to.
        mean (float): Normal mean.
        stddev (float): Normal standard deviation.
        lower (float): Lower bound for uniform and truncated kinds (integral).
        upper (float): Upper bound for uniform and truncated kinds (integral).
        count (int): Values per file.
    """
    name: str
    mean: float
    stddev: float
    lower: float
    upper: float
    count: int

    @property
    def params(self) -> DistributionParams:
        return DistributionParams(mean=self.mean, stddev=self.stddev, lower=self.lower, upper=self.upper)

    def validate(self) -> None:
        """Raise InvalidParameter unless every file of this scenario can be generated."""
        if not self.stddev > 0:
            raise InvalidParameter(f"{self.name}: stddev must be positive, got {self.stddev}")
        if not (math.isfinite(self.lower) and math.isfinite(self.upper)):
            raise InvalidParameter(f"{self.name}: bounds must be finite, got [{self.lower}, {self.upper}]")
        if not self.lower < self.upper:
            raise InvalidParameter(f"{self.name}: lower must be less than upper, got {self.lower} >= {self.upper}")
        if int(self.lower) != self.lower or int(self.upper) != self.upper:
            raise InvalidParameter(f"{self.name}: bounds must be integral, got [{self.lower}, {self.upper}]")
        if self.count <= 0:
            raise InvalidParameter(f"{self.name}: count must be greater than zero, got {self.count}")


DEFAULT_SCENARIOS = (
    Scenario(name="Scenario1", mean=5, stddev=1, lower=1, upper=8, count=20),
    Scenario(name="Scenario2", mean=2**10, stddev=2**8, lower=1, upper=2000, count=200000),
    Scenario(name="Scenario3", mean=2**12, stddev=1.3 * 2**10, lower=1, upper=8100, count=2000000),
)


def write_scenario(generator: VariateGenerator, scenario: Scenario, root_dir: str = DATA_DIR) -> Dict[str, SummaryStatistics]:
    """
    Generate and write every sequence file for one scenario.

    Creates `root_dir/<scenario.name>/` with one file per variate kind and a
    summary.tsv holding count, mean and stddev for each file.

    Returns:
        Dict of file name -> SummaryStatistics of the values written.
    """
    scenario.validate()
    scenario_dir = os.path.join(root_dir, scenario.name)
    os.makedirs(scenario_dir, exist_ok=True)
    logger.info("Writing %s (%s values per file) to %s", scenario.name, scenario.count, scenario_dir)

    summaries = {}
    for filename, kind in SCENARIO_FILES:
        values = generator.sample(kind, scenario.params, scenario.count)
        write_values(os.path.join(scenario_dir, filename), values)
        summaries[filename] = summarize(values)
        logger.debug(
            "%s/%s: mean=%.4f stddev=%.4f",
            scenario.name,
            filename,
            summaries[filename].mean,
            summaries[filename].stddev,
        )

    write_summary_table(os.path.join(scenario_dir, SUMMARY_FILENAME), summaries)
    return summaries


def run_scenarios(
    generator: VariateGenerator,
    scenarios: Iterable[Scenario] = DEFAULT_SCENARIOS,
    root_dir: str = DATA_DIR,
) -> Dict[str, Dict[str, SummaryStatistics]]:
    """Validate all scenarios, then write each under `root_dir`."""
    scenarios = list(scenarios)
    for scenario in scenarios:
        scenario.validate()
    os.makedirs(root_dir, exist_ok=True)
    results = {}
    for scenario in scenarios:
        results[scenario.name] = write_scenario(generator, scenario, root_dir)
    logger.info("Wrote %s scenarios to %s", len(results), root_dir)
    return results


def generate_histogram(
    generator: VariateGenerator,
    mean: float,
    stddev: float,
    bins: int = HISTOGRAM_BINS,
    count: int = HISTOGRAM_SAMPLES,
    width_sigmas: float = HISTOGRAM_WIDTH_SIGMAS,
) -> Histogram:
    """
    Histogram `count` normal draws over mean +/- width_sigmas * stddev.

    Draws falling outside the range are redrawn, so exactly `count` values
    are binned.
    """
    if not stddev > 0:
        raise InvalidParameter(f"stddev must be positive, got {stddev}")
    if not width_sigmas > 0:
        raise InvalidParameter(f"width_sigmas must be positive, got {width_sigmas}")
    if isinstance(bins, bool) or not isinstance(bins, numbers.Integral) or bins < 1:
        raise InvalidParameter(f"bins must be a positive integer, got {bins!r}")
    if count <= 0:
        raise InvalidParameter(f"count must be greater than zero, got {count}")

    lower = mean - width_sigmas * stddev
    upper = mean + width_sigmas * stddev
    rejected_before = generator.rejected_draws
    params = DistributionParams(mean=mean, stddev=stddev, lower=lower, upper=upper)
    samples = generator.sample("truncated_normal_real", params, count)
    hist = histogram(samples, lower, upper, bins)
    logger.info(
        "Histogram of %s draws in [%s, %s]: %s out-of-range draws redrawn",
        count,
        lower,
        upper,
        generator.rejected_draws - rejected_before,
    )
    return hist


def generate_sequence_table(
    generator: VariateGenerator,
    uniform_range: Tuple[float, float],
    mean: float,
    stddev: float,
    int_range: Tuple[int, int],
    real_range: Tuple[float, float],
    count: int,
) -> List[SequenceRow]:
    """
    Build `count` rows of (uniform real, normal real, truncated int, truncated real).

    All parameters are checked before the first draw, so a bad value yields
    no rows at all.
    """
    if not uniform_range[0] < uniform_range[1]:
        raise InvalidParameter(
            f"Minimum value (m) must be less than maximum value (M), got {uniform_range}"
        )
    if not stddev > 0:
        raise InvalidParameter(f"Standard deviation (sigma) must be positive, got {stddev}")
    if count <= 0:
        raise InvalidParameter(f"Number of sequences (N) must be greater than zero, got {count}")
    if int_range[0] > int_range[1]:
        raise InvalidParameter(f"Integer range must satisfy min <= max, got {int_range}")
    if not real_range[0] < real_range[1]:
        raise InvalidParameter(f"Real range must satisfy min < max, got {real_range}")

    rows = []
    for _ in range(count):
        rows.append((
            generator.uniform_real(*uniform_range),
            generator.normal_real(mean, stddev),
            generator.truncated_normal_int(mean, stddev, *int_range),
            generator.truncated_normal_real(mean, stddev, *real_range),
        ))
    return rows


def find_scenario(name: str, scenarios: Iterable[Scenario] = DEFAULT_SCENARIOS) -> Optional[Scenario]:
    """Look up a scenario by name (case-insensitive)."""
    for scenario in scenarios:
        if scenario.name.lower() == name.lower():
            return scenario
    return None
