"""
PURPOSE: Variate samplers built on a UniformSource.

RESPONSIBILITIES:
- Uniform real and uniform integer variates
- Normal real and integer variates (Box-Muller transform)
- Truncated normal real and integer variates (capped rejection sampling)
- Build sample sequences of a named variate kind
- Single responsibility: only sampling, no I/O or aggregation

NOTES:
- uniform_int uses min + floor(u * (max - min + 1)). With a finite-precision
  uniform this carries a negligible bias toward the lower values of the range.
  It is kept as-is so output matches the reference scenarios.
- Truncated samplers give up after `max_attempts` draws and raise
  RejectionSamplingExhausted. The reference programs loop without a cap.
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, Literal, Optional, Union

import numpy as np
from scipy.stats import norm

from .config import LOW_ACCEPTANCE_WARNING, MAX_REJECTION_ATTEMPTS
from .errors import InvalidParameter, RejectionSamplingExhausted
from .uniform_source import UniformSource

logger = logging.getLogger(__name__)

VariateKind = Literal[
    "uniform_real",
    "uniform_int",
    "normal_real",
    "normal_int",
    "truncated_normal_real",
    "truncated_normal_int",
]

INTEGER_KINDS = frozenset({"uniform_int", "normal_int", "truncated_normal_int"})


@dataclass(frozen=True)
class DistributionParams:
    """Parameters for one generation call.

    Attributes:
        mean (float): Centre of the normal kinds.
        stddev (float): Spread of the normal kinds, must be > 0.
        lower (float): Lower bound for uniform and truncated kinds.
        upper (float): Upper bound for uniform and truncated kinds.
    """
    mean: float = 0.0
    stddev: float = 1.0
    lower: float = 0.0
    upper: float = 1.0


def _check_stddev(stddev):
    if not stddev > 0:
        raise InvalidParameter(f"stddev must be positive, got {stddev}")


def _check_real_bounds(lower, upper):
    if not lower < upper:
        raise InvalidParameter(f"min must be less than max, got min={lower}, max={upper}")


def _as_int(name, value) -> int:
    try:
        as_int = int(value)
    except (TypeError, ValueError, OverflowError):
        raise InvalidParameter(f"{name} must be an integer, got {value!r}") from None
    if as_int != value:
        raise InvalidParameter(f"{name} must be an integer, got {value!r}")
    return as_int


def _check_int_bounds(lower, upper):
    lower = _as_int("min", lower)
    upper = _as_int("max", upper)
    if lower > upper:
        raise InvalidParameter(f"min must not exceed max, got min={lower}, max={upper}")
    return lower, upper


def _check_params(kind, params):
    if kind.startswith("normal") or kind.startswith("truncated"):
        _check_stddev(params.stddev)
    if kind in INTEGER_KINDS and kind != "normal_int":
        _check_int_bounds(params.lower, params.upper)
    elif kind in ("uniform_real", "truncated_normal_real"):
        _check_real_bounds(params.lower, params.upper)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    magnitude = abs(value)
    rounded = math.floor(magnitude)
    if magnitude - rounded >= 0.5:
        rounded += 1
    return int(math.copysign(rounded, value))


def truncation_mass(mean: float, stddev: float, lower: float, upper: float) -> float:
    """Probability that N(mean, stddev^2) falls inside [lower, upper]."""
    _check_stddev(stddev)
    return float(norm.cdf(upper, loc=mean, scale=stddev) - norm.cdf(lower, loc=mean, scale=stddev))


class VariateGenerator:
    """
    Draws variates from a UniformSource.

    Every method consumes draws from the source and otherwise leaves no
    caller-visible state behind, apart from the `rejected_draws` counter kept
    for diagnostics.
    """

    def __init__(self, source: Optional[UniformSource] = None, max_attempts: int = MAX_REJECTION_ATTEMPTS):
        """
        Args:
            source: Uniform source to draw from (default: a clock-seeded source).
            max_attempts: Cap on draws per truncated sample.
        """
        if max_attempts < 1:
            raise InvalidParameter(f"max_attempts must be at least 1, got {max_attempts}")
        self.source = source if source is not None else UniformSource()
        self.max_attempts = max_attempts
        self.rejected_draws = 0
        self._checked_windows = set()

    # Uniform

    def uniform_real(self, min_val: float, max_val: float) -> float:
        """Uniform real in [min_val, max_val)."""
        _check_real_bounds(min_val, max_val)
        return min_val + (max_val - min_val) * self.source.next_uniform()

    def uniform_int(self, min_val: int, max_val: int) -> int:
        """Uniform integer in [min_val, max_val] inclusive."""
        min_val, max_val = _check_int_bounds(min_val, max_val)
        return min_val + math.floor(self.source.next_uniform() * (max_val - min_val + 1))

    # Normal

    def _standard_normal(self) -> float:
        u1 = self.source.next_uniform()
        while u1 <= 0.0:
            u1 = self.source.next_uniform()
        u2 = self.source.next_uniform()
        return math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)

    def normal_real(self, mean: float, stddev: float) -> float:
        """Normal real via the Box-Muller transform."""
        _check_stddev(stddev)
        return mean + stddev * self._standard_normal()

    def normal_int(self, mean: float, stddev: float) -> int:
        """Normal variate rounded half away from zero."""
        return round_half_away(self.normal_real(mean, stddev))

    # Truncated normal

    def truncated_normal_real(self, mean: float, stddev: float, min_val: float, max_val: float) -> float:
        """Normal real conditioned on falling inside [min_val, max_val]."""
        _check_stddev(stddev)
        _check_real_bounds(min_val, max_val)
        self._check_window(mean, stddev, min_val, max_val)
        return self._reject_until_inside(
            lambda: mean + stddev * self._standard_normal(), min_val, max_val
        )

    def truncated_normal_int(self, mean: float, stddev: float, min_val: int, max_val: int) -> int:
        """Rounded normal conditioned on falling inside [min_val, max_val]."""
        _check_stddev(stddev)
        min_val, max_val = _check_int_bounds(min_val, max_val)
        # Values that round into the window come from [min - 0.5, max + 0.5]
        self._check_window(mean, stddev, min_val - 0.5, max_val + 0.5)
        return self._reject_until_inside(
            lambda: round_half_away(mean + stddev * self._standard_normal()), min_val, max_val
        )

    def _reject_until_inside(self, draw: Callable[[], Union[float, int]], lower, upper):
        for attempt in range(1, self.max_attempts + 1):
            value = draw()
            if lower <= value <= upper:
                self.rejected_draws += attempt - 1
                return value
        self.rejected_draws += self.max_attempts
        logger.error(
            "Rejection sampling exhausted after %s attempts for window [%s, %s]",
            self.max_attempts,
            lower,
            upper,
        )
        raise RejectionSamplingExhausted(self.max_attempts, lower, upper)

    def _check_window(self, mean, stddev, lower, upper):
        key = (mean, stddev, lower, upper)
        if key in self._checked_windows:
            return
        self._checked_windows.add(key)
        mass = truncation_mass(mean, stddev, lower, upper)
        if mass < LOW_ACCEPTANCE_WARNING:
            logger.warning(
                "Truncation window [%s, %s] holds %.3g of N(%s, %s^2); expect slow rejection sampling",
                lower,
                upper,
                mass,
                mean,
                stddev,
            )

    # Sequences

    def sample(self, kind: VariateKind, params: DistributionParams, size: int = 1) -> np.ndarray:
        """
        Draw a sample sequence of one variate kind.

        Args:
            kind: One of the VariateKind names.
            params: Distribution parameters; fields unused by `kind` are ignored.
            size: Number of independent draws.

        Returns:
            numpy array of length `size`, int64 for integer kinds and float64 otherwise.

        Raises:
            InvalidParameter: Unknown kind, negative size or invalid parameters.
        """
        samplers: Dict[str, Callable[[], Union[float, int]]] = {
            "uniform_real": lambda: self.uniform_real(params.lower, params.upper),
            "uniform_int": lambda: self.uniform_int(params.lower, params.upper),
            "normal_real": lambda: self.normal_real(params.mean, params.stddev),
            "normal_int": lambda: self.normal_int(params.mean, params.stddev),
            "truncated_normal_real": lambda: self.truncated_normal_real(
                params.mean, params.stddev, params.lower, params.upper
            ),
            "truncated_normal_int": lambda: self.truncated_normal_int(
                params.mean, params.stddev, params.lower, params.upper
            ),
        }
        if kind not in samplers:
            raise InvalidParameter(f"Unknown variate kind: {kind}")
        size = _as_int("size", size)
        if size < 0:
            raise InvalidParameter(f"size must be non-negative, got {size}")
        _check_params(kind, params)

        draw = samplers[kind]
        dtype = np.int64 if kind in INTEGER_KINDS else np.float64
        return np.fromiter((draw() for _ in range(size)), dtype=dtype, count=size)


# Module-level convenience functions for direct import
def _generator(random_state):
    return VariateGenerator(UniformSource(random_state))


def sample_uniform_real(min_val, max_val, size=1, random_state=None):
    """Module-level wrapper for uniform real sampling."""
    params = DistributionParams(lower=min_val, upper=max_val)
    return _generator(random_state).sample("uniform_real", params, size)


def sample_uniform_int(min_val, max_val, size=1, random_state=None):
    """Module-level wrapper for uniform integer sampling."""
    params = DistributionParams(lower=min_val, upper=max_val)
    return _generator(random_state).sample("uniform_int", params, size)


def sample_normal(mean, stddev, size=1, random_state=None):
    """Module-level wrapper for normal real sampling."""
    params = DistributionParams(mean=mean, stddev=stddev)
    return _generator(random_state).sample("normal_real", params, size)


def sample_normal_int(mean, stddev, size=1, random_state=None):
    """Module-level wrapper for rounded normal sampling."""
    params = DistributionParams(mean=mean, stddev=stddev)
    return _generator(random_state).sample("normal_int", params, size)


def sample_truncated_normal(mean, stddev, min_val, max_val, size=1, random_state=None):
    """Module-level wrapper for truncated normal real sampling."""
    params = DistributionParams(mean=mean, stddev=stddev, lower=min_val, upper=max_val)
    return _generator(random_state).sample("truncated_normal_real", params, size)


def sample_truncated_normal_int(mean, stddev, min_val, max_val, size=1, random_state=None):
    """Module-level wrapper for truncated normal integer sampling."""
    params = DistributionParams(mean=mean, stddev=stddev, lower=min_val, upper=max_val)
    return _generator(random_state).sample("truncated_normal_int", params, size)
