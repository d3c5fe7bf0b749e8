"""
PURPOSE: Uniform pseudo-random source feeding every variate sampler.

RESPONSIBILITIES:
- Own one numpy RandomState, seeded exactly once at construction
- Yield uniform reals in [0, 1), one at a time or as an array
- Single responsibility: no distribution transforms, no I/O

CONSTRAINTS:
- No reseeding after construction; build a new source instead
- Not thread safe; callers sharing a source across threads must lock it
"""

import logging
import time
from typing import Union

import numpy as np

logger = logging.getLogger(__name__)

# RandomState accepts seeds in [0, 2**32)
_SEED_MODULUS = 2**32


def seed_from_clock() -> int:
    """Derive a seed from the current wall-clock time."""
    return time.time_ns() % _SEED_MODULUS


class UniformSource:
    """Wraps a numpy RandomState and hands out uniform draws in [0, 1)."""

    def __init__(self, seed: Union[int, np.random.RandomState, None] = None):
        """
        Initialize the source.

        Args:
            seed: Integer seed for reproducible sequences, an existing
                RandomState to wrap, or None to seed from the clock.
        """
        if isinstance(seed, np.random.RandomState):
            self.seed = None
            self._state = seed
            logger.debug("Uniform source wrapping caller-supplied RandomState")
            return

        if seed is None:
            seed = seed_from_clock()
        self.seed = int(seed) % _SEED_MODULUS
        self._state = np.random.RandomState(self.seed)
        logger.debug("Uniform source seeded with %s", self.seed)

    def next_uniform(self) -> float:
        """Return a single uniform real in [0, 1)."""
        return float(self._state.random_sample())

    def uniforms(self, size: int) -> np.ndarray:
        """Return `size` independent uniform reals in [0, 1)."""
        return self._state.random_sample(size)

    def __repr__(self) -> str:
        return f"UniformSource(seed={self.seed!r})"
