"""Exceptions raised by variate_lab."""


class VariateLabError(Exception):
    """Base class for all variate_lab errors."""


class InvalidParameter(VariateLabError, ValueError):
    """A distribution, histogram or sequence parameter is out of its valid domain."""


class RejectionSamplingExhausted(VariateLabError, RuntimeError):
    """A truncated sampler hit its attempt cap without accepting a value."""

    def __init__(self, attempts, lower, upper):
        self.attempts = attempts
        self.lower = lower
        self.upper = upper
        super().__init__(
            f"no sample accepted in [{lower}, {upper}] after {attempts} attempts"
        )
