"""
Unit tests for summary statistics.

Reference values are worked by hand; sampled sequences are compared with
numpy's own mean and ddof=1 standard deviation.
"""

import math
import unittest

import numpy as np

from variate_lab.distributions import sample_normal_int
from variate_lab.errors import InvalidParameter
from variate_lab.summary import SummaryStatistics, summarize


class TestSummarize(unittest.TestCase):
    def test_one_to_five(self):
        """[1..5] has mean 3 and sample stddev sqrt(2.5)."""
        stats = summarize([1, 2, 3, 4, 5])
        self.assertEqual(stats.count, 5)
        self.assertAlmostEqual(stats.mean, 3.0)
        self.assertAlmostEqual(stats.stddev, math.sqrt(2.5))
        self.assertAlmostEqual(stats.stddev, 1.58114, places=5)

    def test_constant_sequence(self):
        stats = summarize([4.0] * 10)
        self.assertEqual(stats.mean, 4.0)
        self.assertEqual(stats.stddev, 0.0)

    def test_single_value_has_nan_stddev(self):
        stats = summarize([7.5])
        self.assertEqual(stats.mean, 7.5)
        self.assertTrue(math.isnan(stats.stddev))

    def test_empty_raises(self):
        with self.assertRaises(InvalidParameter):
            summarize([])

    def test_matches_numpy_on_integer_sequence(self):
        samples = sample_normal_int(100, 15, size=2000, random_state=11)
        stats = summarize(samples)
        self.assertAlmostEqual(stats.mean, float(np.mean(samples)))
        self.assertAlmostEqual(stats.stddev, float(np.std(samples, ddof=1)))

    def test_input_not_mutated(self):
        samples = np.array([3, 1, 2], dtype=np.int64)
        summarize(samples)
        np.testing.assert_array_equal(samples, [3, 1, 2])
        self.assertEqual(samples.dtype, np.int64)

    def test_accepts_generators(self):
        stats = summarize(x for x in (2.0, 4.0))
        self.assertEqual(stats.mean, 3.0)

    def test_to_dict(self):
        self.assertEqual(
            SummaryStatistics(count=3, mean=1.234567, stddev=0.5).to_dict(decimals=2),
            {"count": 3, "mean": 1.23, "stddev": 0.5},
        )
        self.assertIsNone(summarize([1.0]).to_dict()["stddev"])


if __name__ == "__main__":
    unittest.main()
