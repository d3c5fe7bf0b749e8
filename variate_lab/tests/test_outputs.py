"""
Unit tests for text and file rendering.

Tests verify:
- The sequence table header, precision and column layout
- One-value-per-line files for integer and real arrays
- Histogram printout format
- Numbered write followed by read-back
- File errors are logged and re-raised
"""

import os
import shutil
import tempfile
import unittest

import numpy as np

from variate_lab.histogram import histogram
from variate_lab.outputs import (
    format_histogram,
    format_sequence_table,
    format_summary,
    read_lines,
    write_numbered_values,
    write_sequence_table,
    write_summary_table,
    write_values,
)
from variate_lab.summary import summarize


class TestOutputs(unittest.TestCase):
    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()
        self.rows = [(0.123456, 10.5, 7, 9.999999), (0.5, -1.25, -2, 8.0)]

    def tearDown(self):
        shutil.rmtree(self.tmp_dir, ignore_errors=True)

    def _path(self, name):
        return os.path.join(self.tmp_dir, name)

    def test_write_sequence_table(self):
        path = self._path("output.txt")
        count = write_sequence_table(path, self.rows)
        self.assertEqual(count, 2)
        self.assertEqual(
            read_lines(path),
            [
                "Continuous\tNormal\tTruncInt\tTruncReal",
                "0.12346\t10.50000\t7\t10.00000",
                "0.50000\t-1.25000\t-2\t8.00000",
            ],
        )

    def test_format_sequence_table(self):
        lines = format_sequence_table(self.rows).split("\n")
        self.assertEqual(lines[0], "Continuous  Normal      TruncInt    TruncReal   ")
        self.assertEqual(lines[1], "-" * 55)
        self.assertEqual(lines[2], "0.12346     10.50000    7           10.00000    ")
        self.assertEqual(len(lines), 4)

    def test_write_values_integers_and_reals(self):
        int_path = self._path("ints.txt")
        real_path = self._path("reals.txt")
        self.assertEqual(write_values(int_path, np.array([1, -2, 30], dtype=np.int64)), 3)
        write_values(real_path, np.array([1.5, 2.0]))
        self.assertEqual(read_lines(int_path), ["1", "-2", "30"])
        self.assertEqual(read_lines(real_path), ["1.500000", "2.000000"])

    def test_format_histogram(self):
        hist = histogram([0.1, 0.2, 0.9], 0.0, 1.0, 2)
        self.assertEqual(
            format_histogram(hist),
            "Bin:[0] ----> Bin Count:[2]\nBin:[1] ----> Bin Count:[1]",
        )

    def test_numbered_values_round_trip(self):
        path = self._path("random_numbers.txt")
        self.assertEqual(write_numbered_values(path, [17, 4, 2.5]), 3)
        self.assertEqual(
            read_lines(path),
            [
                "Random number [1] --> 17",
                "Random number [2] --> 4",
                "Random number [3] --> 2.500000",
            ],
        )

    def test_summary_table_and_line(self):
        path = self._path("summary.tsv")
        stats = summarize([1, 2, 3, 4, 5])
        write_summary_table(path, {"a.txt": stats})
        self.assertEqual(read_lines(path), ["file\tcount\tmean\tstddev", "a.txt\t5\t3.000000\t1.581139"])
        self.assertEqual(format_summary(stats, label="a"), "a: n=5 mean=3.00000 stddev=1.58114")

    def test_write_failure_is_logged_and_raised(self):
        path = os.path.join(self.tmp_dir, "missing", "output.txt")
        with self.assertLogs("variate_lab.outputs", level="ERROR"):
            with self.assertRaises(OSError):
                write_sequence_table(path, self.rows)

    def test_read_missing_file_raises(self):
        with self.assertLogs("variate_lab.outputs", level="ERROR"):
            with self.assertRaises(FileNotFoundError):
                read_lines(self._path("nope.txt"))


if __name__ == "__main__":
    unittest.main()
