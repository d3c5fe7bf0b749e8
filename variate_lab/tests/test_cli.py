import contextlib
import io
import os
import shutil
import tempfile
import unittest
from unittest import mock

from variate_lab import cli
from variate_lab.cli import build_parser, main


class TestCli(unittest.TestCase):
    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmp_dir, ignore_errors=True)

    def _run(self, *argv):
        stdout = io.StringIO()
        stderr = io.StringIO()
        with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
            code = main(["--seed", "1234", "--log-level", "WARNING", *argv])
        return code, stdout.getvalue(), stderr.getvalue()

    def test_histogram(self):
        code, out, _ = self._run("histogram", "--bins", "10", "-n", "500")
        self.assertEqual(code, 0)
        lines = out.strip().split("\n")
        self.assertEqual(len(lines), 10)
        self.assertTrue(lines[0].startswith("Bin:[0] ----> Bin Count:["))
        total = sum(int(line.split("[")[-1].rstrip("]")) for line in lines)
        self.assertEqual(total, 500)

    def test_table(self):
        output = os.path.join(self.tmp_dir, "output.txt")
        code, out, _ = self._run(
            "table", "--min", "0", "--max", "1", "--mu", "10", "--sigma", "2",
            "--int-min", "8", "--int-max", "12", "--real-min", "9", "--real-max", "11",
            "-n", "5", "--output", output,
        )
        self.assertEqual(code, 0)
        self.assertIn("Continuous  Normal", out)
        with open(output, encoding="utf-8") as f:
            self.assertEqual(len(f.read().splitlines()), 6)

    def test_table_invalid_sigma(self):
        output = os.path.join(self.tmp_dir, "output.txt")
        code, _, err = self._run(
            "table", "--min", "0", "--max", "1", "--mu", "10", "--sigma", "0",
            "--int-min", "8", "--int-max", "12", "--real-min", "9", "--real-max", "11",
            "-n", "5", "--output", output,
        )
        self.assertEqual(code, 1)
        self.assertIn("Standard deviation", err)
        self.assertFalse(os.path.exists(output))

    def test_scenarios(self):
        code, out, _ = self._run("scenarios", "--scenario", "Scenario1", "--data-dir", self.tmp_dir)
        self.assertEqual(code, 0)
        self.assertIn("Scenario1", out)
        self.assertTrue(os.path.exists(os.path.join(self.tmp_dir, "Scenario1", "uniform_integers.txt")))

    def test_numbers(self):
        output = os.path.join(self.tmp_dir, "random_numbers.txt")
        code, out, _ = self._run("numbers", "-n", "3", "--output", output)
        self.assertEqual(code, 0)
        self.assertIn("Random number [3] --> ", out)

    def test_unknown_output_dir(self):
        output = os.path.join(self.tmp_dir, "missing", "random_numbers.txt")
        code, _, err = self._run("numbers", "-n", "3", "--output", output)
        self.assertEqual(code, 1)
        self.assertIn("Error:", err)

    def test_broken_pipe_exits_quietly(self):
        def closed_reader(generator, args):
            raise BrokenPipeError(32, "Broken pipe")

        stdout = io.StringIO()
        stderr = io.StringIO()
        with mock.patch.dict(cli.COMMANDS, {"histogram": closed_reader}):
            with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
                code = main(["--seed", "1", "--log-level", "WARNING", "histogram", "-n", "10"])
        self.assertEqual(code, 0)
        self.assertTrue(stdout.closed)
        self.assertNotIn("Error:", stderr.getvalue())

    def test_parser_rejects_non_positive_counts(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                build_parser().parse_args(["histogram", "-n", "0"])
        self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
