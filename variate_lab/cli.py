"""
Command-line driver for variate_lab.

Examples:
    # Sequence table: 10 rows, printed and written to output.txt
    python -m variate_lab table --min 0 --max 1 --mu 10 --sigma 2 \\
        --int-min 5 --int-max 15 --real-min 8 --real-max 12 -n 10

    # Per-scenario sequence files under DATA/
    python -m variate_lab scenarios --scenario Scenario1

    # 50-bin histogram of 20000 draws from N(100, 10^2)
    python -m variate_lab histogram --mu 100 --sigma 10

    # Write 100 numbered random integers, then read them back
    python -m variate_lab numbers -n 100 --seed 1234
"""

import argparse
import logging
import os
import sys
from typing import Iterable, Optional

from . import config
from .distributions import DistributionParams, VariateGenerator
from .errors import VariateLabError
from .outputs import (
    format_histogram,
    format_sequence_table,
    format_summary,
    read_lines,
    write_numbered_values,
    write_sequence_table,
)
from .scenarios import DEFAULT_SCENARIOS, find_scenario, generate_histogram, generate_sequence_table, run_scenarios
from .summary import summarize
from .uniform_source import UniformSource

logger = logging.getLogger(__name__)

# Upper bound of the integers written by the `numbers` command
NUMBERS_MAX = 2**31 - 1


def configure_logging(level_name: str = config.LOG_LEVEL) -> None:
    """Configure root logging; unknown level names fall back to INFO."""
    level = getattr(logging, level_name.upper(), None)
    invalid_level = not isinstance(level, int)
    if invalid_level:
        level = logging.INFO

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(logging.Formatter(config.LOG_FORMAT))
    logging.basicConfig(level=level, handlers=[stream_handler], force=True)
    logging.captureWarnings(True)
    if invalid_level:
        logger.warning("Invalid log level %r; defaulting to INFO.", level_name)


def positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be an integer > 0, got {text}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="variate-lab",
        description="Generate uniform, normal and truncated-normal variates, statistics and histograms.",
    )
    parser.add_argument("--seed", type=int, default=config.RANDOM_SEED, help="Fixed seed (default: wall-clock time).")
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="Logging level (default: %(default)s).")
    subparsers = parser.add_subparsers(dest="command", required=True)

    table = subparsers.add_parser("table", help="Print and save a table of uniform, normal and truncated variates.")
    table.add_argument("--min", dest="uniform_min", type=float, required=True, help="Uniform lower bound (m).")
    table.add_argument("--max", dest="uniform_max", type=float, required=True, help="Uniform upper bound (M).")
    table.add_argument("--mu", type=float, required=True, help="Normal mean.")
    table.add_argument("--sigma", type=float, required=True, help="Normal standard deviation (> 0).")
    table.add_argument("--int-min", type=int, required=True, help="Truncated normal integer lower bound.")
    table.add_argument("--int-max", type=int, required=True, help="Truncated normal integer upper bound.")
    table.add_argument("--real-min", type=float, required=True, help="Truncated normal real lower bound.")
    table.add_argument("--real-max", type=float, required=True, help="Truncated normal real upper bound.")
    table.add_argument("-n", "--n", type=int, required=True, help="Number of rows (> 0).")
    table.add_argument("--output", default=config.TABLE_FILENAME, help="TSV output file (default: %(default)s).")

    scenarios = subparsers.add_parser("scenarios", help="Write per-scenario sequence files.")
    scenarios.add_argument("--data-dir", default=config.DATA_DIR, help="Output root directory (default: %(default)s).")
    scenarios.add_argument(
        "--scenario",
        action="append",
        choices=[s.name for s in DEFAULT_SCENARIOS],
        help="Scenario to write (repeatable; default: all).",
    )

    hist = subparsers.add_parser("histogram", help="Print a histogram of truncated normal draws.")
    hist.add_argument("--mu", type=float, default=100.0, help="Normal mean (default: %(default)s).")
    hist.add_argument("--sigma", type=float, default=10.0, help="Normal standard deviation (default: %(default)s).")
    hist.add_argument("--bins", type=positive_int, default=config.HISTOGRAM_BINS, help="Bin count (default: %(default)s).")
    hist.add_argument("-n", "--n", type=positive_int, default=config.HISTOGRAM_SAMPLES, help="Sample count (default: %(default)s).")
    hist.add_argument(
        "--width",
        type=float,
        default=config.HISTOGRAM_WIDTH_SIGMAS,
        help="Half-width of the range in standard deviations (default: %(default)s).",
    )

    numbers = subparsers.add_parser("numbers", help="Write numbered random integers to a file and read them back.")
    numbers.add_argument("-n", "--n", type=positive_int, default=config.NUMBERS_COUNT, help="Count (default: %(default)s).")
    numbers.add_argument("--output", default=config.NUMBERS_FILENAME, help="Output file (default: %(default)s).")

    return parser


def _run_table(generator: VariateGenerator, args) -> None:
    rows = generate_sequence_table(
        generator,
        uniform_range=(args.uniform_min, args.uniform_max),
        mean=args.mu,
        stddev=args.sigma,
        int_range=(args.int_min, args.int_max),
        real_range=(args.real_min, args.real_max),
        count=args.n,
    )
    write_sequence_table(args.output, rows)
    print()
    print(format_sequence_table(rows))
    for index, label in enumerate(("Continuous", "Normal", "TruncInt", "TruncReal")):
        column = [row[index] for row in rows]
        if len(column) > 1:
            print(format_summary(summarize(column), label=label))
    print(f"Random sequences have been written to {args.output}")


def _run_scenarios(generator: VariateGenerator, args) -> None:
    if args.scenario:
        selected = [find_scenario(name) for name in args.scenario]
    else:
        selected = list(DEFAULT_SCENARIOS)
    results = run_scenarios(generator, selected, args.data_dir)
    for name, summaries in results.items():
        print(f"{name} -> {os.path.join(args.data_dir, name)}")
        for filename, stats in summaries.items():
            print("  " + format_summary(stats, label=filename))


def _run_histogram(generator: VariateGenerator, args) -> None:
    hist = generate_histogram(generator, args.mu, args.sigma, bins=args.bins, count=args.n, width_sigmas=args.width)
    print(format_histogram(hist))


def _run_numbers(generator: VariateGenerator, args) -> None:
    print(f"Writing {args.n} random numbers to the file: {args.output}")
    values = generator.sample("uniform_int", DistributionParams(lower=0, upper=NUMBERS_MAX), args.n)
    write_numbered_values(args.output, values)
    print("\nReading and displaying the contents of the file:")
    for line in read_lines(args.output):
        print(line)


COMMANDS = {
    "table": _run_table,
    "scenarios": _run_scenarios,
    "histogram": _run_histogram,
    "numbers": _run_numbers,
}


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    configure_logging(args.log_level)

    source = UniformSource(args.seed)
    logger.info("Running %s with seed %s", args.command, source.seed)
    generator = VariateGenerator(source)

    try:
        COMMANDS[args.command](generator, args)
        sys.stdout.flush()
    except BrokenPipeError:
        # Output piped into a reader that exited early (e.g. | head)
        try:
            sys.stdout.close()
        except OSError:
            pass
        return 0
    except VariateLabError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
