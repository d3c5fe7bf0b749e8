"""
PURPOSE: Render generated sequences, histograms and summaries as text and files.

This module turns in-memory results into the console tables and flat text files
the driver produces: the tab-separated sequence table, one-value-per-line
scenario files, per-scenario summary tables, histogram printouts and the
numbered write/read-back file.

SRP/DRY: Single responsibility = formatting and persistence. No sampling, no
         statistics. File errors are logged and re-raised to the caller.
"""

import logging
from typing import Dict, Iterable, List, Sequence, Tuple

import numpy as np

from .config import FILE_DECIMALS, TABLE_DECIMALS
from .histogram import Histogram
from .summary import SummaryStatistics

logger = logging.getLogger(__name__)

SEQUENCE_TABLE_HEADER = ("Continuous", "Normal", "TruncInt", "TruncReal")
CONSOLE_COLUMN_WIDTH = 12

SequenceRow = Tuple[float, float, int, float]


def _format_value(value, decimals: int) -> str:
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    return f"{value:.{decimals}f}"


def format_sequence_row(row: SequenceRow, decimals: int = TABLE_DECIMALS) -> List[str]:
    """Format one (uniform, normal, truncated int, truncated real) row."""
    continuous, normal, trunc_int, trunc_real = row
    return [
        f"{continuous:.{decimals}f}",
        f"{normal:.{decimals}f}",
        str(int(trunc_int)),
        f"{trunc_real:.{decimals}f}",
    ]


def format_sequence_table(rows: Iterable[SequenceRow], decimals: int = TABLE_DECIMALS) -> str:
    """
    Render rows as a fixed-width console table.

    Columns are left-aligned in 12-character cells under a header and a
    dashed rule.
    """
    width = CONSOLE_COLUMN_WIDTH
    lines = ["".join(f"{name:<{width}}" for name in SEQUENCE_TABLE_HEADER)]
    lines.append("-" * (width * len(SEQUENCE_TABLE_HEADER) + 7))
    for row in rows:
        lines.append("".join(f"{cell:<{width}}" for cell in format_sequence_row(row, decimals)))
    return "\n".join(lines)


def write_sequence_table(path: str, rows: Iterable[SequenceRow], decimals: int = TABLE_DECIMALS) -> int:
    """
    Write rows as a tab-separated table with a header line.

    Returns:
        Number of data rows written.
    """
    count = 0
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write("\t".join(SEQUENCE_TABLE_HEADER) + "\n")
            for row in rows:
                f.write("\t".join(format_sequence_row(row, decimals)) + "\n")
                count += 1
    except OSError as e:
        logger.error(f"Failed to write sequence table {path}: {e}")
        raise
    logger.info("Wrote %s rows to %s", count, path)
    return count


def write_values(path: str, values: Sequence, decimals: int = FILE_DECIMALS) -> int:
    """
    Write one value per line. Integer arrays are written as plain integers,
    real arrays with `decimals` places.
    """
    array = np.asarray(values)
    is_integer = np.issubdtype(array.dtype, np.integer)
    try:
        with open(path, "w", encoding="utf-8") as f:
            for value in array:
                f.write((str(int(value)) if is_integer else f"{value:.{decimals}f}") + "\n")
    except OSError as e:
        logger.error(f"Failed to write values to {path}: {e}")
        raise
    logger.debug("Wrote %s values to %s", array.size, path)
    return int(array.size)


def write_summary_table(path: str, summaries: Dict[str, SummaryStatistics], decimals: int = FILE_DECIMALS) -> None:
    """Write a tab-separated `file, count, mean, stddev` table."""
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write("file\tcount\tmean\tstddev\n")
            for name, stats in summaries.items():
                f.write(
                    f"{name}\t{stats.count}\t{stats.mean:.{decimals}f}\t{stats.stddev:.{decimals}f}\n"
                )
    except OSError as e:
        logger.error(f"Failed to write summary table {path}: {e}")
        raise


def format_summary(stats: SummaryStatistics, label: str = "", decimals: int = TABLE_DECIMALS) -> str:
    """One-line summary, e.g. 'normal: n=100 mean=10.01234 stddev=1.98765'."""
    prefix = f"{label}: " if label else ""
    return f"{prefix}n={stats.count} mean={stats.mean:.{decimals}f} stddev={stats.stddev:.{decimals}f}"


def format_histogram(hist: Histogram) -> str:
    """One line per bin in the form 'Bin:[i] ----> Bin Count:[c]'."""
    return "\n".join(
        f"Bin:[{index}] ----> Bin Count:[{int(count)}]" for index, count in enumerate(hist.counts)
    )


def write_numbered_values(path: str, values: Iterable) -> int:
    """
    Write values as 'Random number [i] --> value' lines, numbered from 1.

    Returns:
        Number of lines written.
    """
    count = 0
    try:
        with open(path, "w", encoding="utf-8") as f:
            for index, value in enumerate(values, start=1):
                f.write(f"Random number [{index}] --> {_format_value(value, FILE_DECIMALS)}\n")
                count = index
    except OSError as e:
        logger.error(f"Failed to write numbered values to {path}: {e}")
        raise
    logger.info("Successfully wrote %s random numbers to the file: %s", count, path)
    return count


def read_lines(path: str) -> List[str]:
    """Read a text file back as a list of lines without trailing newlines."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return [line.rstrip("\n") for line in f]
    except OSError as e:
        logger.error(f"Failed to read {path}: {e}")
        raise
