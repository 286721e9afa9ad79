# /// script
# requires-python = ">=3.12"
# dependencies = []
# ///
"""RE288 run expectancy table.

Expected runs scored for the remainder of a half-inning from each of the 288
(balls, strikes, base state, outs) situations.  Values are Tom Tango's 2018
RE288 numbers.

Key: ``(balls, strikes, base_value, outs)`` where ``base_value`` is the
occupied-base bitmask (1 = first, 2 = second, 4 = third, summed).

Usage::

    from data.run_expectancy import RE288_DEFAULT, lookup_run_expectancy

    lookup_run_expectancy(RE288_DEFAULT, balls=0, strikes=0, base_value=1, outs=0)
"""

from __future__ import annotations

import json
from pathlib import Path

# ---------------------------------------------------------------------------
# Types
# ---------------------------------------------------------------------------

RE288Key = tuple[int, int, int, int]
RunExpectancyTable = dict[RE288Key, float]

MAX_BALLS = 3
MAX_STRIKES = 2
MAX_BASE_VALUE = 7
MAX_OUTS = 2


# ---------------------------------------------------------------------------
# Default table (Tango 2018)
#
# Grouped by outs, then base state.
# ---------------------------------------------------------------------------

RE288_DEFAULT: RunExpectancyTable = {
    # 0 outs, base state 0
    (0, 0, 0, 0): 0.508,
    (0, 1, 0, 0): 0.472,
    (0, 2, 0, 0): 0.42,
    (1, 0, 0, 0): 0.545,
    (1, 1, 0, 0): 0.501,
    (1, 2, 0, 0): 0.444,
    (2, 0, 0, 0): 0.612,
    (2, 1, 0, 0): 0.553,
    (2, 2, 0, 0): 0.488,
    (3, 0, 0, 0): 0.741,
    (3, 1, 0, 0): 0.667,
    (3, 2, 0, 0): 0.584,

    # 0 outs, base state 1
    (0, 0, 1, 0): 0.909,
    (0, 1, 1, 0): 0.852,
    (0, 2, 1, 0): 0.788,
    (1, 0, 1, 0): 0.969,
    (1, 1, 1, 0): 0.896,
    (1, 2, 1, 0): 0.819,
    (2, 0, 1, 0): 1.078,
    (2, 1, 1, 0): 0.975,
    (2, 2, 1, 0): 0.881,
    (3, 0, 1, 0): 1.249,
    (3, 1, 1, 0): 1.146,
    (3, 2, 1, 0): 1.021,

    # 0 outs, base state 2
    (0, 0, 2, 0): 1.153,
    (0, 1, 2, 0): 1.104,
    (0, 2, 2, 0): 0.989,
    (1, 0, 2, 0): 1.2,
    (1, 1, 2, 0): 1.116,
    (1, 2, 2, 0): 1.034,
    (2, 0, 2, 0): 1.249,
    (2, 1, 2, 0): 1.194,
    (2, 2, 2, 0): 1.099,
    (3, 0, 2, 0): 1.383,
    (3, 1, 2, 0): 1.307,
    (3, 2, 2, 0): 1.161,

    # 0 outs, base state 3
    (0, 0, 3, 0): 1.498,
    (0, 1, 3, 0): 1.407,
    (0, 2, 3, 0): 1.288,
    (1, 0, 3, 0): 1.567,
    (1, 1, 3, 0): 1.475,
    (1, 2, 3, 0): 1.343,
    (2, 0, 3, 0): 1.725,
    (2, 1, 3, 0): 1.565,
    (2, 2, 3, 0): 1.403,
    (3, 0, 3, 0): 2.017,
    (3, 1, 3, 0): 1.833,
    (3, 2, 3, 0): 1.634,

    # 0 outs, base state 4
    (0, 0, 4, 0): 1.378,
    (0, 1, 4, 0): 1.333,
    (0, 2, 4, 0): 1.273,
    (1, 0, 4, 0): 1.429,
    (1, 1, 4, 0): 1.358,
    (1, 2, 4, 0): 1.278,
    (2, 0, 4, 0): 1.476,
    (2, 1, 4, 0): 1.382,
    (2, 2, 4, 0): 1.305,
    (3, 0, 4, 0): 1.608,
    (3, 1, 4, 0): 1.549,
    (3, 2, 4, 0): 1.408,

    # 0 outs, base state 5
    (0, 0, 5, 0): 1.787,
    (0, 1, 5, 0): 1.69,
    (0, 2, 5, 0): 1.592,
    (1, 0, 5, 0): 1.843,
    (1, 1, 5, 0): 1.732,
    (1, 2, 5, 0): 1.595,
    (2, 0, 5, 0): 1.928,
    (2, 1, 5, 0): 1.83,
    (2, 2, 5, 0): 1.673,
    (3, 0, 5, 0): 2.097,
    (3, 1, 5, 0): 2.039,
    (3, 2, 5, 0): 1.827,

    # 0 outs, base state 6
    (0, 0, 6, 0): 1.96,
    (0, 1, 6, 0): 1.884,
    (0, 2, 6, 0): 1.708,
    (1, 0, 6, 0): 2.014,
    (1, 1, 6, 0): 1.958,
    (1, 2, 6, 0): 1.758,
    (2, 0, 6, 0): 2.09,
    (2, 1, 6, 0): 2.002,
    (2, 2, 6, 0): 1.82,
    (3, 0, 6, 0): 2.285,
    (3, 1, 6, 0): 2.217,
    (3, 2, 6, 0): 2.001,

    # 0 outs, base state 7
    (0, 0, 7, 0): 2.376,
    (0, 1, 7, 0): 2.247,
    (0, 2, 7, 0): 2.14,
    (1, 0, 7, 0): 2.51,
    (1, 1, 7, 0): 2.352,
    (1, 2, 7, 0): 2.165,
    (2, 0, 7, 0): 2.549,
    (2, 1, 7, 0): 2.505,
    (2, 2, 7, 0): 2.345,
    (3, 0, 7, 0): 2.912,
    (3, 1, 7, 0): 2.696,
    (3, 2, 7, 0): 2.742,

    # 1 out, base state 0
    (0, 0, 0, 1): 0.276,
    (0, 1, 0, 1): 0.249,
    (0, 2, 0, 1): 0.211,
    (1, 0, 0, 1): 0.304,
    (1, 1, 0, 1): 0.269,
    (1, 2, 0, 1): 0.226,
    (2, 0, 0, 1): 0.355,
    (2, 1, 0, 1): 0.309,
    (2, 2, 0, 1): 0.258,
    (3, 0, 0, 1): 0.441,
    (3, 1, 0, 1): 0.395,
    (3, 2, 0, 1): 0.325,

    # 1 out, base state 1
    (0, 0, 1, 1): 0.543,
    (0, 1, 1, 1): 0.495,
    (0, 2, 1, 1): 0.429,
    (1, 0, 1, 1): 0.583,
    (1, 1, 1, 1): 0.525,
    (1, 2, 1, 1): 0.449,
    (2, 0, 1, 1): 0.66,
    (2, 1, 1, 1): 0.592,
    (2, 2, 1, 1): 0.491,
    (3, 0, 1, 1): 0.807,
    (3, 1, 1, 1): 0.726,
    (3, 2, 1, 1): 0.615,

    # 1 out, base state 2
    (0, 0, 2, 1): 0.701,
    (0, 1, 2, 1): 0.649,
    (0, 2, 2, 1): 0.58,
    (1, 0, 2, 1): 0.739,
    (1, 1, 2, 1): 0.683,
    (1, 2, 2, 1): 0.586,
    (2, 0, 2, 1): 0.796,
    (2, 1, 2, 1): 0.733,
    (2, 2, 2, 1): 0.639,
    (3, 0, 2, 1): 0.87,
    (3, 1, 2, 1): 0.802,
    (3, 2, 2, 1): 0.729,

    # 1 out, base state 3
    (0, 0, 3, 1): 0.947,
    (0, 1, 3, 1): 0.884,
    (0, 2, 3, 1): 0.783,
    (1, 0, 3, 1): 1.011,
    (1, 1, 3, 1): 0.932,
    (1, 2, 3, 1): 0.81,
    (2, 0, 3, 1): 1.104,
    (2, 1, 3, 1): 1.017,
    (2, 2, 3, 1): 0.891,
    (3, 0, 3, 1): 1.345,
    (3, 1, 3, 1): 1.236,
    (3, 2, 3, 1): 1.086,

    # 1 out, base state 4
    (0, 0, 4, 1): 0.987,
    (0, 1, 4, 1): 0.917,
    (0, 2, 4, 1): 0.796,
    (1, 0, 4, 1): 1.023,
    (1, 1, 4, 1): 0.958,
    (1, 2, 4, 1): 0.837,
    (2, 0, 4, 1): 1.061,
    (2, 1, 4, 1): 1.021,
    (2, 2, 4, 1): 0.889,
    (3, 0, 4, 1): 1.164,
    (3, 1, 4, 1): 1.108,
    (3, 2, 4, 1): 0.968,

    # 1 out, base state 5
    (0, 0, 5, 1): 1.226,
    (0, 1, 5, 1): 1.123,
    (0, 2, 5, 1): 0.988,
    (1, 0, 5, 1): 1.282,
    (1, 1, 5, 1): 1.183,
    (1, 2, 5, 1): 1.051,
    (2, 0, 5, 1): 1.359,
    (2, 1, 5, 1): 1.234,
    (2, 2, 5, 1): 1.081,
    (3, 0, 5, 1): 1.46,
    (3, 1, 5, 1): 1.341,
    (3, 2, 5, 1): 1.2,

    # 1 out, base state 6
    (0, 0, 6, 1): 1.376,
    (0, 1, 6, 1): 1.267,
    (0, 2, 6, 1): 1.118,
    (1, 0, 6, 1): 1.452,
    (1, 1, 6, 1): 1.329,
    (1, 2, 6, 1): 1.195,
    (2, 0, 6, 1): 1.514,
    (2, 1, 6, 1): 1.392,
    (2, 2, 6, 1): 1.283,
    (3, 0, 6, 1): 1.577,
    (3, 1, 6, 1): 1.477,
    (3, 2, 6, 1): 1.389,

    # 1 out, base state 7
    (0, 0, 7, 1): 1.578,
    (0, 1, 7, 1): 1.452,
    (0, 2, 7, 1): 1.334,
    (1, 0, 7, 1): 1.699,
    (1, 1, 7, 1): 1.54,
    (1, 2, 7, 1): 1.354,
    (2, 0, 7, 1): 1.847,
    (2, 1, 7, 1): 1.664,
    (2, 2, 7, 1): 1.497,
    (3, 0, 7, 1): 2.197,
    (3, 1, 7, 1): 1.962,
    (3, 2, 7, 1): 1.721,

    # 2 outs, base state 0
    (0, 0, 0, 2): 0.103,
    (0, 1, 0, 2): 0.086,
    (0, 2, 0, 2): 0.06,
    (1, 0, 0, 2): 0.119,
    (1, 1, 0, 2): 0.099,
    (1, 2, 0, 2): 0.069,
    (2, 0, 0, 2): 0.145,
    (2, 1, 0, 2): 0.12,
    (2, 2, 0, 2): 0.089,
    (3, 0, 0, 2): 0.187,
    (3, 1, 0, 2): 0.161,
    (3, 2, 0, 2): 0.127,

    # 2 outs, base state 1
    (0, 0, 1, 2): 0.231,
    (0, 1, 1, 2): 0.189,
    (0, 2, 1, 2): 0.136,
    (1, 0, 1, 2): 0.266,
    (1, 1, 1, 2): 0.221,
    (1, 2, 1, 2): 0.166,
    (2, 0, 1, 2): 0.312,
    (2, 1, 1, 2): 0.262,
    (2, 2, 1, 2): 0.195,
    (3, 0, 1, 2): 0.391,
    (3, 1, 1, 2): 0.345,
    (3, 2, 1, 2): 0.266,

    # 2 outs, base state 2
    (0, 0, 2, 2): 0.324,
    (0, 1, 2, 2): 0.276,
    (0, 2, 2, 2): 0.203,
    (1, 0, 2, 2): 0.353,
    (1, 1, 2, 2): 0.311,
    (1, 2, 2, 2): 0.228,
    (2, 0, 2, 2): 0.379,
    (2, 1, 2, 2): 0.344,
    (2, 2, 2, 2): 0.268,
    (3, 0, 2, 2): 0.419,
    (3, 1, 2, 2): 0.392,
    (3, 2, 2, 2): 0.327,

    # 2 outs, base state 3
    (0, 0, 3, 2): 0.453,
    (0, 1, 3, 2): 0.389,
    (0, 2, 3, 2): 0.272,
    (1, 0, 3, 2): 0.508,
    (1, 1, 3, 2): 0.435,
    (1, 2, 3, 2): 0.331,
    (2, 0, 3, 2): 0.591,
    (2, 1, 3, 2): 0.524,
    (2, 2, 3, 2): 0.387,
    (3, 0, 3, 2): 0.729,
    (3, 1, 3, 2): 0.668,
    (3, 2, 3, 2): 0.499,

    # 2 outs, base state 4
    (0, 0, 4, 2): 0.363,
    (0, 1, 4, 2): 0.323,
    (0, 2, 4, 2): 0.238,
    (1, 0, 4, 2): 0.388,
    (1, 1, 4, 2): 0.344,
    (1, 2, 4, 2): 0.249,
    (2, 0, 4, 2): 0.449,
    (2, 1, 4, 2): 0.399,
    (2, 2, 4, 2): 0.31,
    (3, 0, 4, 2): 0.504,
    (3, 1, 4, 2): 0.463,
    (3, 2, 4, 2): 0.397,

    # 2 outs, base state 5
    (0, 0, 5, 2): 0.501,
    (0, 1, 5, 2): 0.429,
    (0, 2, 5, 2): 0.315,
    (1, 0, 5, 2): 0.54,
    (1, 1, 5, 2): 0.453,
    (1, 2, 5, 2): 0.384,
    (2, 0, 5, 2): 0.645,
    (2, 1, 5, 2): 0.536,
    (2, 2, 5, 2): 0.453,
    (3, 0, 5, 2): 0.728,
    (3, 1, 5, 2): 0.666,
    (3, 2, 5, 2): 0.541,

    # 2 outs, base state 6
    (0, 0, 6, 2): 0.587,
    (0, 1, 6, 2): 0.499,
    (0, 2, 6, 2): 0.359,
    (1, 0, 6, 2): 0.651,
    (1, 1, 6, 2): 0.56,
    (1, 2, 6, 2): 0.391,
    (2, 0, 6, 2): 0.711,
    (2, 1, 6, 2): 0.609,
    (2, 2, 6, 2): 0.419,
    (3, 0, 6, 2): 0.799,
    (3, 1, 6, 2): 0.725,
    (3, 2, 6, 2): 0.525,

    # 2 outs, base state 7
    (0, 0, 7, 2): 0.77,
    (0, 1, 7, 2): 0.638,
    (0, 2, 7, 2): 0.509,
    (1, 0, 7, 2): 0.916,
    (1, 1, 7, 2): 0.707,
    (1, 2, 7, 2): 0.507,
    (2, 0, 7, 2): 1.157,
    (2, 1, 7, 2): 0.896,
    (2, 2, 7, 2): 0.698,
    (3, 0, 7, 2): 1.432,
    (3, 1, 7, 2): 1.217,
    (3, 2, 7, 2): 0.992,
}


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------

def lookup_run_expectancy(
    table: RunExpectancyTable,
    balls: int,
    strikes: int,
    base_value: int,
    outs: int,
) -> float:
    """Return the run expectancy for a state, or 0.0 when the state is absent."""
    return table.get((balls, strikes, base_value, outs), 0.0)


def load_run_expectancy_table(path: str | Path) -> RunExpectancyTable:
    """Load an RE288 table from a JSON file.

    The file holds a list of rows, each with ``balls``, ``strikes``,
    ``base_value``, ``outs`` and ``run_expectancy`` keys.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the payload is not a list of complete rows.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Run expectancy table not found: {path}")

    with open(p) as f:
        rows = json.load(f)

    if not isinstance(rows, list):
        raise ValueError(f"Run expectancy table must be a list of rows: {path}")

    table: RunExpectancyTable = {}
    for i, row in enumerate(rows):
        try:
            key = (
                int(row["balls"]),
                int(row["strikes"]),
                int(row["base_value"]),
                int(row["outs"]),
            )
            table[key] = float(row["run_expectancy"])
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"Invalid run expectancy row {i} in {path}: {exc}") from exc
    return table
