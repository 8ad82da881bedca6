"""
Global configuration for the Advent of Code 2022 solvers.

This module centralizes:

- Project-root and puzzle-input paths
- Input file names for each day
- Constants describing the day five crate diagram

Keeping them in one place means scripts, tests and the runner never
hard-code paths or magic numbers.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

# This file lives in: <repo>/src/advent2022/config.py
# Project root is therefore two levels up from here.
PROJECT_ROOT: Path = Path(__file__).resolve().parents[2]

CONTENTS_DIR: Path = PROJECT_ROOT / "contents"
RESULTS_DIR: Path = PROJECT_ROOT / "results"


# ---------------------------------------------------------------------------
# Puzzle inputs
# ---------------------------------------------------------------------------

DAY_NAMES: Dict[int, str] = {
    1: "one",
    2: "two",
    3: "three",
    4: "four",
    5: "five",
}


def input_filename_for_day(day: int) -> str:
    """
    Return the input file name for `day`, e.g. 5 -> 'day_five.txt'.

    Raises
    ------
    ValueError
        If no solver is registered for `day`.
    """
    try:
        name = DAY_NAMES[day]
    except KeyError:
        raise ValueError(
            f"No puzzle registered for day {day}. Known days: {sorted(DAY_NAMES)}"
        ) from None
    return f"day_{name}.txt"


# ---------------------------------------------------------------------------
# Crate diagram (day five)
# ---------------------------------------------------------------------------

# Each column of the diagram is "[X]" followed by one separating space.
CRATE_COLUMN_WIDTH: int = 4

# Offset of the label character inside a column ("[X]" -> index 1).
CRATE_LABEL_OFFSET: int = 1

# Marks the start of a crate row once leading whitespace is stripped.
CRATE_ROW_PREFIX: str = "["

# Printed in place of a top label when a stack is empty.
EMPTY_STACK_PLACEHOLDER: str = " "


__all__ = [
    # Paths
    "PROJECT_ROOT",
    "CONTENTS_DIR",
    "RESULTS_DIR",
    # Puzzle inputs
    "DAY_NAMES",
    "input_filename_for_day",
    # Crate diagram
    "CRATE_COLUMN_WIDTH",
    "CRATE_LABEL_OFFSET",
    "CRATE_ROW_PREFIX",
    "EMPTY_STACK_PLACEHOLDER",
]
