"""
Day one – Calorie Counting.

Each elf's snacks are listed one calorie value per line, with a blank line
between elves. Part one is the largest total carried by a single elf, part
two the sum of the three largest totals.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np


def parse_calories(lines: Iterable[str]) -> List[Optional[int]]:
    """
    Parse each line into an int, or None for the blank separator lines.

    Raises
    ------
    ValueError
        If a non-blank line is not an integer.
    """
    values: List[Optional[int]] = []
    for line in lines:
        text = line.strip()
        values.append(int(text) if text else None)
    return values


def extract_totals(values: Iterable[Optional[int]]) -> np.ndarray:
    """
    Sum consecutive values into one total per elf.

    A None closes the current group. The last group counts even when the
    input does not end with a separator; repeated separators do not create
    empty groups.
    """
    totals: List[int] = []
    current: Optional[int] = None
    for value in values:
        if value is None:
            if current is not None:
                totals.append(current)
            current = None
        else:
            current = value if current is None else current + value
    if current is not None:
        totals.append(current)
    return np.asarray(totals, dtype=np.int64)


def top_totals(totals: np.ndarray, k: int) -> np.ndarray:
    """Return the `k` largest totals, largest first."""
    return np.sort(totals)[::-1][:k]


def solve(lines: Sequence[str]) -> Tuple[int, int]:
    totals = extract_totals(parse_calories(lines))
    if totals.size == 0:
        raise ValueError("No calorie values found in input.")
    best = top_totals(totals, 3)
    return int(best[0]), int(best.sum())


__all__ = [
    "parse_calories",
    "extract_totals",
    "top_totals",
    "solve",
]
