"""
Day four – Camp Cleanup.

Each line holds two inclusive section ranges, e.g. "2-4,6-8". Part one
counts pairs where one range fully contains the other; part two counts
pairs that overlap at all.

Besides the per-line `Assignments` helpers, the input can be loaded as a
pandas DataFrame so both counts are computed with vectorized comparisons.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

import pandas as pd


ASSIGNMENT_COLUMNS: List[str] = [
    "first_start",
    "first_end",
    "second_start",
    "second_end",
]


@dataclass(frozen=True)
class SectionRange:
    """Inclusive range of section ids."""

    start: int
    end: int

    @classmethod
    def from_text(cls, text: str) -> "SectionRange":
        parts = text.split("-")
        if len(parts) != 2:
            raise ValueError(f"Invalid section range: {text!r}")
        try:
            start, end = (int(part) for part in parts)
        except ValueError as exc:
            raise ValueError(f"Invalid section range: {text!r}") from exc
        return cls(start=start, end=end)

    def contains(self, other: "SectionRange") -> bool:
        return self.start <= other.start and other.end <= self.end


@dataclass(frozen=True)
class Assignments:
    first: SectionRange
    second: SectionRange

    @classmethod
    def from_line(cls, code: str) -> "Assignments":
        parts = code.strip().split(",")
        if len(parts) != 2:
            raise ValueError(f"Invalid assignment line: {code!r}")
        first, second = (SectionRange.from_text(part) for part in parts)
        return cls(first=first, second=second)

    def fully_contains(self) -> bool:
        return self.first.contains(self.second) or self.second.contains(self.first)

    def overlaps(self) -> bool:
        return self.first.start <= self.second.end and self.second.start <= self.first.end


def parse_assignments(lines: Iterable[str]) -> List[Assignments]:
    return [Assignments.from_line(line) for line in lines if line.strip()]


def assignments_to_df(assignments: Sequence[Assignments]) -> pd.DataFrame:
    """
    Convert assignments into a DataFrame with one row per pair.

    Columns: first_start, first_end, second_start, second_end (int).
    """
    records = [
        (a.first.start, a.first.end, a.second.start, a.second.end)
        for a in assignments
    ]
    return pd.DataFrame.from_records(records, columns=ASSIGNMENT_COLUMNS).astype(int)


def fully_contains_mask(df: pd.DataFrame) -> pd.Series:
    """Boolean Series: one range of the row fully contains the other."""
    first_holds_second = (df["first_start"] <= df["second_start"]) & (
        df["second_end"] <= df["first_end"]
    )
    second_holds_first = (df["second_start"] <= df["first_start"]) & (
        df["first_end"] <= df["second_end"]
    )
    return first_holds_second | second_holds_first


def overlaps_mask(df: pd.DataFrame) -> pd.Series:
    """Boolean Series: the two ranges of the row share at least one section."""
    return (df["first_start"] <= df["second_end"]) & (
        df["second_start"] <= df["first_end"]
    )


def solve(lines: Sequence[str]) -> Tuple[int, int]:
    df = assignments_to_df(parse_assignments(lines))
    return int(fully_contains_mask(df).sum()), int(overlaps_mask(df).sum())


__all__ = [
    "ASSIGNMENT_COLUMNS",
    "SectionRange",
    "Assignments",
    "parse_assignments",
    "assignments_to_df",
    "fully_contains_mask",
    "overlaps_mask",
    "solve",
]
