"""
Day five – Supply Stacks (crate-stack simulator).

The puzzle input has two blocks separated by a blank line:

    [D]
[N] [C]
[Z] [M] [P]
 1   2   3

move 1 from 2 to 1
move 3 from 1 to 3

The first block is a fixed-width diagram of labelled crates, the second a
list of move instructions. This module provides:

- A layout parser turning the diagram into a stack mapping
  (stack id -> labels, bottom-to-top).
- A move parser turning each instruction into a `MoveRecord`.
- A simulation engine applying moves one crate at a time
  (`CrateMode.SINGLE`) or as an order-preserving block (`CrateMode.BLOCK`).
- A reporter reading the top label of each stack.

Both modes run over independent copies of the initial stacks, so the two
answers never share mutated state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

import re

from ..config import (
    CRATE_COLUMN_WIDTH,
    CRATE_LABEL_OFFSET,
    CRATE_ROW_PREFIX,
    EMPTY_STACK_PLACEHOLDER,
)


# Stack id -> labels, bottom-to-top.
Stacks = Dict[int, List[str]]


class ParseError(ValueError):
    """Raised when a move instruction does not match the expected pattern."""


class MoveError(ValueError):
    """Raised when a move cannot be applied to the current stacks."""


# ---------------------------------------------------------------------------
# Layout parser
# ---------------------------------------------------------------------------

class Column(Enum):
    """Non-label outcomes of reading one diagram column."""

    EMPTY = "empty"
    FINISHED = "finished"


# A read column is either a label character or one of the `Column` markers.
ColumnRead = Union[str, Column]


def column_offset(column: int) -> int:
    """Character offset of the label for 1-based `column`."""
    return CRATE_COLUMN_WIDTH * (column - 1) + CRATE_LABEL_OFFSET


def columns_for_width(width: int) -> int:
    """
    Number of columns whose label offset fits in a line of `width` characters.

    >>> columns_for_width(len("[Z] [M] [P]"))
    3
    """
    if width <= CRATE_LABEL_OFFSET:
        return 0
    return (width - CRATE_LABEL_OFFSET - 1) // CRATE_COLUMN_WIDTH + 1


def next_column(row: str, column: int) -> ColumnRead:
    """
    Read 1-based `column` of a diagram row.

    Returns the label character, `Column.EMPTY` when the slot holds a space,
    or `Column.FINISHED` when the row is too short to contain the slot.
    """
    offset = column_offset(column)
    if offset >= len(row):
        return Column.FINISHED
    char = row[offset]
    if char == " ":
        return Column.EMPTY
    return char


def decode_stack_row(row: str, max_columns: Optional[int] = None) -> List[ColumnRead]:
    """
    Decode a diagram row into one entry per column, left to right.

    Scanning stops at the first `Column.FINISHED` (ragged row end) or after
    `max_columns` columns. When `max_columns` is None the bound is derived
    from the row's own width.

    The returned list never contains `Column.FINISHED`.
    """
    if max_columns is None:
        max_columns = columns_for_width(len(row))

    data: List[ColumnRead] = []
    for column in range(1, max_columns + 1):
        read = next_column(row, column)
        if read is Column.FINISHED:
            break
        data.append(read)
    return data


def is_crate_row(line: str) -> bool:
    return line.strip().startswith(CRATE_ROW_PREFIX)


def extract_stack_of_crates(lines: Iterable[str]) -> Stacks:
    """
    Build the initial stack mapping from the diagram lines.

    Only lines whose first non-whitespace character is '[' are read; the
    footer of stack numbers and blank lines are skipped. Rows are given
    top-down, so every label found is inserted at the bottom of its stack.
    Columns that are blank on every row still get an (empty) entry.

    Parameters
    ----------
    lines:
        Diagram lines as they appear in the input, topmost row first.

    Returns
    -------
    Stacks
        Mapping of stack id (1-based, left to right) to labels, ordered
        bottom-to-top, with keys in ascending order.
    """
    rows = [line for line in lines if is_crate_row(line)]
    if not rows:
        return {}

    max_columns = columns_for_width(max(len(row) for row in rows))

    stacks: Stacks = {}
    for row in rows:
        for column, read in enumerate(decode_stack_row(row, max_columns), start=1):
            stack = stacks.setdefault(column, [])
            if read is not Column.EMPTY:
                stack.insert(0, read)

    return dict(sorted(stacks.items()))


def split_puzzle(lines: Sequence[str]) -> Tuple[List[str], List[str]]:
    """
    Split puzzle lines at the first empty line into (diagram, moves).

    Only a truly empty line separates the blocks; a line holding spaces
    stays in the diagram. If there is no empty line every line belongs to
    the diagram.
    """
    for i, line in enumerate(lines):
        if not line:
            return list(lines[:i]), list(lines[i + 1:])
    return list(lines), []


# ---------------------------------------------------------------------------
# Move parser
# ---------------------------------------------------------------------------

_MOVE_PATTERN = re.compile(r"move ([0-9]{1,2}) from ([0-9]) to ([0-9])")


@dataclass(frozen=True)
class MoveRecord:
    """A single `move <count> from <source> to <destination>` instruction."""

    count: int
    source: int
    destination: int

    @classmethod
    def from_text(cls, text: str) -> "MoveRecord":
        """
        Parse one instruction line.

        The whole line must match; leading or trailing content is rejected.

        Raises
        ------
        ParseError
            If `text` is not a well-formed move instruction.
        """
        match = _MOVE_PATTERN.fullmatch(text)
        if match is None:
            raise ParseError(f"Unable to parse move instruction: {text!r}")
        count, source, destination = (int(group) for group in match.groups())
        return cls(count=count, source=source, destination=destination)

    def __str__(self) -> str:
        return f"move {self.count} from {self.source} to {self.destination}"


def parse_moves(lines: Iterable[str]) -> List[MoveRecord]:
    """
    Parse move instruction lines in order.

    Blank lines at the end of the block are ignored. Any other line,
    including a blank line between two moves, must be a valid instruction;
    the first malformed line aborts parsing with `ParseError`.
    """
    move_lines = list(lines)
    while move_lines and not move_lines[-1].strip():
        move_lines.pop()
    return [MoveRecord.from_text(line) for line in move_lines]


# ---------------------------------------------------------------------------
# Simulation engine
# ---------------------------------------------------------------------------

class CrateMode(Enum):
    """How a move transfers its crates."""

    # One crate at a time; the moved crates arrive in reverse order.
    SINGLE = "single"
    # All crates at once; the moved crates keep their order.
    BLOCK = "block"


def copy_stacks(stacks: Stacks) -> Stacks:
    """Return an independent copy of `stacks`."""
    return {stack_id: list(labels) for stack_id, labels in stacks.items()}


def label_count(stacks: Stacks) -> int:
    """Total number of labels across all stacks."""
    return sum(len(labels) for labels in stacks.values())


def _check_move(stacks: Stacks, move: MoveRecord) -> None:
    for stack_id in (move.source, move.destination):
        if stack_id not in stacks:
            raise MoveError(
                f"{move}: unknown stack {stack_id}. Known stacks: {sorted(stacks)}"
            )
    available = len(stacks[move.source])
    if move.count > available:
        raise MoveError(
            f"{move}: stack {move.source} only holds {available} crate(s)."
        )


def apply_move(stacks: Stacks, move: MoveRecord, mode: CrateMode) -> None:
    """
    Apply a single move to `stacks` in place.

    Preconditions are checked before anything is mutated.

    Raises
    ------
    MoveError
        If either stack id is unknown or the source holds fewer than
        `move.count` labels.
    """
    _check_move(stacks, move)
    if move.source == move.destination:
        return

    source = stacks[move.source]
    destination = stacks[move.destination]

    if mode is CrateMode.SINGLE:
        for _ in range(move.count):
            destination.append(source.pop())
    elif mode is CrateMode.BLOCK:
        split = len(source) - move.count
        block = source[split:]
        del source[split:]
        destination.extend(block)
    else:
        raise ValueError(f"Unknown crate mode: {mode!r}")


def apply_moves(stacks: Stacks, moves: Iterable[MoveRecord], mode: CrateMode) -> Stacks:
    """Apply `moves` in order to `stacks` in place and return it."""
    for move in moves:
        apply_move(stacks, move, mode)
    return stacks


def simulate(stacks: Stacks, moves: Iterable[MoveRecord], mode: CrateMode) -> Stacks:
    """
    Run `moves` over a copy of `stacks` and return the final mapping.

    The caller's mapping is left untouched, so the same initial stacks can be
    simulated once per mode.
    """
    return apply_moves(copy_stacks(stacks), moves, mode)


# ---------------------------------------------------------------------------
# Reporter
# ---------------------------------------------------------------------------

def top_of_stacks(stacks: Stacks) -> str:
    """
    Concatenate the top label of each stack in ascending id order.

    Empty stacks contribute `EMPTY_STACK_PLACEHOLDER`.
    """
    return "".join(
        stacks[stack_id][-1] if stacks[stack_id] else EMPTY_STACK_PLACEHOLDER
        for stack_id in sorted(stacks)
    )


# ---------------------------------------------------------------------------
# Puzzle entry point
# ---------------------------------------------------------------------------

def parse_puzzle(lines: Sequence[str]) -> Tuple[Stacks, List[MoveRecord]]:
    """Parse the full puzzle input into initial stacks and the move list."""
    diagram, move_lines = split_puzzle(lines)
    return extract_stack_of_crates(diagram), parse_moves(move_lines)


def solve(lines: Sequence[str]) -> Tuple[str, str]:
    """
    Solve both parts: top labels after single-crate moves, then after
    block moves.
    """
    stacks, moves = parse_puzzle(lines)
    part_one = top_of_stacks(simulate(stacks, moves, CrateMode.SINGLE))
    part_two = top_of_stacks(simulate(stacks, moves, CrateMode.BLOCK))
    return part_one, part_two


__all__ = [
    "Stacks",
    "ParseError",
    "MoveError",
    "Column",
    "ColumnRead",
    "column_offset",
    "columns_for_width",
    "next_column",
    "decode_stack_row",
    "is_crate_row",
    "extract_stack_of_crates",
    "split_puzzle",
    "MoveRecord",
    "parse_moves",
    "CrateMode",
    "copy_stacks",
    "label_count",
    "apply_move",
    "apply_moves",
    "simulate",
    "top_of_stacks",
    "parse_puzzle",
    "solve",
]
