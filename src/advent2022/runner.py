"""
High-level runner for the Advent of Code 2022 solvers.

This module glues together:

- The per-day solvers in `advent2022.days`.
- Input loading from `advent2022.utils.io`.
- Per-day timing from `advent2022.utils.timing`.

It exposes functions to:

- Run a single day and get one result row per puzzle part.
- Run several days and collect the answers in a pandas `DataFrame`.
- Benchmark repeated solves of each day.
- Save a picture of the day five stacks before and after both move modes.
- Use a small CLI for convenience:

      python -m advent2022.runner
      # or
      python -m advent2022.runner --day 5 --plot results/day_five.png
      python -m advent2022.runner --day 5 --benchmark 20
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

import pandas as pd

from .days import five, four, one, three, two
from .utils.io import PathLike, read_puzzle_lines, save_results_df
from .utils.timing import benchmark, time_block, timeit


# A solver takes the input lines and returns the answers to part one and two.
DaySolver = Callable[[Sequence[str]], Tuple[Any, Any]]

DAYS: Dict[int, DaySolver] = {
    1: one.solve,
    2: two.solve,
    3: three.solve,
    4: four.solve,
    5: five.solve,
}

RESULT_COLUMNS: List[str] = ["day", "part", "answer", "elapsed"]
BENCHMARK_COLUMNS: List[str] = ["day", "min", "mean", "max", "repeats"]


# ---------------------------------------------------------------------------
# Running days
# ---------------------------------------------------------------------------

def get_solver(day: int) -> DaySolver:
    """
    Look up the solver for `day`.

    Raises
    ------
    ValueError
        If no solver is registered for `day`.
    """
    try:
        return DAYS[day]
    except KeyError:
        raise ValueError(f"No solver for day {day}. Known days: {sorted(DAYS)}") from None


def run_day(
    day: int,
    contents_dir: Optional[PathLike] = None,
    lines: Optional[Sequence[str]] = None,
    verbose: bool = True,
) -> List[Dict[str, Any]]:
    """
    Solve one day and return one result row per part.

    Parameters
    ----------
    day:
        Puzzle day to run.
    contents_dir:
        Directory holding the inputs; ignored if `lines` is given.
    lines:
        Optional in-memory input, bypassing file loading.
    verbose:
        Print the answers and the elapsed time.

    Returns
    -------
    List[dict]
        Rows with keys day, part, answer (as text), elapsed (seconds).
    """
    solver = get_solver(day)
    if lines is None:
        lines = read_puzzle_lines(day, contents_dir)

    with time_block(f"day {day}", verbose=verbose) as timer:
        answers = solver(lines)

    rows = []
    for part, answer in enumerate(answers, start=1):
        if verbose:
            print(f"[advent2022] Day {day} part {part}: {answer!r}")
        rows.append(
            {"day": day, "part": part, "answer": str(answer), "elapsed": timer.elapsed}
        )
    return rows


def run_days(
    days: Optional[Iterable[int]] = None,
    contents_dir: Optional[PathLike] = None,
    verbose: bool = True,
) -> pd.DataFrame:
    """
    Run the given days (all known days if None) and collect a results table.

    Returns
    -------
    pd.DataFrame
        Columns day, part, answer, elapsed; sorted by (day, part).
    """
    selected = sorted(set(days)) if days is not None else sorted(DAYS)

    records: List[Dict[str, Any]] = []
    for day in selected:
        records.extend(run_day(day, contents_dir=contents_dir, verbose=verbose))

    table = pd.DataFrame.from_records(records, columns=RESULT_COLUMNS)
    return table.sort_values(["day", "part"]).reset_index(drop=True)


def benchmark_days(
    days: Optional[Iterable[int]] = None,
    contents_dir: Optional[PathLike] = None,
    repeats: int = 5,
    warmup: int = 1,
) -> pd.DataFrame:
    """
    Time repeated solves of each selected day (all known days if None).

    Inputs are read once per day; only the solver call is measured.

    Returns
    -------
    pd.DataFrame
        Columns day, min, mean, max, repeats; one row per day, sorted by day.
    """
    selected = sorted(set(days)) if days is not None else sorted(DAYS)

    records: List[Dict[str, Any]] = []
    for day in selected:
        solver = get_solver(day)
        lines = read_puzzle_lines(day, contents_dir)
        stats = benchmark(solver, lines, repeats=repeats, warmup=warmup)
        records.append({"day": day, **stats})

    return pd.DataFrame.from_records(records, columns=BENCHMARK_COLUMNS)


# ---------------------------------------------------------------------------
# Day five picture
# ---------------------------------------------------------------------------

@timeit("day five stacks plot")
def save_stacks_plot(
    output_path: PathLike,
    contents_dir: Optional[PathLike] = None,
    lines: Optional[Sequence[str]] = None,
) -> Path:
    """
    Draw the day five stacks (initial, single-crate moves, block moves)
    side-by-side and save the figure.
    """
    # matplotlib is only needed here; keep plain runs free of it.
    import matplotlib.pyplot as plt

    from .utils.plotting import plot_stacks_grid

    if lines is None:
        lines = read_puzzle_lines(5, contents_dir)

    stacks, moves = five.parse_puzzle(lines)
    single = five.simulate(stacks, moves, five.CrateMode.SINGLE)
    block = five.simulate(stacks, moves, five.CrateMode.BLOCK)

    fig, _ = plot_stacks_grid(
        [stacks, single, block],
        titles=[
            "Initial",
            f"Single: {five.top_of_stacks(single)}",
            f"Block: {five.top_of_stacks(block)}",
        ],
    )

    out_path = Path(output_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_path)
    plt.close(fig)
    return out_path


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run the Advent of Code 2022 solvers.",
    )
    parser.add_argument(
        "--day",
        type=int,
        action="append",
        default=None,
        help="Day to run; repeat for several days. Runs every day if omitted.",
    )
    parser.add_argument(
        "--contents",
        type=str,
        default=None,
        help="Directory holding the day_<n>.txt inputs (default: contents/).",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Optional CSV path for the results table.",
    )
    parser.add_argument(
        "--plot",
        type=str,
        default=None,
        help="Optional PNG path for a picture of the day five stacks.",
    )
    parser.add_argument(
        "--benchmark",
        type=int,
        default=None,
        metavar="REPEATS",
        help="Also time REPEATS solves of each selected day and print the stats.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> pd.DataFrame:
    args = _parse_args(argv)

    print("[advent2022] Advent of code 2022")
    table = run_days(args.day, contents_dir=args.contents)

    if args.output is not None:
        csv_path = save_results_df(table, path=args.output)
        print(f"[advent2022] Results written to: {csv_path}")

    if args.plot is not None:
        png_path = save_stacks_plot(args.plot, contents_dir=args.contents)
        print(f"[advent2022] Stacks plot written to: {png_path}")

    if args.benchmark is not None:
        stats = benchmark_days(args.day, contents_dir=args.contents, repeats=args.benchmark)
        print("[advent2022] Benchmark (seconds):")
        print(stats.to_string(index=False))

    return table


if __name__ == "__main__":
    main()
