#!/usr/bin/env python
"""
CLI helper to run the Advent of Code 2022 solvers from a checkout.

This script is a thin wrapper around the library entry points:

- advent2022.runner.run_days
- advent2022.utils.io.save_results_df  (optional)
- advent2022.runner.save_stacks_plot   (optional)

Typical usage from the project root
-----------------------------------

    python scripts/run_days.py
    # or
    python scripts/run_days.py --day 5
    python scripts/run_days.py --day 1 --day 4 --contents my_inputs/
    python scripts/run_days.py --output results/answers.csv
    python scripts/run_days.py --day 5 --plot results/day_five.png

The script automatically adds `src/` to PYTHONPATH so that it can import the
`advent2022` package without requiring installation.
"""

from __future__ import annotations

import argparse
from pathlib import Path
import sys
from typing import Optional, List


def _ensure_src_on_path() -> Path:
    """
    Ensure that <project_root>/src is on sys.path and return project_root.

    Assumes this file lives in <project_root>/scripts/run_days.py.
    """
    project_root = Path(__file__).resolve().parents[1]
    src_dir = project_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))
    return project_root


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run the Advent of Code 2022 solvers and print their answers.",
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
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    project_root = _ensure_src_on_path()

    # Imports done after path configuration
    from advent2022.runner import run_days, save_stacks_plot
    from advent2022.utils.io import save_results_df

    args = _parse_args(argv)

    print(f"[run_days] Project root: {project_root}")
    if args.contents is not None:
        print(f"[run_days] Inputs: {args.contents}")

    table = run_days(args.day, contents_dir=args.contents)
    print(table.to_string(index=False))

    if args.output is not None:
        csv_path = save_results_df(table, path=Path(args.output))
        print(f"[run_days] Results written to: {csv_path}")

    if args.plot is not None:
        png_path = save_stacks_plot(args.plot, contents_dir=args.contents)
        print(f"[run_days] Stacks plot written to: {png_path}")


if __name__ == "__main__":
    main()
