"""
I/O utilities for the Advent of Code 2022 solvers.

This module centralizes file and path handling so that:
- Solvers never touch the filesystem; they receive a list of lines.
- Scripts and tests do *not* hard-code input paths.
- Writing the results table is consistent across the project.

Typical usage
-------------

    from advent2022.utils.io import read_puzzle_lines, save_results_df

    lines = read_puzzle_lines(5)
    csv_path = save_results_df(results_df)
    print("Wrote results to:", csv_path)
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

import datetime as dt
import pandas as pd

from ..config import CONTENTS_DIR, RESULTS_DIR, input_filename_for_day


PathLike = Union[str, Path]


# ---------------------------------------------------------------------------
# Directory helpers
# ---------------------------------------------------------------------------

def get_results_dir() -> Path:
    """
    Return the results directory path (`results/`), creating it if needed.
    """
    RESULTS_DIR.mkdir(parents=True, exist_ok=True)
    return RESULTS_DIR


def get_timestamped_results_path(
    prefix: str = "results",
    suffix: str = ".csv",
) -> Path:
    """
    Build a timestamped path under `results/`.

    Example output filename:
        results_20221205_061503.csv
    """
    results_dir = get_results_dir()
    timestamp = dt.datetime.now().strftime("%Y%m%d_%H%M%S")
    return results_dir / f"{prefix}_{timestamp}{suffix}"


def get_input_path(day: int, contents_dir: Optional[PathLike] = None) -> Path:
    """
    Path of the puzzle input for `day`, e.g. `contents/day_five.txt`.

    Parameters
    ----------
    day:
        Puzzle day (1-based).
    contents_dir:
        Directory holding the inputs. Defaults to `CONTENTS_DIR`.
    """
    base = Path(contents_dir) if contents_dir is not None else CONTENTS_DIR
    return base / input_filename_for_day(day)


# ---------------------------------------------------------------------------
# Loading helpers
# ---------------------------------------------------------------------------

def read_lines(path: PathLike) -> List[str]:
    """
    Read a text file into a list of lines without line terminators.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    """
    text_path = Path(path)
    if not text_path.exists():
        raise FileNotFoundError(f"Input file not found: {text_path}")
    return text_path.read_text(encoding="utf-8").splitlines()


def read_puzzle_lines(day: int, contents_dir: Optional[PathLike] = None) -> List[str]:
    """
    Load the input lines for `day`.

    Raises
    ------
    FileNotFoundError
        If the input file is missing, with a hint where to put it.
    """
    path = get_input_path(day, contents_dir)
    if not path.exists():
        raise FileNotFoundError(
            f"Puzzle input for day {day} not found at {path}. "
            f"Place your input as '{path.name}' under {path.parent}."
        )
    return read_lines(path)


# ---------------------------------------------------------------------------
# Saving helpers
# ---------------------------------------------------------------------------

def save_results_df(
    results_df: pd.DataFrame,
    path: Optional[PathLike] = None,
    prefix: str = "results",
) -> Path:
    """
    Save the runner's results table to CSV.

    Parameters
    ----------
    results_df:
        DataFrame with columns day, part, answer, elapsed.
    path:
        Optional explicit output path. If None, a timestamped filename is
        created under `results/` via `get_timestamped_results_path`.
    prefix:
        Filename prefix when generating a timestamped path.

    Returns
    -------
    Path
        The path to the written CSV.
    """
    if path is None:
        out_path = get_timestamped_results_path(prefix=prefix)
    else:
        out_path = Path(path)
        out_path.parent.mkdir(parents=True, exist_ok=True)

    results_df.to_csv(out_path, index=False)
    return out_path


__all__ = [
    "PathLike",
    "get_results_dir",
    "get_timestamped_results_path",
    "get_input_path",
    "read_lines",
    "read_puzzle_lines",
    "save_results_df",
]
