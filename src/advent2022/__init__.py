"""
Advent of Code 2022 – daily puzzle solvers

Each day lives in its own module under `advent2022.days` and exposes a
`solve(lines)` function. The crate-stack simulator (`days.five`) is the
largest of them. See `advent2022.runner` for running days from the command
line and the `utils` subpackage for I/O, timing and plotting helpers.
"""

__all__ = []

__version__ = "0.1.0"
