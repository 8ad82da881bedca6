"""
Utility helpers for the Advent of Code 2022 solvers.

Small, reusable helpers that don't belong to any single day:

- Input / output paths and loading (`io.py`)
- Timing of solver runs (`timing.py`)
- Plotting of the day five crate stacks (`plotting.py`)
"""

__all__ = []
