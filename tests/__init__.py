"""
Test package for the Advent of Code 2022 solvers.

This directory collects unit and integration tests for:

- The crate diagram and move parsers (`test_crate_parsing.py`)
- The crate simulation engine and reporter (`test_crate_simulation.py`)
- The simpler days one to four (`test_days.py`)
- Input loading, the runner and plotting (`test_runner.py`)

You can run tests with:

    pytest
    # or
    python -m pytest

from the project root.
"""

__all__ = []
