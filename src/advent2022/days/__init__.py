"""
Daily puzzle solvers for Advent of Code 2022.

Each module parses its own input and exposes `solve(lines)`, returning the
answers to both parts of the puzzle:

- Calorie counting (`one.py`)
- Rock paper scissors scoring (`two.py`)
- Rucksack priorities (`three.py`)
- Section assignment overlaps (`four.py`)
- Crate-stack simulation (`five.py`)

`advent2022.runner` maps day numbers to these modules.
"""

__all__ = []
