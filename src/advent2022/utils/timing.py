"""
Simple timing helpers for the Advent of Code 2022 solvers.

These utilities provide lightweight ways to measure execution time for:

- Individual code blocks (context manager). The runner wraps each day in a
  `Timer` so the results table carries the elapsed time per day.
- Functions (decorator).
- Repeated runs of a solver (`benchmark`, behind the runner's
  `--benchmark` flag).

No dependencies beyond the standard library.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import functools
import statistics
import time


@dataclass
class Timer:
    """
    Context manager for measuring wall-clock time of a code block.

    Usage
    -----
        from advent2022.utils.timing import Timer

        with Timer("day five") as timer:
            answers = five.solve(lines)
        print(timer.elapsed)

    Attributes
    ----------
    name:
        Optional label printed when exiting the context.
    verbose:
        If False, nothing is printed; `elapsed` is still recorded.
    elapsed:
        Duration in seconds. Available after the context exits.
    """

    name: Optional[str] = None
    verbose: bool = True
    start: float = 0.0
    end: float = 0.0
    elapsed: float = 0.0

    def __enter__(self) -> "Timer":
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.end = time.perf_counter()
        self.elapsed = self.end - self.start
        if self.verbose:
            label = f"[Timer] {self.name}: " if self.name else "[Timer] "
            print(f"{label}{self.elapsed:.4f} s")


def time_block(name: Optional[str] = None, verbose: bool = True) -> Timer:
    """
    Convenience function to create a named `Timer`.

        with time_block("day five"):
            five.solve(lines)
    """
    return Timer(name=name, verbose=verbose)


# ---------------------------------------------------------------------------
# Decorator for timing functions
# ---------------------------------------------------------------------------

def timeit(name: Optional[str] = None) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Decorator to time a function call and print its duration.

    Usage
    -----
        from advent2022.utils.timing import timeit

        @timeit("day five plot")
        def draw():
            return save_stacks_plot("stacks.png")

        draw()  # prints "[timeit] day five plot: ..." and returns the path
    """
    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        label = name or func.__name__

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            result = func(*args, **kwargs)
            elapsed = time.perf_counter() - start
            print(f"[timeit] {label}: {elapsed:.4f} s")
            return result

        return wrapper

    return decorator


# ---------------------------------------------------------------------------
# Simple benchmarking helper
# ---------------------------------------------------------------------------

def benchmark(
    func: Callable[..., Any],
    *args,
    repeats: int = 5,
    warmup: int = 1,
    **kwargs,
) -> Dict[str, float]:
    """
    Run a simple micro-benchmark of `func(*args, **kwargs)`.

    - Runs the function `warmup` times without recording.
    - Then runs it `repeats` times, recording elapsed durations.

    Returns
    -------
    dict with keys 'min', 'mean', 'max' (seconds) and 'repeats'.

    Raises
    ------
    ValueError
        If `repeats` is smaller than 1 or `warmup` is negative.
    """
    if repeats < 1:
        raise ValueError(f"repeats must be at least 1, got {repeats}")
    if warmup < 0:
        raise ValueError(f"warmup must not be negative, got {warmup}")

    for _ in range(warmup):
        func(*args, **kwargs)

    times = []
    for _ in range(repeats):
        start = time.perf_counter()
        func(*args, **kwargs)
        times.append(time.perf_counter() - start)

    return {
        "min": min(times),
        "mean": statistics.mean(times),
        "max": max(times),
        "repeats": float(repeats),
    }


__all__ = [
    "Timer",
    "time_block",
    "timeit",
    "benchmark",
]
