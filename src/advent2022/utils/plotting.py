"""
Visualization helpers for the day five crate stacks.

These helpers are thin convenience wrappers around matplotlib for:
- Drawing a single stack mapping as columns of labelled crates.
- Drawing several mappings side-by-side (e.g. initial stacks, single-crate
  result, block result) for comparison.

Typical usage in a notebook
---------------------------

    import matplotlib.pyplot as plt
    from advent2022.days import five
    from advent2022.utils.plotting import plot_stacks

    stacks, moves = five.parse_puzzle(lines)
    fig, ax = plt.subplots(figsize=(6, 6))
    plot_stacks(stacks, ax=ax, title="Initial stacks")

You remain in control of figure creation and display.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

import matplotlib.pyplot as plt


# Stack id -> labels, bottom-to-top (same shape as `days.five.Stacks`).
StackMapping = Dict[int, List[str]]

CRATE_SIZE: float = 0.9


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _draw_crate(ax, x: float, y: float, label: str) -> None:
    """
    Draw one crate with its label centered, lower-left corner at (x, y).
    """
    ax.add_patch(
        plt.Rectangle(
            (x, y),
            CRATE_SIZE,
            CRATE_SIZE,
            fill=True,
            alpha=0.4,
            linewidth=0.8,
            edgecolor="black",
        )
    )
    ax.text(
        x + CRATE_SIZE / 2,
        y + CRATE_SIZE / 2,
        label,
        ha="center",
        va="center",
        fontsize=10,
    )


# ---------------------------------------------------------------------------
# Public plotting helpers
# ---------------------------------------------------------------------------

def plot_stacks(
    stacks: StackMapping,
    ax=None,
    title: Optional[str] = None,
    min_height: int = 1,
):
    """
    Plot a stack mapping, one column per stack id, bottom crate at y = 0.

    Parameters
    ----------
    stacks:
        Mapping of stack id to labels, bottom-to-top.
    ax:
        Optional matplotlib Axes. If None, a new figure and axes are created.
    title:
        Optional plot title.
    min_height:
        Minimum number of crate rows shown, so empty mappings still render.

    Returns
    -------
    The Axes that was drawn on.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))

    stack_ids = sorted(stacks)
    for col, stack_id in enumerate(stack_ids):
        for level, label in enumerate(stacks[stack_id]):
            _draw_crate(ax, float(col), float(level), label)

    height = max([min_height] + [len(labels) for labels in stacks.values()])

    ax.set_xlim(-0.5, max(len(stack_ids), 1) + 0.5)
    ax.set_ylim(-0.5, height + 0.5)
    ax.set_xticks([col + CRATE_SIZE / 2 for col in range(len(stack_ids))])
    ax.set_xticklabels([str(stack_id) for stack_id in stack_ids])
    ax.set_yticks([])
    ax.set_aspect("equal", adjustable="box")
    if title is not None:
        ax.set_title(title)

    return ax


def plot_stacks_grid(
    mappings: Sequence[StackMapping],
    titles: Optional[Sequence[str]] = None,
    ncols: int = 3,
    figsize_per_plot: Tuple[float, float] = (4.0, 5.0),
):
    """
    Plot several stack mappings in a grid of subplots.

    All subplots share the same height so crate sizes are comparable.

    Parameters
    ----------
    mappings:
        Sequence of stack mappings.
    titles:
        Optional sequence of titles, one per mapping.
    ncols:
        Number of columns in the subplot grid.
    figsize_per_plot:
        Size of each subplot in inches (width, height).

    Returns
    -------
    (fig, axes):
        The matplotlib Figure and 2D array of Axes.
    """
    num = len(mappings)
    if num == 0:
        raise ValueError("plot_stacks_grid called with an empty list of mappings.")

    if titles is not None and len(titles) != num:
        raise ValueError("If provided, 'titles' must match the number of mappings.")

    ncols = min(ncols, num)
    nrows = (num + ncols - 1) // ncols
    fig, axes = plt.subplots(
        nrows,
        ncols,
        figsize=(figsize_per_plot[0] * ncols, figsize_per_plot[1] * nrows),
        squeeze=False,
    )

    tallest = max(
        max((len(labels) for labels in stacks.values()), default=0)
        for stacks in mappings
    )

    axes_flat = list(axes.flat)
    for i, stacks in enumerate(mappings):
        title_i = titles[i] if titles is not None else None
        plot_stacks(stacks, ax=axes_flat[i], title=title_i, min_height=max(tallest, 1))

    # Hide any unused axes
    for j in range(num, len(axes_flat)):
        axes_flat[j].axis("off")

    fig.tight_layout()
    return fig, axes


__all__ = [
    "StackMapping",
    "plot_stacks",
    "plot_stacks_grid",
]
