"""Transition rule of the forest fire automaton."""

from __future__ import annotations

from typing import Protocol

import numpy as np

from .constants import NEIGHBOUR_OFFSETS
from .grid import ASH, FIRE, TREE, Grid


class RandomSource(Protocol):
    """Anything with a ``random()`` method returning floats in [0, 1)."""

    def random(self) -> float: ...


def advance(grid: Grid, spread_probability: float, rng: RandomSource) -> tuple[Grid, bool]:
    """
    Compute the next state of the grid.

    The rule reads only the old grid and writes into a copy, so a tree
    ignited in this step cannot spread fire until the next one. Every
    burning cell turns to ash. For each burning cell (row-major order),
    each orthogonal neighbour (up, right, down, left) that is a tree in the
    old grid gets one independent draw and ignites if the draw is below
    ``spread_probability``. A tree next to several fires is therefore
    tested once per burning neighbour.

    Args:
        grid: Current grid; left untouched
        spread_probability: Per-neighbour ignition chance in [0, 1]
        rng: Seedable random source

    Returns:
        Tuple of (next grid, whether any fire remains in it)
    """
    if not 0.0 <= spread_probability <= 1.0:
        raise ValueError(f"spread_probability must be between 0 and 1, got {spread_probability}")

    old = grid.cells
    if not np.any(old == FIRE):
        return Grid(old), False

    height, width = old.shape
    nxt = old.copy()

    # argwhere yields indices in row-major order
    for row, col in np.argwhere(old == FIRE):
        nxt[row, col] = ASH
        for dr, dc in NEIGHBOUR_OFFSETS:
            r, c = row + dr, col + dc
            if 0 <= r < height and 0 <= c < width and old[r, c] == TREE:
                if rng.random() < spread_probability:
                    nxt[r, c] = FIRE

    next_grid = Grid(nxt)
    return next_grid, next_grid.has_fire()
